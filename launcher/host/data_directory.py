"""Per-user application data directory resolution."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from .facts import PlatformClass, host_classify_platform

APPLICATION_BRAND: Final[str] = "OpenMRS"

_LOGGER = logging.getLogger(__name__)


def host_resolve_application_data_directory(
    platform_class: PlatformClass | None = None,
    home_directory: Path | None = None,
) -> Path:
    """Return the application data directory, creating it when missing.

    Layout is `{home}/.OpenMRS` on UNIX-family hosts and
    `{home}/Application Data/OpenMRS` on Windows-family hosts. Creation is
    best-effort; existence is not re-verified.

    Args:
        platform_class: Platform family. Defaults to the live host classification.
        home_directory: User home directory. Defaults to `Path.home()`.

    Returns:
        Path: Application data directory path.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    resolved_platform = platform_class or host_classify_platform()
    resolved_home = home_directory if home_directory is not None else Path.home()

    if resolved_platform is PlatformClass.UNIX:
        data_directory = resolved_home / f".{APPLICATION_BRAND}"
    else:
        data_directory = resolved_home / "Application Data" / APPLICATION_BRAND

    try:
        data_directory.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        _LOGGER.warning("Unable to create application data directory %s: %s", data_directory, error)
    return data_directory
