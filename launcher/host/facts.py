"""Host operating-system classification.

Classification is a pure function of the host-reported OS name so callers can
pass an explicit name (tests, discovery overrides) without touching process
state.
"""

from __future__ import annotations

import enum
import platform
from typing import Final

UNIX_OPERATING_SYSTEM_NAMES: Final[tuple[str, ...]] = ("Linux", "SunOS", "FreeBSD", "Mac OS X")

# platform.system() values that differ from the conventional OS display names.
_REPORTED_NAME_ALIASES: Final[dict[str, str]] = {
    "Darwin": "Mac OS X",
}


class PlatformClass(str, enum.Enum):
    """Operating-system family used by path and executable decisions."""

    UNIX = "unix"
    WINDOWS = "windows"


def host_reported_os_name() -> str:
    """Return the OS name reported by the running host.

    Returns:
        str: Host OS name such as `Linux`, `Mac OS X` or `Windows`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    system_name = platform.system()
    return _REPORTED_NAME_ALIASES.get(system_name, system_name)


def host_classify_platform(os_name: str | None = None) -> PlatformClass:
    """Classify an OS name into its platform family.

    Any name that contains one of the recognized UNIX-family identifiers is
    UNIX; everything else, including an empty name, is the Windows family.

    Args:
        os_name: OS name to classify. Defaults to the live host OS name.

    Returns:
        PlatformClass: Platform family for the OS name.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    resolved_os_name = host_reported_os_name() if os_name is None else os_name
    if any(unix_name in resolved_os_name for unix_name in UNIX_OPERATING_SYSTEM_NAMES):
        return PlatformClass.UNIX
    return PlatformClass.WINDOWS


def host_is_windows_os_name(os_name: str | None = None) -> bool:
    """Return whether an OS name contains `win`, case-insensitively.

    This check intentionally differs from `host_classify_platform`: it is used
    for executable naming and always reads the live host name unless one is
    supplied.

    Args:
        os_name: OS name to test. Defaults to the live host OS name.

    Returns:
        bool: True when the name looks like a Windows host.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    resolved_os_name = host_reported_os_name() if os_name is None else os_name
    return "win" in resolved_os_name.lower()
