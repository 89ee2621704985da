"""Runtime configuration file discovery and loading.

Search order, first readable candidate wins:

1. `{cwd}/{application_name}-runtime.properties`
2. the file named by `{APPLICATION_NAME}_RUNTIME_PROPERTIES_FILE`
3. `{application data directory}/{application_name}-runtime.properties`
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Mapping

from launcher.host import PlatformClass, host_resolve_application_data_directory

from .properties_format import RuntimePropertiesFormatError, config_parse_properties
from .settings import DEFAULT_APPLICATION_NAME

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeConfiguration:
    """Runtime configuration loaded from exactly one discovered source.

    Attributes:
        source_path: Path of the file that supplied the configuration.
        properties: Read-only key/value content.
        discovery_platform: Platform classification in effect during discovery.
        attempted_paths: Every candidate path probed, in search order.
    """

    source_path: Path
    properties: Mapping[str, str]
    discovery_platform: PlatformClass = PlatformClass.WINDOWS
    attempted_paths: tuple[Path, ...] = field(default_factory=tuple)

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return one property value or the default when absent."""

        return self.properties.get(key, default)


def config_runtime_properties_filename(application_name: str) -> str:
    """Return the runtime properties filename for an application name."""

    return f"{application_name}-runtime.properties"


def config_runtime_properties_env_var(application_name: str) -> str:
    """Return the environment variable naming an explicit runtime properties file."""

    return f"{application_name.upper()}_RUNTIME_PROPERTIES_FILE"


def config_locate_runtime_properties(
    application_name: str | None = None,
    discovery_platform: PlatformClass = PlatformClass.WINDOWS,
    working_directory: Path | None = None,
    environ: Mapping[str, str] | None = None,
    data_directory_resolver: Callable[[], Path] | None = None,
) -> RuntimeConfiguration | None:
    """Find and load the runtime properties file for one application.

    Missing candidates advance the search. Once a candidate is opened, a read,
    decode or format failure is logged and the overall result is absent; no
    partially-populated configuration is returned.

    Args:
        application_name: Application identity. Defaults to `openmrs` when None or blank.
        discovery_platform: Platform classification downstream consumers should
            assume for paths taken from this configuration.
        working_directory: Directory for the first candidate. Defaults to the process cwd.
        environ: Environment mapping. Defaults to `os.environ`.
        data_directory_resolver: Callable returning the application data
            directory. Only invoked when the first two candidates miss.

    Returns:
        RuntimeConfiguration | None: Loaded configuration, or None when no source is usable.

    Raises:
        RuntimeError: This function does not raise runtime errors.
    """

    resolved_name = (application_name or "").strip() or DEFAULT_APPLICATION_NAME
    resolved_environ = os.environ if environ is None else environ
    resolved_working_directory = working_directory if working_directory is not None else Path.cwd()
    resolve_data_directory = data_directory_resolver or host_resolve_application_data_directory
    filename = config_runtime_properties_filename(resolved_name)
    attempted_paths: list[Path] = []

    cwd_candidate = resolved_working_directory / filename
    _LOGGER.info("Attempting to load properties file in current directory: %s", cwd_candidate)
    selected_path = _config_probe_candidate(cwd_candidate, attempted_paths)

    if selected_path is None:
        env_var_name = config_runtime_properties_env_var(resolved_name)
        env_value = resolved_environ.get(env_var_name, "")
        if env_value:
            env_candidate = Path(env_value)
            if not env_candidate.is_absolute():
                env_candidate = resolved_working_directory / env_candidate
            _LOGGER.info("Attempting to load runtime properties from %s: %s", env_var_name, env_candidate)
            selected_path = _config_probe_candidate(env_candidate, attempted_paths)

    if selected_path is None:
        data_directory_candidate = resolve_data_directory() / filename
        _LOGGER.info("Attempting to load property file from: %s", data_directory_candidate)
        selected_path = _config_probe_candidate(data_directory_candidate, attempted_paths)

    if selected_path is None:
        _LOGGER.warning("Failed to get runtime properties file. Searched: %s", [str(path) for path in attempted_paths])
        return None

    try:
        properties = config_parse_properties(selected_path.read_bytes().decode("utf-8"))
    except UnicodeDecodeError as error:
        _LOGGER.error("Unsupported encoding used in properties file %s: %s", selected_path, error)
        return None
    except OSError as error:
        _LOGGER.error("Unable to read properties from properties file %s: %s", selected_path, error)
        return None
    except RuntimePropertiesFormatError as error:
        _LOGGER.error("Malformed properties file %s: %s", selected_path, error)
        return None

    _LOGGER.info("Using runtime properties file: %s", selected_path)
    return RuntimeConfiguration(
        source_path=selected_path,
        properties=MappingProxyType(properties),
        discovery_platform=discovery_platform,
        attempted_paths=tuple(attempted_paths),
    )


def _config_probe_candidate(candidate: Path, attempted_paths: list[Path]) -> Path | None:
    """Return the candidate when it can be opened for reading, otherwise None."""

    attempted_paths.append(candidate)
    try:
        with candidate.open("rb"):
            return candidate
    except OSError:
        _LOGGER.debug("Runtime properties candidate not readable: %s", candidate)
        return None
