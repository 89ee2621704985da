"""Host platform facts and per-user data directory resolution."""

from .data_directory import APPLICATION_BRAND, host_resolve_application_data_directory
from .facts import (
    UNIX_OPERATING_SYSTEM_NAMES,
    PlatformClass,
    host_classify_platform,
    host_is_windows_os_name,
    host_reported_os_name,
)

__all__ = [
    "APPLICATION_BRAND",
    "UNIX_OPERATING_SYSTEM_NAMES",
    "PlatformClass",
    "host_classify_platform",
    "host_is_windows_os_name",
    "host_reported_os_name",
    "host_resolve_application_data_directory",
]
