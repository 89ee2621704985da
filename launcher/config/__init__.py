"""Configuration package for launcher settings and runtime properties discovery."""

from .properties_format import RuntimePropertiesFormatError, config_parse_properties
from .runtime_properties import (
    RuntimeConfiguration,
    config_locate_runtime_properties,
    config_runtime_properties_env_var,
    config_runtime_properties_filename,
)
from .settings import (
    DEFAULT_APPLICATION_NAME,
    EMBEDDED_DATABASE_PORT,
    LauncherSettings,
    SettingsLoadError,
    config_build_application_title,
    config_load_settings,
)

__all__ = [
    "DEFAULT_APPLICATION_NAME",
    "EMBEDDED_DATABASE_PORT",
    "LauncherSettings",
    "RuntimeConfiguration",
    "RuntimePropertiesFormatError",
    "SettingsLoadError",
    "config_build_application_title",
    "config_load_settings",
    "config_locate_runtime_properties",
    "config_parse_properties",
    "config_runtime_properties_env_var",
    "config_runtime_properties_filename",
]
