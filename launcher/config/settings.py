"""Typed launcher settings with dotenv support and startup validation."""

from pathlib import Path
from typing import Final

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

EMBEDDED_DATABASE_PORT: Final[int] = 3316
DEFAULT_APPLICATION_NAME: Final[str] = "openmrs"


class SettingsLoadError(RuntimeError):
    """Raised when launcher settings cannot be loaded or validated."""


class LauncherSettings(BaseSettings):
    """Launcher settings for bootstrap, database import and index rebuild.

    Environment variable names map directly to field names in uppercase.
    Example: `install_root` reads from `INSTALL_ROOT`.

    Attributes:
        application_name: Application identity used to derive config filenames.
        platform_version: Platform version shown in the launcher title.
        install_root: Installation tree holding the embedded database distribution.
        database_subdirectory: Embedded database directory under `install_root`.
        database_url: JDBC or SQLAlchemy URL of the embedded database.
        database_user: Database user for SQL imports.
        database_password: Database password for SQL imports.
        seed_sql_files: SQL files imported in order during first-run setup.
        resource_url: Base URL of the running web application.
        search_index_username: Basic-auth user for the index rebuild endpoint.
        search_index_password: Basic-auth password for the index rebuild endpoint.
        http_timeout_seconds: Timeout for every outbound HTTP request.
        readiness_attempts: Number of readiness probe attempts before notifying.
        readiness_interval_seconds: Delay between readiness probe attempts.
        log_level: Root logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    application_name: str = Field(default=DEFAULT_APPLICATION_NAME, min_length=1)
    platform_version: str = Field(default="")
    install_root: Path = Field(default=Path("."))
    database_subdirectory: str = Field(default="database", min_length=1)
    database_url: str = Field(
        default=(
            f"jdbc:mysql://127.0.0.1:{EMBEDDED_DATABASE_PORT}/openmrs"
            "?autoReconnect=true&useUnicode=true&characterEncoding=UTF-8"
        )
    )
    database_user: str = Field(default="openmrs")
    database_password: str = Field(default="")
    seed_sql_files: list[Path] = Field(default_factory=list)
    resource_url: str = Field(default="http://localhost:8081/openmrs")
    search_index_username: str = Field(default="admin")
    search_index_password: str = Field(default="test")
    http_timeout_seconds: float = Field(default=30.0, gt=0)
    readiness_attempts: int = Field(default=30, ge=1)
    readiness_interval_seconds: float = Field(default=2.0, ge=0)
    log_level: str = Field(default="INFO")

    @field_validator("application_name", "database_subdirectory", "resource_url")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unsupported log_level={value}")
        return normalized_value


def config_load_settings() -> LauncherSettings:
    """Load and validate launcher settings from environment and dotenv.

    Returns:
        LauncherSettings: Validated launcher settings object.

    Raises:
        SettingsLoadError: Raised when settings are missing or invalid.
    """

    try:
        return LauncherSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Launcher configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_build_application_title(platform_version: str) -> str:
    """Return the launcher window title for a platform version.

    Args:
        platform_version: Platform version label.

    Returns:
        str: Human-readable launcher title.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return f"OpenMRS Platform {platform_version} Standalone"
