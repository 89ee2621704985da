"""Startup orchestration for configuration discovery, first-run import and index rebuild.

Steps run strictly in sequence on the calling thread:
locate configuration, resolve the dump executable, import seed SQL files,
then (once the web application runs) wait for it and trigger an index rebuild.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from launcher.adapters import SearchIndexRebuildAdapter, SearchIndexRebuildResult, ServiceReadinessProbe
from launcher.config import LauncherSettings, RuntimeConfiguration, config_locate_runtime_properties
from launcher.db import DumpExecutableNotFoundError, SqlImportResult, db_import_sql_file, db_resolve_dump_executable
from launcher.domain import STEP_STATUS_FAILED, STEP_STATUS_SKIPPED, STEP_STATUS_SUCCESS, domain_build_stage_event

_LOGGER = logging.getLogger(__name__)

RUNTIME_PROPERTY_CONNECTION_URL = "connection.url"
RUNTIME_PROPERTY_CONNECTION_USERNAME = "connection.username"
RUNTIME_PROPERTY_CONNECTION_PASSWORD = "connection.password"


class ConfigurationRequiredError(RuntimeError):
    """Raised when startup demands a runtime configuration and none was found."""


@dataclass(frozen=True)
class DatabaseConnectionParameters:
    """Connection inputs for SQL imports.

    Attributes:
        database_url: JDBC or SQLAlchemy database URL.
        user: Database user.
        password: Database password.
    """

    database_url: str
    user: str
    password: str


@dataclass
class StartupReport:
    """Collected outcome of the pre-service bootstrap steps.

    Attributes:
        runtime_configuration: Located runtime configuration, if any.
        dump_executable: Resolved dump executable path.
        import_results: One result per seed SQL file, in import order.
        stage_timeline: Structured stage events in execution order.
    """

    runtime_configuration: RuntimeConfiguration | None = None
    dump_executable: Path | None = None
    import_results: list[SqlImportResult] = field(default_factory=list)
    stage_timeline: list[dict[str, object]] = field(default_factory=list)

    @property
    def all_imports_succeeded(self) -> bool:
        """Return whether every seed SQL import applied completely."""

        return all(result.succeeded for result in self.import_results)


def bootstrap_resolve_connection_parameters(
    settings: LauncherSettings,
    runtime_configuration: RuntimeConfiguration | None,
) -> DatabaseConnectionParameters:
    """Return connection inputs, preferring runtime configuration values over settings.

    Args:
        settings: Validated launcher settings.
        runtime_configuration: Located runtime configuration, if any.

    Returns:
        DatabaseConnectionParameters: Effective connection inputs.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if runtime_configuration is None:
        return DatabaseConnectionParameters(
            database_url=settings.database_url,
            user=settings.database_user,
            password=settings.database_password,
        )
    return DatabaseConnectionParameters(
        database_url=runtime_configuration.get(RUNTIME_PROPERTY_CONNECTION_URL) or settings.database_url,
        user=runtime_configuration.get(RUNTIME_PROPERTY_CONNECTION_USERNAME) or settings.database_user,
        password=runtime_configuration.get(RUNTIME_PROPERTY_CONNECTION_PASSWORD, settings.database_password) or "",
    )


class StartupOrchestrator:
    """Run the launcher bootstrap sequence for one application instance."""

    def __init__(
        self,
        settings: LauncherSettings,
        search_index_adapter: SearchIndexRebuildAdapter | None = None,
        readiness_probe: ServiceReadinessProbe | None = None,
        configuration_locator: Callable[[str], RuntimeConfiguration | None] | None = None,
        sql_importer: Callable[..., SqlImportResult] | None = None,
    ):
        """Initialize startup orchestrator dependencies.

        Args:
            settings: Validated launcher settings.
            search_index_adapter: Optional rebuild adapter; built from settings when omitted.
            readiness_probe: Optional readiness probe; built from settings when omitted.
            configuration_locator: Optional runtime configuration locator.
            sql_importer: Optional SQL import function.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when settings are missing.
        """

        if settings is None:
            raise ValueError("settings must not be None")

        self._settings = settings
        self._search_index_adapter = search_index_adapter or SearchIndexRebuildAdapter(
            username=settings.search_index_username,
            password=settings.search_index_password,
            request_timeout_seconds=settings.http_timeout_seconds,
        )
        self._readiness_probe = readiness_probe or ServiceReadinessProbe(
            attempts=settings.readiness_attempts,
            interval_seconds=settings.readiness_interval_seconds,
            request_timeout_seconds=settings.http_timeout_seconds,
        )
        self._configuration_locator = configuration_locator or config_locate_runtime_properties
        self._sql_importer = sql_importer or db_import_sql_file

    def startup_locate_configuration(self, require_configuration: bool = False) -> RuntimeConfiguration | None:
        """Locate the runtime configuration for the configured application name.

        Args:
            require_configuration: Raise instead of returning None when nothing is found.

        Returns:
            RuntimeConfiguration | None: Located configuration.

        Raises:
            ConfigurationRequiredError: Raised when required configuration is absent.
        """

        runtime_configuration = self._configuration_locator(self._settings.application_name)
        if runtime_configuration is None and require_configuration:
            raise ConfigurationRequiredError(
                f"No runtime properties found for application '{self._settings.application_name}'"
            )
        return runtime_configuration

    def startup_prepare_environment(self, require_configuration: bool = False) -> StartupReport:
        """Run the pre-service bootstrap steps and collect their outcomes.

        SQL import failures are recorded in the report and do not stop later
        imports. A missing dump executable aborts the sequence; resolving it here
        is a precondition check on the embedded database distribution layout.

        Args:
            require_configuration: Treat missing runtime configuration as fatal.

        Returns:
            StartupReport: Outcomes and stage timeline of the bootstrap steps.

        Raises:
            ConfigurationRequiredError: Raised when required configuration is absent.
            DumpExecutableNotFoundError: Raised when the embedded database is incomplete.
        """

        report = StartupReport()

        runtime_configuration = self.startup_locate_configuration(require_configuration=require_configuration)
        report.runtime_configuration = runtime_configuration
        report.stage_timeline.append(
            domain_build_stage_event(
                stage="locate_config",
                status=STEP_STATUS_SUCCESS if runtime_configuration is not None else STEP_STATUS_SKIPPED,
                details=(
                    {"source_path": str(runtime_configuration.source_path)}
                    if runtime_configuration is not None
                    else None
                ),
            )
        )

        try:
            report.dump_executable = db_resolve_dump_executable(
                install_root=self._settings.install_root,
                database_subdirectory=self._settings.database_subdirectory,
            )
        except DumpExecutableNotFoundError as error:
            report.stage_timeline.append(
                domain_build_stage_event(
                    stage="resolve_dump_executable",
                    status=STEP_STATUS_FAILED,
                    details={"probed_path": str(error.probed_path)},
                    error_message=str(error),
                )
            )
            _LOGGER.error("%s", error)
            raise
        report.stage_timeline.append(
            domain_build_stage_event(
                stage="resolve_dump_executable",
                status=STEP_STATUS_SUCCESS,
                details={"path": str(report.dump_executable)},
            )
        )

        connection_parameters = bootstrap_resolve_connection_parameters(self._settings, runtime_configuration)
        for sql_file in self._settings.seed_sql_files:
            import_result = self._sql_importer(
                sql_file,
                connection_parameters.database_url,
                connection_parameters.user,
                connection_parameters.password,
            )
            report.import_results.append(import_result)
            report.stage_timeline.append(
                domain_build_stage_event(
                    stage="import_sql",
                    status=import_result.status,
                    details={
                        "sql_file": str(import_result.sql_file),
                        "statements_executed": import_result.statements_executed,
                    },
                    error_message=import_result.error_message,
                )
            )

        return report

    def startup_after_service_start(self) -> SearchIndexRebuildResult:
        """Wait for the web application and trigger a search index rebuild.

        Returns:
            SearchIndexRebuildResult: Rebuild outcome; `failed` without a request
            when the service never answered.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        resource_url = self._settings.resource_url
        readiness = self._readiness_probe.adapter_wait_until_ready(resource_url)
        if not readiness.ready:
            return SearchIndexRebuildResult(
                request_url=self._search_index_adapter.adapter_build_rebuild_url(resource_url),
                status=STEP_STATUS_FAILED,
                error_message=(
                    f"Service did not respond after {readiness.attempts} attempts: {readiness.error_message}"
                ),
            )
        return self._search_index_adapter.adapter_trigger_rebuild(resource_url)
