"""Main module entrypoint for launcher bootstrap commands.

This module validates launcher settings and runs one bootstrap command.
"""

import argparse
import logging
from pathlib import Path

from launcher.bootstrap import (
    ConfigurationRequiredError,
    StartupOrchestrator,
    bootstrap_resolve_connection_parameters,
)
from launcher.config import LauncherSettings, config_build_application_title, config_load_settings
from launcher.db import DumpExecutableNotFoundError, db_import_sql_file, db_resolve_dump_executable

_LOGGER = logging.getLogger("launcher")


def main(argv: list[str] | None = None) -> int:
    """Run the selected launcher command with validated settings.

    Args:
        argv: Optional argument list; defaults to process arguments.

    Returns:
        int: Process exit code, `1` when a fatal step failed.

    Raises:
        SettingsLoadError: Raised when settings validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="OpenMRS standalone launcher bootstrap")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="bootstrap",
        choices=("bootstrap", "locate-config", "resolve-dump", "import-sql", "rebuild-index"),
        help="`bootstrap` runs configuration discovery and seed imports, `locate-config` prints the runtime "
        "properties source, `resolve-dump` prints the dump executable, `import-sql` imports one file, "
        "`rebuild-index` triggers a search index rebuild on the running service",
        type=str,
    )
    argument_parser.add_argument(
        "sql_file",
        nargs="?",
        type=Path,
        help="SQL file for `import-sql`",
    )
    argument_parser.add_argument(
        "--require-config",
        dest="require_config",
        action="store_true",
        help="Fail when no runtime properties file can be found",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    settings = config_load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    _LOGGER.info("%s", config_build_application_title(settings.platform_version))
    orchestrator = StartupOrchestrator(settings=settings)

    if parsed_arguments.command == "locate-config":
        runtime_configuration = orchestrator.startup_locate_configuration()
        if runtime_configuration is None:
            return 1
        print(runtime_configuration.source_path)
        return 0

    if parsed_arguments.command == "resolve-dump":
        try:
            print(db_resolve_dump_executable(settings.install_root, settings.database_subdirectory))
        except DumpExecutableNotFoundError as error:
            _LOGGER.error("%s", error)
            return 1
        return 0

    if parsed_arguments.command == "import-sql":
        if parsed_arguments.sql_file is None:
            argument_parser.error("import-sql requires a SQL file argument")
        return main_import_single_file(settings, orchestrator, parsed_arguments.sql_file)

    if parsed_arguments.command == "rebuild-index":
        rebuild_result = orchestrator.startup_after_service_start()
        return 0 if rebuild_result.succeeded else 1

    try:
        report = orchestrator.startup_prepare_environment(require_configuration=parsed_arguments.require_config)
    except (ConfigurationRequiredError, DumpExecutableNotFoundError) as error:
        _LOGGER.error("Bootstrap aborted: %s", error)
        return 1
    if not report.all_imports_succeeded:
        _LOGGER.warning("Bootstrap finished with SQL import failures")
    return 0


def main_import_single_file(settings: LauncherSettings, orchestrator: StartupOrchestrator, sql_file: Path) -> int:
    """Import one SQL file using the effective connection parameters.

    Args:
        settings: Validated launcher settings.
        orchestrator: Orchestrator used to locate runtime configuration.
        sql_file: SQL script to import.

    Returns:
        int: `0` when the import applied completely, otherwise `1`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    connection_parameters = bootstrap_resolve_connection_parameters(
        settings,
        orchestrator.startup_locate_configuration(),
    )
    import_result = db_import_sql_file(
        sql_file,
        connection_parameters.database_url,
        connection_parameters.user,
        connection_parameters.password,
    )
    return 0 if import_result.succeeded else 1


if __name__ == "__main__":
    raise SystemExit(main())
