"""SQL file import against the embedded database.

Statements run one at a time and are committed individually, so a failure
mid-script leaves the earlier statements applied.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from sqlalchemy import Engine
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError

from launcher.domain import STEP_STATUS_FAILED, STEP_STATUS_SKIPPED, STEP_STATUS_SUCCESS

from .interfaces import SqlImportResult
from .session import db_build_url, db_create_engine
from .sql_script import SqlScriptError, db_iter_sql_statements

_LOGGER = logging.getLogger(__name__)


def db_import_sql_file(
    sql_file: Path,
    database_url: str,
    user: str | None,
    password: str | None,
    engine_factory: Callable[[URL], Engine] = db_create_engine,
) -> SqlImportResult:
    """Execute a SQL script against the database, stopping at the first error.

    A missing script is reported as `skipped` without opening a connection. A
    path that exists but cannot be read as a file, such as a directory, fails.
    Connection, file and statement failures are logged and returned as a
    `failed` result; this function does not raise them.

    Args:
        sql_file: SQL script path.
        database_url: JDBC or SQLAlchemy database URL.
        user: Database user.
        password: Database password.
        engine_factory: Engine constructor, replaceable for tests.

    Returns:
        SqlImportResult: Import outcome with the number of applied statements.

    Raises:
        RuntimeError: This function does not raise runtime errors.
    """

    resolved_sql_file = Path(sql_file)
    if not resolved_sql_file.exists():
        _LOGGER.error("SQL file not found: %s", resolved_sql_file.absolute())
        return SqlImportResult(
            sql_file=resolved_sql_file,
            status=STEP_STATUS_SKIPPED,
            error_message=f"SQL file not found: {resolved_sql_file.absolute()}",
        )

    _LOGGER.info("Preparing to import %s data", resolved_sql_file)
    statements_executed = 0
    engine: Engine | None = None
    try:
        engine = engine_factory(db_build_url(database_url, user=user, password=password))
        with engine.connect() as connection:
            # Statements are sent verbatim so pyformat drivers never interpolate `%`.
            connection = connection.execution_options(no_parameters=True)
            _LOGGER.info("Importing SQL from: %s", resolved_sql_file.absolute())
            with resolved_sql_file.open("r", encoding="utf-8") as script_reader:
                for statement in db_iter_sql_statements(script_reader):
                    try:
                        connection.exec_driver_sql(statement.text)
                        connection.commit()
                    except SQLAlchemyError as error:
                        connection.rollback()
                        raise SqlScriptError(
                            f"Error executing statement {statement.index} "
                            f"(line {statement.line_number}): {error}",
                            statement_index=statement.index,
                        ) from error
                    statements_executed += 1
    except (SqlScriptError, SQLAlchemyError, OSError, UnicodeDecodeError, ValueError, ImportError) as error:
        _LOGGER.error("Error importing SQL %s: %s", resolved_sql_file, error, exc_info=True)
        return SqlImportResult(
            sql_file=resolved_sql_file,
            status=STEP_STATUS_FAILED,
            statements_executed=statements_executed,
            error_message=str(error),
            failed_statement_index=getattr(error, "statement_index", None),
        )
    finally:
        if engine is not None:
            engine.dispose()

    _LOGGER.info("Successfully imported SQL: %s (%d statements)", resolved_sql_file.absolute(), statements_executed)
    return SqlImportResult(
        sql_file=resolved_sql_file,
        status=STEP_STATUS_SUCCESS,
        statements_executed=statements_executed,
    )
