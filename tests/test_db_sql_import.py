"""Tests for SQL file import stop-on-error behavior and failure reporting."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock

from pymysql.cursors import Cursor
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.engine import URL

from launcher.db import db_build_url, db_import_sql_file, db_translate_jdbc_url


def _count_rows(database_url: str, table_name: str) -> int:
    """Count rows in one table through a fresh engine.

    Args:
        database_url: SQLAlchemy database URL.
        table_name: Table to count.

    Returns:
        int: Row count.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: Raised when the query fails.
    """

    engine = create_engine(database_url)
    try:
        with engine.connect() as connection:
            return int(connection.execute(text(f"SELECT COUNT(*) FROM {table_name}")).scalar_one())
    finally:
        engine.dispose()


def test_db_import_sql_file_missing_file_skips_without_connecting(tmp_path: Path) -> None:
    """Report a missing script without opening any database connection.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate skip behavior.

    Raises:
        AssertionError: Raised when a connection is attempted.
    """

    engine_factory = Mock()

    result = db_import_sql_file(
        tmp_path / "missing.sql",
        "sqlite:///ignored.db",
        None,
        None,
        engine_factory=engine_factory,
    )

    assert result.status == "skipped"
    assert "SQL file not found" in (result.error_message or "")
    engine_factory.assert_not_called()


def test_db_import_sql_file_applies_all_statements(tmp_path: Path) -> None:
    """Apply every statement of a valid script.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate successful import.

    Raises:
        AssertionError: Raised when statements are not applied.
    """

    database_url = f"sqlite:///{tmp_path / 'import.db'}"
    sql_file = tmp_path / "seed.sql"
    sql_file.write_text(
        "-- demo data\n"
        "CREATE TABLE location (location_id INTEGER PRIMARY KEY, name TEXT);\n"
        "INSERT INTO location VALUES (1, 'Unknown Location');\n"
        "INSERT INTO location VALUES (2, 'Outpatient');\n",
        encoding="utf-8",
    )

    result = db_import_sql_file(sql_file, database_url, None, None)

    assert result.succeeded
    assert result.statements_executed == 3
    assert _count_rows(database_url, "location") == 2


def test_db_import_sql_file_stops_at_first_failing_statement(tmp_path: Path) -> None:
    """Keep statements before the failure applied and skip the rest.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate partial application and failure reporting.

    Raises:
        AssertionError: Raised when failure handling is incorrect.
    """

    database_url = f"sqlite:///{tmp_path / 'import.db'}"
    sql_file = tmp_path / "broken.sql"
    sql_file.write_text(
        "CREATE TABLE location (location_id INTEGER PRIMARY KEY);\n"
        "INSERT INTO location VALUES (1);\n"
        "INSERT INTO missing_table VALUES (2);\n"
        "INSERT INTO location VALUES (3);\n",
        encoding="utf-8",
    )

    result = db_import_sql_file(sql_file, database_url, None, None)

    assert result.status == "failed"
    assert result.statements_executed == 2
    assert result.failed_statement_index == 3
    assert "missing_table" in (result.error_message or "")
    assert _count_rows(database_url, "location") == 1


def test_db_import_sql_file_reports_connection_failure(tmp_path: Path) -> None:
    """Convert engine construction failures into a failed result.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate connection failure handling.

    Raises:
        AssertionError: Raised when the failure propagates.
    """

    sql_file = tmp_path / "seed.sql"
    sql_file.write_text("SELECT 1;\n", encoding="utf-8")
    engine_factory = Mock(side_effect=OSError("connection refused"))

    result = db_import_sql_file(sql_file, "jdbc:mysql://127.0.0.1:3316/openmrs", "openmrs", "secret", engine_factory)

    assert result.status == "failed"
    assert result.statements_executed == 0
    assert "connection refused" in (result.error_message or "")
    engine_factory.assert_called_once()


def test_db_translate_jdbc_url_maps_mysql_and_mariadb() -> None:
    """Translate JDBC URLs to PyMySQL-backed SQLAlchemy URLs.

    Returns:
        None: Assertions validate URL translation.

    Raises:
        AssertionError: Raised when translation is incorrect.
    """

    assert (
        db_translate_jdbc_url("jdbc:mysql://127.0.0.1:3316/openmrs?autoReconnect=true")
        == "mysql+pymysql://127.0.0.1:3316/openmrs"
    )
    assert db_translate_jdbc_url("jdbc:mariadb://localhost/openmrs") == "mariadb+pymysql://localhost/openmrs"
    assert db_translate_jdbc_url("sqlite:///demo.db") == "sqlite:///demo.db"


def test_db_build_url_applies_credentials() -> None:
    """Apply user and password to the translated URL.

    Returns:
        None: Assertions validate credential handling.

    Raises:
        AssertionError: Raised when credentials are missing.
    """

    url = db_build_url("jdbc:mysql://127.0.0.1:3316/openmrs", user="openmrs", password="secret")

    assert url.username == "openmrs"
    assert url.password == "secret"
    assert url.port == 3316
    assert url.database == "openmrs"


class _RecordingMySqlCursor(Cursor):
    """PyMySQL cursor that records the final query text instead of sending it."""

    def _query(self, q: str) -> int:
        """Record the query text that would reach the server.

        Args:
            q: Final query text after driver-side formatting.

        Returns:
            int: Deterministic affected-row count.

        Raises:
            RuntimeError: This stub does not raise runtime errors.
        """

        self.connection.sent_queries.append(q)
        self.rowcount = 1
        return 1


class _RecordingMySqlConnection:
    """DBAPI connection test double serving recording PyMySQL cursors."""

    _result = None

    def __init__(self):
        """Initialize recorded query state.

        Returns:
            None: Initializer does not return values.

        Raises:
            RuntimeError: This stub does not raise runtime errors.
        """

        self.sent_queries: list[str] = []
        self.commit_count = 0

    def cursor(self) -> _RecordingMySqlCursor:
        """Return a recording cursor bound to this connection."""

        return _RecordingMySqlCursor(self)

    def commit(self) -> None:
        """Count one commit."""

        self.commit_count += 1

    def rollback(self) -> None:
        """Accept rollback without side effects."""

    def close(self) -> None:
        """Accept close without side effects."""


def test_db_import_sql_file_sends_percent_literals_verbatim_to_pymysql(tmp_path: Path) -> None:
    """Send statements containing `%` unchanged through the PyMySQL dialect.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate verbatim statement text and full import.

    Raises:
        AssertionError: Raised when the driver formats or rejects statement text.
    """

    sql_file = tmp_path / "concepts.sql"
    sql_file.write_text(
        "INSERT INTO concept_name (name) VALUES ('Hello %s');\n"
        "INSERT INTO concept_name (name) VALUES ('100%');\n"
        "INSERT INTO concept_name (name) VALUES ('after');\n",
        encoding="utf-8",
    )
    dbapi_connection = _RecordingMySqlConnection()
    engine_urls: list[URL] = []

    def _engine_factory(url: URL) -> Engine:
        engine_urls.append(url)
        # Skip server capability detection; the recording connection has no server.
        return create_engine(url, creator=lambda: dbapi_connection, _initialize=False)

    result = db_import_sql_file(
        sql_file,
        "jdbc:mysql://127.0.0.1:3316/openmrs",
        "openmrs",
        "secret",
        engine_factory=_engine_factory,
    )

    assert engine_urls[0].drivername == "mysql+pymysql"
    assert result.succeeded, result.error_message
    assert result.statements_executed == 3
    assert dbapi_connection.sent_queries == [
        "INSERT INTO concept_name (name) VALUES ('Hello %s')",
        "INSERT INTO concept_name (name) VALUES ('100%')",
        "INSERT INTO concept_name (name) VALUES ('after')",
    ]
    assert dbapi_connection.commit_count >= 3


def test_db_import_sql_file_directory_path_is_failure(tmp_path: Path) -> None:
    """Report an existing but unreadable script path as a failed import.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate failure instead of skip.

    Raises:
        AssertionError: Raised when a directory is treated as a missing file.
    """

    script_directory = tmp_path / "seed.sql"
    script_directory.mkdir()

    result = db_import_sql_file(script_directory, f"sqlite:///{tmp_path / 'import.db'}", None, None)

    assert result.status == "failed"
    assert result.statements_executed == 0
    assert "SQL file not found" not in (result.error_message or "")
