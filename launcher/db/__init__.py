"""Database layer package for SQL bootstrap and embedded database discovery."""

from .dump_executable import (
	UNIX_DUMP_EXECUTABLE,
	WINDOWS_DUMP_EXECUTABLE,
	DumpExecutableNotFoundError,
	db_resolve_dump_executable,
)
from .interfaces import SqlImportResult
from .session import db_build_url, db_create_engine, db_translate_jdbc_url
from .sql_import import db_import_sql_file
from .sql_script import SqlScriptError, SqlStatement, db_iter_sql_statements

__all__ = [
	"DumpExecutableNotFoundError",
	"SqlImportResult",
	"SqlScriptError",
	"SqlStatement",
	"UNIX_DUMP_EXECUTABLE",
	"WINDOWS_DUMP_EXECUTABLE",
	"db_build_url",
	"db_create_engine",
	"db_import_sql_file",
	"db_iter_sql_statements",
	"db_resolve_dump_executable",
	"db_translate_jdbc_url",
]
