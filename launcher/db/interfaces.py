"""Typed result contracts for database-layer bootstrap operations."""

from dataclasses import dataclass
from pathlib import Path

from launcher.domain import STEP_STATUS_SUCCESS


@dataclass(frozen=True)
class SqlImportResult:
    """Outcome of importing one SQL file.

    Attributes:
        sql_file: Script path that was requested.
        status: Final import state (`success`, `failed`, `skipped`).
        statements_executed: Number of statements applied before completion or failure.
        error_message: Optional failure or skip reason.
        failed_statement_index: 1-based index of the statement that failed, if any.
    """

    sql_file: Path
    status: str
    statements_executed: int = 0
    error_message: str | None = None
    failed_statement_index: int | None = None

    @property
    def succeeded(self) -> bool:
        """Return whether every statement of the script was applied."""

        return self.status == STEP_STATUS_SUCCESS
