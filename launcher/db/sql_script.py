"""SQL script statement splitting.

Lines starting with `--` or `//` are comments. A statement ends on a line
whose trimmed text ends with the active delimiter. `DELIMITER x` lines, as
emitted by mysqldump around routines and triggers, switch the delimiter.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Iterable, Iterator

DEFAULT_DELIMITER: Final[str] = ";"
_DELIMITER_COMMAND_PATTERN: Final[re.Pattern[str]] = re.compile(r"^delimiter\s+(\S+)\s*$", re.IGNORECASE)


class SqlScriptError(RuntimeError):
    """Raised when a SQL script cannot be split or one of its statements fails.

    Attributes:
        statement_index: 1-based index of the failing statement, when known.
    """

    def __init__(self, message: str, statement_index: int | None = None):
        super().__init__(message)
        self.statement_index = statement_index


@dataclass(frozen=True)
class SqlStatement:
    """One executable statement extracted from a script.

    Attributes:
        index: 1-based statement position in the script.
        text: Statement text without its trailing delimiter.
        line_number: Line on which the statement terminated.
    """

    index: int
    text: str
    line_number: int


def db_iter_sql_statements(lines: Iterable[str]) -> Iterator[SqlStatement]:
    """Yield statements from script lines in order.

    Statements are produced lazily so that a caller executing them one by one
    stops reading at the first failing statement.

    Args:
        lines: Script lines, with or without trailing newlines.

    Yields:
        SqlStatement: Next complete statement.

    Raises:
        SqlScriptError: Raised when the script ends with an unterminated statement.
    """

    delimiter = DEFAULT_DELIMITER
    buffered_lines: list[str] = []
    statement_index = 0
    line_number = 0

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        trimmed_line = line.strip()

        if not buffered_lines:
            delimiter_match = _DELIMITER_COMMAND_PATTERN.match(trimmed_line)
            if delimiter_match is not None:
                delimiter = delimiter_match.group(1)
                continue
        if not trimmed_line or trimmed_line.startswith("--") or trimmed_line.startswith("//"):
            continue

        if trimmed_line.endswith(delimiter):
            buffered_lines.append(line[: line.rfind(delimiter)])
            statement_text = "\n".join(buffered_lines).strip()
            buffered_lines = []
            if not statement_text:
                continue
            statement_index += 1
            yield SqlStatement(index=statement_index, text=statement_text, line_number=line_number)
            continue

        buffered_lines.append(line)

    if buffered_lines:
        raise SqlScriptError(
            f"Line missing end-of-line terminator ({delimiter}) near line {line_number}: "
            f"{' '.join(part.strip() for part in buffered_lines)[:200]}",
            statement_index=statement_index + 1,
        )
