"""Tests for embedded database dump executable discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from launcher.db import (
    UNIX_DUMP_EXECUTABLE,
    WINDOWS_DUMP_EXECUTABLE,
    DumpExecutableNotFoundError,
    db_resolve_dump_executable,
)


def _create_executable(install_root: Path, executable_name: str) -> Path:
    """Create an empty executable placeholder in the embedded database tree.

    Args:
        install_root: Installation root directory.
        executable_name: Executable filename.

    Returns:
        Path: Created placeholder path.

    Raises:
        OSError: Raised when the file cannot be created.
    """

    executable_path = install_root / "database" / "bin" / executable_name
    executable_path.parent.mkdir(parents=True, exist_ok=True)
    executable_path.write_bytes(b"")
    return executable_path


def test_db_resolve_dump_executable_returns_mariadb_dump_on_unix(tmp_path: Path) -> None:
    """Return `bin/mariadb-dump` for non-Windows hosts.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate resolved path.

    Raises:
        AssertionError: Raised when the wrong executable is chosen.
    """

    executable_path = _create_executable(tmp_path, UNIX_DUMP_EXECUTABLE)

    assert db_resolve_dump_executable(tmp_path, "database", os_name="Linux") == executable_path


def test_db_resolve_dump_executable_returns_mysqldump_on_windows(tmp_path: Path) -> None:
    """Return `bin/mysqldump.exe` for Windows hosts.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate resolved path.

    Raises:
        AssertionError: Raised when the wrong executable is chosen.
    """

    executable_path = _create_executable(tmp_path, WINDOWS_DUMP_EXECUTABLE)

    assert db_resolve_dump_executable(str(tmp_path), "database", os_name="Windows 10") == executable_path


def test_db_resolve_dump_executable_missing_names_probed_path(tmp_path: Path) -> None:
    """Raise a descriptive error naming the probed path and its directory.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate fatal error details.

    Raises:
        AssertionError: Raised when the error lacks diagnostics.
    """

    _create_executable(tmp_path, WINDOWS_DUMP_EXECUTABLE)
    expected_path = tmp_path / "database" / "bin" / UNIX_DUMP_EXECUTABLE

    with pytest.raises(DumpExecutableNotFoundError) as error_info:
        db_resolve_dump_executable(tmp_path, "database", os_name="Linux")

    assert error_info.value.probed_path == expected_path
    assert error_info.value.parent_directory == expected_path.parent
    assert str(expected_path) in str(error_info.value)
    assert isinstance(error_info.value, FileNotFoundError)
