"""Embedded database dump executable discovery."""

from __future__ import annotations

from pathlib import Path

from launcher.host import host_is_windows_os_name

WINDOWS_DUMP_EXECUTABLE = "mysqldump.exe"
UNIX_DUMP_EXECUTABLE = "mariadb-dump"


class DumpExecutableNotFoundError(FileNotFoundError):
    """Raised when the embedded database distribution lacks its dump executable.

    Attributes:
        probed_path: Full executable path that was checked.
        parent_directory: Directory expected to contain the executable.
    """

    def __init__(self, probed_path: Path):
        super().__init__(
            f"Neither mariadb-dump nor mysqldump found: probed {probed_path} in {probed_path.parent}"
        )
        self.probed_path = probed_path
        self.parent_directory = probed_path.parent


def db_resolve_dump_executable(
    install_root: Path | str,
    database_subdirectory: str,
    os_name: str | None = None,
) -> Path:
    """Return the dump executable path under an installation tree.

    The executable name follows the live host OS name, not any classification
    applied during configuration discovery.

    Args:
        install_root: Installation root directory.
        database_subdirectory: Embedded database directory under the root.
        os_name: OS name override. Defaults to the live host OS name.

    Returns:
        Path: Existing `{install_root}/{database_subdirectory}/bin/{executable}` path.

    Raises:
        DumpExecutableNotFoundError: Raised when the executable does not exist.
    """

    executable_name = WINDOWS_DUMP_EXECUTABLE if host_is_windows_os_name(os_name) else UNIX_DUMP_EXECUTABLE
    executable_path = Path(install_root) / database_subdirectory / "bin" / executable_name
    if not executable_path.exists():
        raise DumpExecutableNotFoundError(executable_path)
    return executable_path
