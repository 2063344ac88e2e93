"""
File operation utilities for project scaffolding.

Wraps the handful of writes the builder performs so that OS failures
surface as FileOperationError, plus the guarded append used for the
shell profile.
"""

import os
from pathlib import Path
from typing import Iterable, Union

from ..exceptions import FileOperationError


def resolve_project_root(name: Union[str, Path]) -> Path:
    """
    Turn the user-supplied project name or path into an absolute path.

    Relative names are prefixed with the current directory; symlinks in
    the path are left as they are.

    Example:
        >>> resolve_project_root("demo")
        PosixPath('/home/me/work/demo')
    """
    path = Path(name).expanduser()
    if not path.is_absolute():
        path = Path.cwd() / path
    return Path(os.path.normpath(path))


def make_directory(path: Path) -> None:
    """Create a single directory, failing if it already exists."""
    try:
        path.mkdir()
    except OSError as e:
        raise FileOperationError(f"Failed to create directory {path}: {e}") from e


def write_text_file(path: Path, content: str) -> None:
    """
    Write content to a file, replacing anything already there.

    Raises:
        FileOperationError: If the file cannot be written
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise FileOperationError(f"Failed to write {path}: {e}") from e


def create_symlink(link: Path, target: str) -> None:
    """
    Create a symlink at `link` pointing at `target` (kept relative as given).

    Raises:
        FileOperationError: If the link cannot be created
    """
    try:
        os.symlink(target, link, target_is_directory=True)
    except OSError as e:
        raise FileOperationError(
            f"Failed to create symlink {link} -> {target}: {e}"
        ) from e


def append_once(path: Path, sentinel: str, lines: Iterable[str]) -> bool:
    """
    Append `sentinel` followed by `lines` unless the sentinel is already present.

    The file is created if missing.

    Args:
        path: File to append to
        sentinel: Marker line identifying a previous append
        lines: Lines written after the sentinel

    Returns:
        True if the file was modified, False if the sentinel was found

    Raises:
        FileOperationError: If the file cannot be read or written
    """
    try:
        existing = path.read_text(encoding="utf-8") if path.exists() else ""
    except OSError as e:
        raise FileOperationError(f"Failed to read {path}: {e}") from e

    if sentinel in existing.splitlines():
        return False

    block = [sentinel, *lines]
    if not existing:
        separator = ""
    elif existing.endswith("\n"):
        separator = "\n"
    else:
        separator = "\n\n"

    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(separator + "\n".join(block) + "\n")
    except OSError as e:
        raise FileOperationError(f"Failed to append to {path}: {e}") from e

    return True
