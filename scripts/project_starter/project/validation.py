"""
Layout validation for existing projects.

The checks run in a fixed order and stop at the first missing item, so
the reported problem is always the earliest one in the list.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

from ..constants import (
    CLI_EXAMPLE_FILE,
    PROJECT_DIRS,
    REQUIREMENTS_FILE,
    VENV_LINK,
    VENV_SUFFIX,
)
from ..exceptions import ValidationError


class PathKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"


@dataclass(frozen=True)
class RequiredPath:
    """One entry of the layout checklist."""

    kind: PathKind
    relative: str
    target: Optional[str] = None  # symlinks only: expected link target

    def is_present(self, root: Path) -> bool:
        path = root / self.relative
        if self.kind is PathKind.DIRECTORY:
            return path.is_dir()
        if self.kind is PathKind.FILE:
            return path.is_file()
        return path.is_symlink() and os.readlink(path) == self.target

    def describe(self) -> str:
        if self.kind is PathKind.SYMLINK:
            return f"symlink '{self.relative}' -> '{self.target}'"
        return f"{self.kind.value} '{self.relative}'"


def venv_dir_name(root: Path) -> str:
    """Name of the virtual environment folder: `<project>-venv`."""
    return f"{root.name}{VENV_SUFFIX}"


def required_paths(root: Path) -> List[RequiredPath]:
    """
    Ordered checklist for a project rooted at `root`.

    Order: venv folder, example app folders, CLI example, manifest,
    venv symlink.
    """
    venv_name = venv_dir_name(root)
    checks = [RequiredPath(PathKind.DIRECTORY, venv_name)]
    checks.extend(RequiredPath(PathKind.DIRECTORY, d) for d in PROJECT_DIRS)
    checks.append(RequiredPath(PathKind.FILE, CLI_EXAMPLE_FILE))
    checks.append(RequiredPath(PathKind.FILE, REQUIREMENTS_FILE))
    checks.append(RequiredPath(PathKind.SYMLINK, VENV_LINK, target=venv_name))
    return checks


def find_first_missing(root: Path) -> Optional[RequiredPath]:
    """Return the first failing check, or None if the layout is complete."""
    for required in required_paths(root):
        if not required.is_present(root):
            return required
    return None


def validate_project(root: Path) -> None:
    """
    Check that an existing project still has the expected layout.

    Read-only: nothing under `root` is created or modified.

    Raises:
        ValidationError: Naming the first missing item
    """
    print(f"→ Checking project layout in {root}")

    missing = find_first_missing(root)
    if missing is not None:
        raise ValidationError(f"Missing {missing.describe()} in {root}")

    print("✓ Project layout is valid")
