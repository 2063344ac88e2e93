"""
Project module.

Handles creation of new projects, validation of existing ones and the
hand-off to the editor.
"""

from .creation import create_project
from .launch import activation_env, open_project
from .validation import (
    PathKind,
    RequiredPath,
    find_first_missing,
    required_paths,
    validate_project,
    venv_dir_name,
)

__all__ = [
    "PathKind",
    "RequiredPath",
    "activation_env",
    "create_project",
    "find_first_missing",
    "open_project",
    "required_paths",
    "validate_project",
    "venv_dir_name",
]
