"""
Utility functions for project scaffolding.

This package provides filesystem helpers, subprocess execution with a
progress indicator, preflight tool checks and shell profile handling.
"""

from .file_ops import (
    append_once,
    create_symlink,
    make_directory,
    resolve_project_root,
    write_text_file,
)
from .process import run_command, step
from .shell_profile import (
    ask_yes_no,
    default_profile,
    path_export_line,
    register_on_path,
)
from .tools import check_prerequisites, check_tool

__all__ = [
    # file_ops
    "append_once",
    "create_symlink",
    "make_directory",
    "resolve_project_root",
    "write_text_file",
    # process
    "run_command",
    "step",
    # shell_profile
    "ask_yes_no",
    "default_profile",
    "path_export_line",
    "register_on_path",
    # tools
    "check_prerequisites",
    "check_tool",
]
