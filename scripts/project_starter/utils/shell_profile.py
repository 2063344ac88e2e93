"""
Shell profile utilities: PATH registration and the yes/no prompt.
"""

import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from rich.markup import escape
from rich.prompt import Confirm

from ..constants import BASH_PROFILE, PATH_SENTINEL, ZSH_PROFILE
from .file_ops import append_once


def default_profile(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Pick the profile file for the user's login shell.

    Returns:
        ~/.zshrc for zsh, ~/.bashrc otherwise
    """
    if environ is None:
        environ = os.environ

    shell = environ.get("SHELL", "")
    name = ZSH_PROFILE if shell.endswith("zsh") else BASH_PROFILE
    return Path.home() / name


def path_export_line(tool_dir: Path) -> str:
    """Shell line that appends `tool_dir` to PATH."""
    return f'export PATH="$PATH:{tool_dir}"'


def register_on_path(tool_dir: Path, profile: Path) -> bool:
    """
    Append the sentinel comment and a PATH export to the shell profile.

    Nothing is written if the sentinel is already in the profile.

    Returns:
        True if the profile was modified
    """
    return append_once(profile, PATH_SENTINEL, [path_export_line(tool_dir)])


def ask_yes_no(question: str) -> bool:
    """
    Ask an interactive yes/no question, defaulting to no.

    Without a terminal on stdin the answer is no and nothing is prompted.
    """
    if not sys.stdin.isatty():
        return False
    return Confirm.ask(escape(question), default=False)
