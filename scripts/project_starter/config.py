"""
Runtime settings for project scaffolding.

Settings come from environment variables with defaults from constants,
so the tool can point at a different interpreter, editor or shell profile
without command-line flags.
"""

import os
import shutil
import sysconfig
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .constants import (
    DEFAULT_EDITOR,
    DEFAULT_PYTHON,
    ENV_EDITOR,
    ENV_PROFILE,
    ENV_PYTHON,
    ENV_TOOL_DIR,
    TOOL_COMMAND,
)
from .utils.shell_profile import default_profile


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one invocation."""

    python: str
    editor: str
    profile: Path
    tool_dir: Path


def default_tool_dir() -> Path:
    """
    Directory holding the `project-starter` console script.

    Falls back to the interpreter's scripts directory, where pip installs
    console scripts, when the command is not on PATH yet.
    """
    found = shutil.which(TOOL_COMMAND)
    if found:
        return Path(found).absolute().parent
    return Path(sysconfig.get_path("scripts"))


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build settings from the process environment.

    Args:
        environ: Mapping to read instead of os.environ (used by tests)

    Returns:
        Settings instance
    """
    if environ is None:
        environ = os.environ

    profile = environ.get(ENV_PROFILE)
    tool_dir = environ.get(ENV_TOOL_DIR)

    return Settings(
        python=environ.get(ENV_PYTHON, DEFAULT_PYTHON),
        editor=environ.get(ENV_EDITOR, DEFAULT_EDITOR),
        profile=Path(profile).expanduser() if profile else default_profile(environ),
        tool_dir=(
            Path(tool_dir).expanduser()
            if tool_dir
            else default_tool_dir()
        ),
    )
