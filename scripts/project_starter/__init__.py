"""
Project Starter Package.

Scaffolds a standard Python project (virtual environment, example apps for
the command line, Flask, FastAPI, Streamlit and notebooks, pinned
requirements, editor integration) and re-opens existing projects after
checking that their layout is intact.

Usage:
    From command line:
        project-starter my-project
        python -m project_starter ~/work/my-project

    From Python code:
        from project_starter import create_project, load_settings

        settings = load_settings()
        create_project(Path("/tmp/demo"), settings)
"""

# Configuration
from .config import Settings, load_settings

# Constants
from .constants import (
    PATH_SENTINEL,
    PINNED_REQUIREMENTS,
    PROJECT_DIRS,
    REQUIREMENTS_FILE,
    VENV_LINK,
)

# Exceptions
from .exceptions import (
    CommandError,
    FileOperationError,
    PreflightError,
    ProjectStarterError,
    ValidationError,
)

# Project operations
from .project import (
    PathKind,
    RequiredPath,
    activation_env,
    create_project,
    find_first_missing,
    open_project,
    required_paths,
    validate_project,
)

# Utilities
from .utils import (
    append_once,
    check_prerequisites,
    register_on_path,
    resolve_project_root,
    run_command,
)

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "Settings",
    "load_settings",
    # Constants
    "PATH_SENTINEL",
    "PINNED_REQUIREMENTS",
    "PROJECT_DIRS",
    "REQUIREMENTS_FILE",
    "VENV_LINK",
    # Exceptions
    "CommandError",
    "FileOperationError",
    "PreflightError",
    "ProjectStarterError",
    "ValidationError",
    # Project operations
    "PathKind",
    "RequiredPath",
    "activation_env",
    "create_project",
    "find_first_missing",
    "open_project",
    "required_paths",
    "validate_project",
    # Utilities
    "append_once",
    "check_prerequisites",
    "register_on_path",
    "resolve_project_root",
    "run_command",
]
