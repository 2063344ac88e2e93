"""
Command handler for the project scaffolder CLI.

Runs preflight, then either validates an existing project or builds a
new one, then opens it in the editor.
"""

import sys

from ..config import load_settings
from ..project import create_project, open_project, validate_project
from ..utils.file_ops import resolve_project_root
from ..utils.tools import check_prerequisites


def handle_command(args) -> int:
    """
    Handle CLI command execution.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        settings = load_settings()
        check_prerequisites(settings)

        root = resolve_project_root(args.project)
        if root.exists():
            validate_project(root)
        else:
            create_project(root, settings)

        open_project(root, settings)
        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
