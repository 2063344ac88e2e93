"""
Preflight checks for the external tools the scaffolder shells out to.
"""

import shutil

from ..exceptions import PreflightError


def check_tool(tool: str) -> bool:
    """Check if a tool is on the search path."""
    return shutil.which(tool) is not None


def check_prerequisites(settings) -> None:
    """
    Verify the Python 3 interpreter and the editor launcher are installed.

    Args:
        settings: Settings naming the interpreter and editor

    Raises:
        PreflightError: If either tool is missing
    """
    if not check_tool(settings.python):
        raise PreflightError(
            f"Python 3 interpreter '{settings.python}' not found on PATH. "
            "Install Python 3 and try again."
        )

    if not check_tool(settings.editor):
        raise PreflightError(
            f"Editor '{settings.editor}' not found on PATH. "
            "Install it or enable its shell command and try again."
        )
