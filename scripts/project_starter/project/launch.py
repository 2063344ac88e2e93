"""
Environment activation and editor hand-off.

A child process cannot change its parent shell, so activation here means
building the environment that `source venv/bin/activate` would produce and
launching the editor inside it.
"""

import os
import subprocess
from pathlib import Path
from typing import Dict, Mapping, Optional

from ..constants import VENV_LINK
from ..exceptions import CommandError


def venv_bin_dir(venv: Path) -> Path:
    """Directory holding the environment's executables."""
    return venv / ("Scripts" if os.name == "nt" else "bin")


def venv_python(venv: Path) -> Path:
    """Interpreter inside the virtual environment."""
    return venv_bin_dir(venv) / ("python.exe" if os.name == "nt" else "python")


def activation_env(
    root: Path, base_env: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """
    Environment equivalent to activating the project's virtual environment.

    Args:
        root: Project root containing the `venv` symlink
        base_env: Environment to start from (defaults to os.environ)

    Returns:
        New environment mapping with VIRTUAL_ENV set and PATH updated
    """
    env = dict(os.environ if base_env is None else base_env)
    venv = root / VENV_LINK

    env["VIRTUAL_ENV"] = str(venv)
    path = env.get("PATH", "")
    bin_dir = str(venv_bin_dir(venv))
    env["PATH"] = f"{bin_dir}{os.pathsep}{path}" if path else bin_dir
    env.pop("PYTHONHOME", None)

    return env


def open_project(root: Path, settings) -> None:
    """
    Enter the project, activate its environment and launch the editor.

    Args:
        root: Project root
        settings: Settings naming the editor

    Raises:
        CommandError: If the editor cannot be started or exits non-zero
    """
    os.chdir(root)
    env = activation_env(root)
    print(f"✓ Activated virtual environment: {env['VIRTUAL_ENV']}")

    print(f"→ Opening {root} in {settings.editor}")
    try:
        result = subprocess.run([settings.editor, str(root)], cwd=root, env=env)
    except OSError as e:
        raise CommandError(f"Failed to start editor '{settings.editor}': {e}") from e

    if result.returncode != 0:
        raise CommandError(
            f"Editor '{settings.editor}' exited with code {result.returncode}"
        )

    print(f"✓ Opened {root.name} in {settings.editor}")
    print("\nTo use the environment in this shell:")
    print(f"  cd {root} && source {VENV_LINK}/bin/activate")
