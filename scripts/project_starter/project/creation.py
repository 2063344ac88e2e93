"""
Project creation.

Builds a new project: folders, virtual environment, pinned requirements,
example apps and, on request, PATH registration of the tool itself.
"""

from pathlib import Path
from typing import Callable

from ..constants import PROJECT_DIRS, REQUIREMENTS_FILE, VENV_LINK
from ..exceptions import ValidationError
from ..utils.file_ops import create_symlink, make_directory, write_text_file
from ..utils.process import run_command, step
from ..utils.shell_profile import ask_yes_no, register_on_path
from .launch import venv_python
from .templates import EXAMPLE_FILES, requirements_text
from .validation import venv_dir_name


def create_project(
    root: Path, settings, confirm: Callable[[str], bool] = ask_yes_no
) -> dict:
    """
    Create a new project at `root`.

    Steps run in order and the first failure aborts; files created before
    the failure are left in place.

    Args:
        root: Absolute project root, which must not exist yet
        settings: Settings naming the interpreter, profile and tool dir
        confirm: Yes/no prompt used for the PATH registration question

    Returns:
        Dict with creation summary

    Raises:
        ValidationError: If `root` already exists
        FileOperationError: If a file or folder cannot be written
        CommandError: If venv creation or pip fails

    Example:
        >>> summary = create_project(Path("/tmp/demo"), load_settings())
        >>> summary["status"]
        'created'
    """
    if root.exists():
        raise ValidationError(f"Path already exists: {root}")

    venv_name = venv_dir_name(root)
    venv = root / venv_name

    # 1. Project root
    print(f"→ Creating project {root.name} in {root.parent}")
    make_directory(root)

    # 2. Virtual environment
    run_command(
        [settings.python, "-m", "venv", str(venv)],
        f"Creating virtual environment {venv_name}",
        cwd=root,
    )

    # 3. Manifest
    requirements = root / REQUIREMENTS_FILE
    write_text_file(requirements, requirements_text())
    print(f"✓ Wrote {REQUIREMENTS_FILE}")

    # 4. Example app folders
    with step("Creating project folders"):
        for folder in PROJECT_DIRS:
            make_directory(root / folder)

    # 5. venv symlink
    create_symlink(root / VENV_LINK, venv_name)
    print(f"✓ Linked {VENV_LINK} -> {venv_name}")

    # 6-7. Installer upgrade and dependencies
    python = str(venv_python(venv))
    run_command(
        [python, "-m", "pip", "install", "--upgrade", "pip"],
        "Upgrading pip",
        cwd=root,
    )
    run_command(
        [python, "-m", "pip", "install", "-r", str(requirements)],
        "Installing dependencies",
        cwd=root,
    )

    # 8. Example files
    with step("Writing example files"):
        for relative, content in EXAMPLE_FILES.items():
            write_text_file(root / relative, content)

    # 9. Optional PATH registration
    path_registered = False
    if confirm(f"Add {settings.tool_dir} to your PATH in {settings.profile}?"):
        path_registered = register_on_path(settings.tool_dir, settings.profile)
        if path_registered:
            print(f"✓ Added {settings.tool_dir} to PATH in {settings.profile}")
        else:
            print(f"✓ PATH already configured in {settings.profile}")

    return {
        "status": "created",
        "root": str(root),
        "venv": str(venv),
        "files": sorted(EXAMPLE_FILES),
        "path_registered": path_registered,
    }
