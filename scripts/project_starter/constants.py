"""
Constants used throughout project scaffolding.

Folder and file names here form the layout contract checked by the
validator, so changing them breaks existing projects.
"""

# Example app folders, in validation order
DIR_NOTEBOOKS = "notebooks"
DIR_STREAMLIT = "streamlit"
DIR_APPS = "apps"
DIR_FLASK = "flask"
DIR_FASTAPI = "fastapi"

PROJECT_DIRS = [
    DIR_NOTEBOOKS,
    DIR_STREAMLIT,
    DIR_APPS,
    DIR_FLASK,
    DIR_FASTAPI,
]

# Virtual environment
VENV_SUFFIX = "-venv"
VENV_LINK = "venv"

# Example files, relative to the project root
CLI_EXAMPLE_FILE = f"{DIR_APPS}/cli_example.py"
FLASK_APP_FILE = f"{DIR_FLASK}/app.py"
FASTAPI_APP_FILE = f"{DIR_FASTAPI}/main.py"
STREAMLIT_APP_FILE = f"{DIR_STREAMLIT}/app.py"
NOTEBOOK_FILE = f"{DIR_NOTEBOOKS}/exemple.ipynb"

# Dependency manifest
REQUIREMENTS_FILE = "requirements.txt"
PINNED_REQUIREMENTS = [
    ("flask", "3.0.3"),
    ("fastapi", "0.115.0"),
    ("uvicorn", "0.30.6"),
    ("streamlit", "1.38.0"),
]

# Shell profile registration
PATH_SENTINEL = "# Added by project-starter"
BASH_PROFILE = ".bashrc"
ZSH_PROFILE = ".zshrc"

# External tools
TOOL_COMMAND = "project-starter"
DEFAULT_PYTHON = "python3"
DEFAULT_EDITOR = "code"

# Environment variables read by config.load_settings()
ENV_PYTHON = "PROJECT_STARTER_PYTHON"
ENV_EDITOR = "PROJECT_STARTER_EDITOR"
ENV_PROFILE = "PROJECT_STARTER_PROFILE"
ENV_TOOL_DIR = "PROJECT_STARTER_TOOL_DIR"

# Spinner poll interval while waiting on a subprocess (seconds)
POLL_INTERVAL = 0.1
