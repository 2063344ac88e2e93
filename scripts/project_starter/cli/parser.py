"""
Command-line argument parsing for the project scaffolder.
"""

import argparse


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="project-starter",
        description=(
            "Create a Python project with a virtual environment and example "
            "apps, or re-open an existing one after checking its layout."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "environment variables:\n"
            "  PROJECT_STARTER_PYTHON    interpreter used for venv (default: python3)\n"
            "  PROJECT_STARTER_EDITOR    editor launcher (default: code)\n"
            "  PROJECT_STARTER_PROFILE   shell profile for PATH registration\n"
            "  PROJECT_STARTER_TOOL_DIR  directory added to PATH"
        ),
    )

    parser.add_argument("project", help="Project name or path")

    return parser
