"""
Main entry point for the project scaffolder CLI.

Allows running the package as a module:
    python -m project_starter my-project
"""

import sys

from .cli import create_parser, handle_command


def main() -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    return handle_command(args)


if __name__ == "__main__":
    sys.exit(main())
