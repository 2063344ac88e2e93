"""
Command-line interface for the project scaffolder.
"""

from .handlers import handle_command
from .parser import create_parser

__all__ = ["create_parser", "handle_command"]
