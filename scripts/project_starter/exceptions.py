"""
Custom exceptions for project scaffolding operations.

Every error is fatal: the CLI handler reports it and exits with status 1.
"""


class ProjectStarterError(Exception):
    """Base exception for project scaffolding operations."""

    pass


class PreflightError(ProjectStarterError):
    """Required external tool is missing."""

    pass


class ValidationError(ProjectStarterError):
    """Project layout check failed."""

    pass


class FileOperationError(ProjectStarterError):
    """File operation failed."""

    pass


class CommandError(ProjectStarterError):
    """External command failed or could not be started."""

    pass
