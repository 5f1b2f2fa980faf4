"""Typed exception hierarchy for CLI-related errors.

This module defines all custom exceptions used by the mdlite CLI.
All exceptions inherit from MdliteError for easy catching and include
descriptive messages with context to help with debugging. The converter
itself never raises; these cover configuration and file handling only.
"""

from typing import Optional


class MdliteError(Exception):
    """Base exception for all mdlite errors.

    Use this to catch any application-level error from the tool.
    """
    pass


class CLIError(MdliteError):
    """Base exception for all CLI-related errors."""
    pass


class ConfigNotFoundError(CLIError):
    """Raised when an explicitly requested configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(
            f"Configuration file not found at {config_path}"
        )
        self.config_path = config_path


class ConfigError(CLIError):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message


class FilesystemError(CLIError):
    """Raised when filesystem operations fail (read, write, permissions, etc)."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Filesystem operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason


class OutputExistsError(FilesystemError):
    """Raised when an output file already exists and overwriting is disabled."""

    def __init__(self, file_path: str):
        super().__init__(file_path, 'write', 'Output file already exists (use --force to overwrite)')
