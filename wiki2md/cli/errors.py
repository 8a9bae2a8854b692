"""Typed exception hierarchy for CLI-related errors.

All exceptions inherit from CLIError so the entry point can catch them
in one place and map them to an exit code.
"""

from typing import Optional

from wiki2md.content_converter.errors import Wiki2MdError


class CLIError(Wiki2MdError):
    """Base exception for all CLI-related errors."""
    pass


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


class OutputWriteError(CLIError):
    """Raised when the Markdown file cannot be written."""

    def __init__(self, file_path: str, reason: Optional[str] = None):
        message = f"Could not write {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.reason = reason
