"""Typed exceptions for document loading errors."""

from typing import Optional

from wiki2md.content_converter.errors import Wiki2MdError


class DocumentError(Wiki2MdError):
    """Base exception for document acquisition errors."""
    pass


class DocumentLoadError(DocumentError):
    """Raised when an HTML document cannot be read from disk."""

    def __init__(self, file_path: str, reason: Optional[str] = None):
        message = f"Could not load document {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.reason = reason
