"""Typed exception hierarchy for conversion errors.

This module defines the exceptions raised while converting an article.
All exceptions inherit from Wiki2MdError so callers can catch any
application-level error in one place. The orchestrator turns the
ConversionError family into Failure results instead of letting them
propagate.
"""

from typing import Optional


class Wiki2MdError(Exception):
    """Base exception for all wiki2md errors.

    Use this to catch any application-level error from the tool.
    """
    pass


class ConversionError(Wiki2MdError):
    """Base exception for errors that abort a single conversion."""

    def __init__(self, message: str):
        super().__init__(message)


class NotApplicableError(ConversionError):
    """Raised when the document is not an article page."""

    def __init__(self, path: Optional[str] = None):
        super().__init__("not an article page")
        self.path = path


class ContentNotFoundError(ConversionError):
    """Raised when the article content container cannot be located."""

    def __init__(self, selector: Optional[str] = None):
        super().__init__("content not found")
        self.selector = selector


class InternalRenderingError(ConversionError):
    """Raised when an unexpected exception escapes the rendering pipeline.

    The message is the original error's message, unchanged.
    """

    def __init__(self, original: Exception):
        super().__init__(str(original))
        self.original = original


class FrontmatterError(Wiki2MdError):
    """Raised when a frontmatter block cannot be parsed as YAML."""

    def __init__(self, message: str):
        super().__init__(f"Frontmatter error: {message}")
        self.message = message
