"""Typed exceptions for request handling."""

from wiki2md.content_converter.errors import Wiki2MdError


class RequestError(Wiki2MdError):
    """Raised when a conversion request payload is malformed."""

    def __init__(self, message: str):
        super().__init__(f"Invalid request: {message}")
