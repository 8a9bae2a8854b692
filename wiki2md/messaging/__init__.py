"""Request/response surface for host environments."""

from .errors import RequestError
from .request_handler import CONVERT_ACTION, ConversionRequest, handle_request

__all__ = [
    'CONVERT_ACTION',
    'ConversionRequest',
    'RequestError',
    'handle_request',
]
