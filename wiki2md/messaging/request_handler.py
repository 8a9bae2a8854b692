"""Request/response surface for host environments.

A host (browser extension bridge, editor plugin, the CLI's --json mode)
sends a request such as::

    {"action": "convert", "options": {"includeTables": true, ...}}

and receives the serialized result::

    {"success": true, "markdown": "...", "title": "..."}
    {"success": false, "error": "not an article page"}

Requests with any other action are ignored (no response).
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from wiki2md.content_converter.article_converter import ArticleConverter
from wiki2md.document.models import ArticlePage
from wiki2md.messaging.errors import RequestError
from wiki2md.models.conversion_options import ConversionOptions

logger = logging.getLogger(__name__)

CONVERT_ACTION = 'convert'


@dataclass(frozen=True)
class ConversionRequest:
    """A request carrying an action tag and conversion options.

    Attributes:
        action: Action tag; only "convert" is handled
        options: Options for the conversion
    """
    action: str
    options: ConversionOptions

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], default: bool = False) -> 'ConversionRequest':
        """Parse a request payload.

        Args:
            data: Request mapping with "action" and "options" keys
            default: Value for option flags missing from the payload

        Raises:
            RequestError: If the payload shape or an option value is wrong
        """
        if not isinstance(data, Mapping):
            raise RequestError(f"expected a mapping, got {type(data).__name__}")

        action = data.get('action')
        if not isinstance(action, str):
            raise RequestError("missing or non-string 'action'")

        options = data.get('options') or {}
        if not isinstance(options, Mapping):
            raise RequestError(f"'options' must be a mapping, got {type(options).__name__}")

        try:
            conversion_options = ConversionOptions.from_dict(options, default)
        except ValueError as e:
            raise RequestError(str(e))

        return cls(action=action, options=conversion_options)

    def to_dict(self) -> Dict[str, Any]:
        return {'action': self.action, 'options': self.options.to_dict()}


def handle_request(
    request: ConversionRequest,
    page: ArticlePage,
    converter: Optional[ArticleConverter] = None,
) -> Optional[Dict[str, Any]]:
    """Answer a request for ``page``.

    Args:
        request: Parsed request
        page: Page the request refers to
        converter: Converter to use (a default one is created if omitted)

    Returns:
        Serialized ConversionResult, or None for actions other than "convert"
    """
    if request.action != CONVERT_ACTION:
        logger.debug(f"Ignoring request with action {request.action!r}")
        return None

    converter = converter or ArticleConverter()
    return converter.convert(page, request.options).to_dict()
