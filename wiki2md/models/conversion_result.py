"""Conversion result data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union


class FailureKind(Enum):
    """Why a conversion failed.

    - NOT_APPLICABLE: the page is not an article (special/admin page)
    - CONTENT_NOT_FOUND: the article content container is missing
    - INTERNAL_ERROR: an unexpected error occurred while rendering
    """
    NOT_APPLICABLE = "not_applicable"
    CONTENT_NOT_FOUND = "content_not_found"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class ConversionSuccess:
    """Successful conversion.

    Attributes:
        markdown: Complete Markdown document
        title: Article title
    """
    markdown: str
    title: str

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {'success': True, 'markdown': self.markdown, 'title': self.title}


@dataclass(frozen=True)
class ConversionFailure:
    """Failed conversion. No partial output is ever attached.

    Attributes:
        reason: Human-readable reason
        kind: Failure category
    """
    reason: str
    kind: FailureKind = FailureKind.INTERNAL_ERROR

    @property
    def success(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {'success': False, 'error': self.reason}


ConversionResult = Union[ConversionSuccess, ConversionFailure]
