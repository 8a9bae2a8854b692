"""wiki2md: convert Wikipedia article HTML into clean Markdown.

Example:
    >>> from wiki2md import ConversionOptions, HtmlDocument, convert
    >>> page = HtmlDocument.from_file("Python.html").to_page()
    >>> result = convert(page, ConversionOptions.uniform(True))
"""

from wiki2md.content_converter import ArticleConverter, convert
from wiki2md.document import ArticlePage, HtmlDocument
from wiki2md.models import (
    ConversionFailure,
    ConversionOptions,
    ConversionResult,
    ConversionSuccess,
    FailureKind,
)

__version__ = "0.1.0"

__all__ = [
    'ArticleConverter',
    'convert',
    'ArticlePage',
    'HtmlDocument',
    'ConversionOptions',
    'ConversionResult',
    'ConversionSuccess',
    'ConversionFailure',
    'FailureKind',
]
