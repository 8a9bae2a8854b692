"""Document model and HTML acquisition.

This package provides the node tree the conversion engine walks and the
BeautifulSoup-based loader that builds it from article HTML.
"""

from .node import ElementNode, Node, TextNode
from .models import ArticlePage
from .errors import DocumentError, DocumentLoadError
from .html_document import HtmlDocument, build_tree, parse_fragment

__all__ = [
    'ElementNode',
    'Node',
    'TextNode',
    'ArticlePage',
    'DocumentError',
    'DocumentLoadError',
    'HtmlDocument',
    'build_tree',
    'parse_fragment',
]
