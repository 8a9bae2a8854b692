"""HTML document loading with BeautifulSoup.

This module is the acquisition boundary: it parses saved article HTML
with BeautifulSoup (lxml parser), answers the page-level queries the
orchestrator needs (URL, path, title, content container) and converts
BeautifulSoup tags into the engine's own node tree.
"""

import logging
from typing import Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction

from wiki2md.document.errors import DocumentLoadError
from wiki2md.document.models import ArticlePage
from wiki2md.document.node import ElementNode, TextNode

logger = logging.getLogger(__name__)

# String types that are not character data in the DOM
_NON_TEXT_STRINGS = (Comment, CData, Declaration, Doctype, ProcessingInstruction)

PARSER = "lxml"


def build_tree(tag: Tag) -> ElementNode:
    """Convert a BeautifulSoup tag (and its subtree) into an ElementNode tree.

    Args:
        tag: BeautifulSoup Tag

    Returns:
        Root ElementNode with parent links set throughout
    """
    attributes = {}
    for name, value in tag.attrs.items():
        # bs4 returns multi-valued attributes (class, rel, ...) as lists
        if isinstance(value, (list, tuple)):
            value = ' '.join(value)
        attributes[name.lower()] = value

    classes = tag.get('class') or []
    if isinstance(classes, str):
        classes = classes.split()

    element = ElementNode(
        tag=tag.name.lower(),
        classes=frozenset(classes),
        attributes=attributes,
    )
    for child in tag.children:
        if isinstance(child, Tag):
            element.append(build_tree(child))
        elif isinstance(child, NavigableString) and not isinstance(child, _NON_TEXT_STRINGS):
            element.append(TextNode(str(child)))
    return element


def parse_fragment(html: str) -> ElementNode:
    """Parse an HTML snippet and return its <body> as an ElementNode.

    Args:
        html: HTML markup (fragment or full document)

    Returns:
        ElementNode for the body (or the document element when no body exists)
    """
    soup = BeautifulSoup(html, PARSER)
    root = soup.body or soup.find()
    if root is None:
        return ElementNode(tag='body')
    return build_tree(root)


class HtmlDocument:
    """A parsed article page.

    Example:
        >>> doc = HtmlDocument(html, url="https://en.wikipedia.org/wiki/Python")
        >>> page = doc.to_page()
        >>> page.title
        'Python'
    """

    TITLE_SELECTOR = '#firstHeading'
    CONTENT_SELECTOR = '#mw-content-text .mw-parser-output'
    DEFAULT_TITLE = 'Wikipedia Article'

    def __init__(self, html: str, url: Optional[str] = None):
        """Parse ``html``.

        Args:
            html: Full page HTML
            url: Page URL. When omitted the <link rel="canonical"> href is used.
        """
        self.soup = BeautifulSoup(html, PARSER)
        self.url = url if url is not None else self._canonical_url()
        self.path = urlparse(self.url).path if self.url else ''

    @classmethod
    def from_file(cls, file_path: str, url: Optional[str] = None) -> 'HtmlDocument':
        """Load a saved page from disk.

        Raises:
            DocumentLoadError: If the file cannot be read
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                html = f.read()
        except FileNotFoundError:
            raise DocumentLoadError(file_path, 'File not found')
        except PermissionError:
            raise DocumentLoadError(file_path, 'Permission denied')
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentLoadError(file_path, str(e))

        logger.debug(f"Loaded {len(html)} characters from {file_path}")
        return cls(html, url=url)

    def _canonical_url(self) -> str:
        link = self.soup.find('link', rel='canonical')
        if link and link.get('href'):
            return link['href']
        return ''

    def title(self) -> str:
        """Trimmed text of the page heading, or a generic fallback."""
        heading = self.soup.select_one(self.TITLE_SELECTOR)
        if heading is None:
            return self.DEFAULT_TITLE
        return heading.get_text().strip()

    def content_root(self) -> Optional[ElementNode]:
        """The article content container as a node tree, or None."""
        container = self.soup.select_one(self.CONTENT_SELECTOR)
        if container is None:
            logger.debug(f"No element matches {self.CONTENT_SELECTOR!r}")
            return None
        return build_tree(container)

    def to_page(self) -> ArticlePage:
        return ArticlePage(
            url=self.url,
            path=self.path,
            title=self.title(),
            content_root=self.content_root(),
        )
