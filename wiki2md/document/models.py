"""Page snapshot handed to the conversion orchestrator."""

from dataclasses import dataclass
from typing import Optional

from wiki2md.document.node import ElementNode


@dataclass(frozen=True)
class ArticlePage:
    """Everything the orchestrator needs to know about a loaded page.

    Attributes:
        url: Full page URL (used for frontmatter), may be empty
        path: URL path (used for the article-page check), may be empty
        title: Article title from the page heading
        content_root: Article content container, or None if it was not found
    """
    url: str
    path: str
    title: str
    content_root: Optional[ElementNode]
