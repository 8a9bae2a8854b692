"""Test fixtures for wiki2md tests.

This module provides sample article pages (full MediaWiki page skeletons
and body fragments) together with the Markdown they are expected to
convert to.
"""

from .sample_articles import (
    ARTICLE_URL,
    ARTICLE_WITHOUT_CONTENT,
    FULL_ARTICLE,
    FULL_ARTICLE_MARKDOWN,
    SIMPLE_ARTICLE,
    wrap_article,
)

__all__ = [
    'ARTICLE_URL',
    'ARTICLE_WITHOUT_CONTENT',
    'FULL_ARTICLE',
    'FULL_ARTICLE_MARKDOWN',
    'SIMPLE_ARTICLE',
    'wrap_article',
]
