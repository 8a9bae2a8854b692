"""Article to Markdown conversion pipeline.

ArticleConverter checks that a page is an article, locates its content,
and runs sanitize -> render -> cleanup. Every failure, expected or not,
is returned as a ConversionFailure; nothing raised while converting
escapes convert().
"""

import logging
from datetime import datetime
from typing import Callable, Optional, Tuple

from wiki2md.content_converter.block_renderer import render_block
from wiki2md.content_converter.cleanup import cleanup
from wiki2md.content_converter.errors import (
    ContentNotFoundError,
    ConversionError,
    InternalRenderingError,
    NotApplicableError,
)
from wiki2md.content_converter.frontmatter import render_frontmatter
from wiki2md.content_converter.sanitizer import sanitize
from wiki2md.document.models import ArticlePage
from wiki2md.models.conversion_options import ConversionOptions
from wiki2md.models.conversion_result import (
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
    FailureKind,
)

logger = logging.getLogger(__name__)

# Special and administrative namespaces that are not articles
EXCLUDED_PATH_PREFIXES: Tuple[str, ...] = (
    '/wiki/Special:',
    '/wiki/Talk:',
    '/wiki/Wikipedia:',
    '/wiki/Help:',
    '/wiki/Portal:',
    '/wiki/Category:',
    '/wiki/File:',
    '/wiki/Template:',
)


def is_article_path(path: str) -> bool:
    """Return False for paths in special/administrative namespaces."""
    return not any(path.startswith(prefix) for prefix in EXCLUDED_PATH_PREFIXES)


_FAILURE_KINDS = {
    NotApplicableError: FailureKind.NOT_APPLICABLE,
    ContentNotFoundError: FailureKind.CONTENT_NOT_FOUND,
    InternalRenderingError: FailureKind.INTERNAL_ERROR,
}


class ArticleConverter:
    """Converts an ArticlePage into Markdown.

    Example:
        >>> converter = ArticleConverter()
        >>> result = converter.convert(page, ConversionOptions.uniform(True))
        >>> if result.success:
        ...     print(result.markdown)
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        """Initialize the converter.

        Args:
            clock: Returns the timestamp used for frontmatter dates
                (defaults to the current UTC time)
        """
        self.clock = clock

    def convert(self, page: ArticlePage, options: ConversionOptions) -> ConversionResult:
        """Convert ``page`` to Markdown.

        Args:
            page: Loaded article page
            options: Conversion options

        Returns:
            ConversionSuccess with the Markdown and title, or
            ConversionFailure with a human-readable reason
        """
        try:
            markdown = self._render(page, options)
        except ConversionError as e:
            logger.warning(f"Conversion of {page.url or page.title!r} failed: {e}")
            return ConversionFailure(reason=str(e), kind=_FAILURE_KINDS[type(e)])
        except Exception as e:
            logger.exception("Unexpected error while rendering article")
            error = InternalRenderingError(e)
            return ConversionFailure(reason=str(error), kind=FailureKind.INTERNAL_ERROR)

        logger.info(f"Converted {page.title!r} ({len(markdown)} characters)")
        return ConversionSuccess(markdown=markdown, title=page.title)

    def _render(self, page: ArticlePage, options: ConversionOptions) -> str:
        if not is_article_path(page.path):
            raise NotApplicableError(page.path)

        if page.content_root is None:
            raise ContentNotFoundError()

        content = sanitize(page.content_root)

        markdown = ''
        if options.include_frontmatter:
            now = self.clock() if self.clock else None
            markdown += render_frontmatter(page.title, page.url, now)

        markdown += f"# {page.title}\n\n"
        markdown += render_block(content, options)
        return cleanup(markdown)


def convert(page: ArticlePage, options: ConversionOptions) -> ConversionResult:
    """Convert ``page`` with a default ArticleConverter."""
    return ArticleConverter().convert(page, options)
