"""Content conversion module for article HTML -> Markdown conversion.

This module provides the ArticleConverter pipeline and the renderers it
is built from: sanitizer, block/inline/list/table renderers, math
extraction, cleanup and frontmatter generation.
"""

from .article_converter import ArticleConverter, convert, is_article_path
from .block_renderer import BlockKind, classify_block, render_block
from .cleanup import cleanup
from .errors import (
    ContentNotFoundError,
    ConversionError,
    FrontmatterError,
    InternalRenderingError,
    NotApplicableError,
    Wiki2MdError,
)
from .frontmatter import extract_language, parse_frontmatter, render_frontmatter
from .inline_renderer import render_inline, render_inline_node
from .list_renderer import render_list
from .math_extractor import extract_formula, is_display_math, is_math_node
from .sanitizer import sanitize
from .table_renderer import render_table

__all__ = [
    'ArticleConverter',
    'convert',
    'is_article_path',
    'BlockKind',
    'classify_block',
    'render_block',
    'cleanup',
    'Wiki2MdError',
    'ConversionError',
    'NotApplicableError',
    'ContentNotFoundError',
    'InternalRenderingError',
    'FrontmatterError',
    'extract_language',
    'parse_frontmatter',
    'render_frontmatter',
    'render_inline',
    'render_inline_node',
    'render_list',
    'extract_formula',
    'is_display_math',
    'is_math_node',
    'sanitize',
    'render_table',
]
