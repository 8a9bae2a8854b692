"""YAML frontmatter generation and parsing.

The generated block has a fixed set of keys in a fixed order:

    ---
    title: "Albert Einstein"
    source: https://de.wikipedia.org/wiki/Albert_Einstein
    date: 2024-05-01
    language: de
    ---

The title is always double-quoted so titles containing colons or quotes
stay valid YAML. parse_frontmatter() reads a block back with PyYAML.
"""

import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

import yaml

from .errors import FrontmatterError

DEFAULT_LANGUAGE = 'en'

# Language subdomain, e.g. "fr" in https://fr.wikipedia.org/wiki/X
LANGUAGE_PATTERN = re.compile(r'//([a-z]{2,3})\.wikipedia\.org')

# YAML frontmatter at the very start of a document (between --- delimiters)
FRONTMATTER_PATTERN = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)


def extract_language(source_url: str) -> str:
    """Return the language code from a Wikipedia URL, or "en"."""
    match = LANGUAGE_PATTERN.search(source_url or '')
    return match.group(1) if match else DEFAULT_LANGUAGE


def _quote(value: str) -> str:
    return '"' + value.replace('\\', '\\\\').replace('"', '\\"') + '"'


def render_frontmatter(
    title: str,
    source_url: str,
    now: Optional[datetime] = None,
) -> str:
    """Build the metadata block placed before the article.

    Args:
        title: Article title
        source_url: Page URL, written verbatim
        now: Timestamp for the date field (defaults to current UTC time)

    Returns:
        Frontmatter block ending with a newline
    """
    if now is None:
        now = datetime.now(timezone.utc)

    lines = [
        '---',
        f"title: {_quote(title)}",
        f"source: {source_url}",
        f"date: {now.strftime('%Y-%m-%d')}",
        f"language: {extract_language(source_url)}",
        '---',
        '',
    ]
    return '\n'.join(lines)


def parse_frontmatter(markdown: str) -> Tuple[Dict[str, Any], str]:
    """Split a Markdown document into its frontmatter dict and body.

    Args:
        markdown: Markdown document, with or without frontmatter

    Returns:
        Tuple of (frontmatter_dict, body). Returns ({}, markdown) if there
        is no frontmatter block.

    Raises:
        FrontmatterError: If the block is not valid YAML or not a mapping
    """
    match = FRONTMATTER_PATTERN.match(markdown)
    if not match:
        return {}, markdown

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid YAML syntax: {str(e)}")

    if not isinstance(data, dict):
        raise FrontmatterError(
            f"Frontmatter must be a YAML dictionary, got {type(data).__name__}"
        )
    return data, markdown[match.end():]
