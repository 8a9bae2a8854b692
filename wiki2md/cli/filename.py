"""Markdown filename derivation from article titles."""

import re

DEFAULT_FILENAME = 'article.md'


def title_to_filename(title: str) -> str:
    """Convert an article title to a lowercase, hyphenated filename.

    Runs of characters outside [a-z0-9] become a single hyphen and
    leading/trailing hyphens are dropped.

    Examples:
        >>> title_to_filename("Albert Einstein")
        'albert-einstein.md'
        >>> title_to_filename("C++ (programming language)")
        'c-programming-language.md'
    """
    slug = re.sub(r'[^a-z0-9]+', '-', title.lower())
    slug = slug.strip('-')
    if not slug:
        return DEFAULT_FILENAME
    return f"{slug}.md"
