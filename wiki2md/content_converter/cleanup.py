"""Whitespace normalization of assembled Markdown."""

import re

_BLANK_RUN = re.compile(r'\n{3,}')


def cleanup(text: str) -> str:
    """Normalize blank lines and trailing whitespace.

    - trailing whitespace is removed from every line
    - runs of three or more newlines collapse to two
    - leading newlines are removed
    - the result ends with exactly one newline

    Applying cleanup() to its own output returns it unchanged.
    """
    text = '\n'.join(line.rstrip() for line in text.split('\n'))
    text = _BLANK_RUN.sub('\n\n', text)
    text = text.lstrip('\n')
    return text.rstrip('\n') + '\n'
