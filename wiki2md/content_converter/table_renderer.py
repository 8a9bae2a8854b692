"""Pipe table rendering.

Markdown pipe tables cannot express merged cells or nested tables, so
such tables are never approximated: they are replaced by an HTML comment
placeholder. Everything else becomes a pipe table whose first row is
treated as the header, whether or not it used <th> cells.
"""

import logging
from typing import List

from wiki2md.document.node import ElementNode, is_tag

logger = logging.getLogger(__name__)

EMPTY_TABLE_PLACEHOLDER = '<!-- Empty table omitted -->\n\n'
COMPLEX_TABLE_PLACEHOLDER = (
    '<!-- Complex table omitted (contains nested tables or merged cells) -->\n\n'
)


def is_complex_table(node: ElementNode) -> bool:
    """Return True if the table nests tables or has merged cells."""
    return node.find(
        lambda el: el.tag == 'table'
        or el.has_attribute('rowspan')
        or el.has_attribute('colspan')
    ) is not None


def render_cell(cell: ElementNode) -> str:
    """Plain-text cell content on one line, with pipes escaped."""
    text = cell.text_content().strip().replace('\n', ' ')
    return text.replace('|', '\\|')


def render_table(node: ElementNode) -> str:
    """Render a <table> element as a Markdown pipe table.

    Args:
        node: Table element

    Returns:
        Pipe table followed by a blank line, or a placeholder comment
    """
    rows = node.find_all(is_tag('tr'))
    if not rows:
        logger.debug("Omitting table without rows")
        return EMPTY_TABLE_PLACEHOLDER

    if is_complex_table(node):
        logger.debug("Omitting table with nested tables or merged cells")
        return COMPLEX_TABLE_PLACEHOLDER

    lines: List[str] = []
    for row in rows:
        cells = row.find_all(is_tag('th', 'td'))
        if not cells:
            continue
        lines.append('| ' + ' | '.join(render_cell(cell) for cell in cells) + ' |')
        if len(lines) == 1:
            lines.append('|' + '|'.join('---' for _ in cells) + '|')

    return '\n'.join(lines) + '\n\n'
