"""Bullet and numbered list rendering with arbitrary nesting."""

from typing import List

from wiki2md.content_converter.inline_renderer import render_inline_node
from wiki2md.document.node import ElementNode, TextNode
from wiki2md.models.conversion_options import ConversionOptions

INDENT = '  '
LIST_TAGS = ('ul', 'ol')


def render_list(
    node: ElementNode,
    options: ConversionOptions,
    depth: int,
    ordered: bool,
) -> str:
    """Render a <ul>/<ol> element.

    Each <li> becomes one line per run of inline content. A nested list
    inside an item flushes the text collected so far, then renders one
    level deeper. Numbering restarts at 1 in every list.

    Args:
        node: List element
        options: Conversion options
        depth: Nesting depth (0 for a top-level list)
        ordered: Use "N. " markers instead of "- "

    Returns:
        Markdown lines; a top-level list ends with a blank line
    """
    markdown = ''
    indent = INDENT * depth
    items = [child for child in node.element_children() if child.tag == 'li']

    for index, item in enumerate(items, start=1):
        bullet = f"{index}. " if ordered else '- '
        parts: List[str] = []

        for child in item.children:
            if isinstance(child, TextNode):
                text = child.text.strip()
                if text:
                    parts.append(text)
            elif child.tag in LIST_TAGS:
                markdown += _flush(indent + bullet, parts)
                parts = []
                markdown += render_list(child, options, depth + 1, child.tag == 'ol')
            else:
                rendered = render_inline_node(child, options).strip()
                if rendered:
                    parts.append(rendered)

        markdown += _flush(indent + bullet, parts)

    if depth == 0:
        markdown += '\n'
    return markdown


def _flush(prefix: str, parts: List[str]) -> str:
    text = ' '.join(parts).strip()
    if not text:
        return ''
    return prefix + text + '\n'
