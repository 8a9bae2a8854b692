"""Block-level Markdown rendering.

The top-level recursive descent over the content tree. Each child is
classified into a BlockKind and handed to the matching handler; unknown
elements pass through to their children, so unexpected structure is
either kept as text or dropped, never an error.
"""

from enum import Enum
from typing import Callable, Dict

from wiki2md.content_converter.inline_renderer import render_inline
from wiki2md.content_converter.list_renderer import render_list
from wiki2md.content_converter.math_extractor import (
    extract_formula,
    is_display_math,
    is_math_node,
)
from wiki2md.content_converter.table_renderer import render_table
from wiki2md.document.node import ElementNode, TextNode
from wiki2md.models.conversion_options import ConversionOptions

HEADING_TAGS = ('h1', 'h2', 'h3', 'h4', 'h5', 'h6')
GENERIC_TAGS = ('div', 'section', 'span')


class BlockKind(Enum):
    """Block-level node categories."""
    MATH = "math"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    QUOTE = "quote"
    LIST = "list"
    TABLE = "table"
    IMAGE = "image"
    RULE = "rule"
    GENERIC = "generic"
    UNKNOWN = "unknown"


_TAG_KINDS = {
    'p': BlockKind.PARAGRAPH,
    'blockquote': BlockKind.QUOTE,
    'ul': BlockKind.LIST,
    'ol': BlockKind.LIST,
    'table': BlockKind.TABLE,
    'img': BlockKind.IMAGE,
    'hr': BlockKind.RULE,
}
_TAG_KINDS.update({tag: BlockKind.HEADING for tag in HEADING_TAGS})
_TAG_KINDS.update({tag: BlockKind.GENERIC for tag in GENERIC_TAGS})


def classify_block(node: ElementNode) -> BlockKind:
    """Return the BlockKind of an element; math class wins over the tag."""
    if is_math_node(node):
        return BlockKind.MATH
    return _TAG_KINDS.get(node.tag, BlockKind.UNKNOWN)


def _render_math(node: ElementNode, options: ConversionOptions, depth: int) -> str:
    if not options.include_math:
        text = node.text_content().strip()
        return text + ' ' if text else ''
    formula = extract_formula(node)
    if is_display_math(node):
        return f"$${formula}$$\n\n"
    return f"${formula}$"


def _render_heading(node: ElementNode, options: ConversionOptions, depth: int) -> str:
    level = int(node.tag[1])
    return '#' * level + ' ' + render_inline(node, options).strip() + '\n\n'


def _render_paragraph(node: ElementNode, options: ConversionOptions, depth: int) -> str:
    text = render_inline(node, options).strip()
    return text + '\n\n' if text else ''


def _render_quote(node: ElementNode, options: ConversionOptions, depth: int) -> str:
    lines = render_inline(node, options).strip().split('\n')
    return '\n'.join('> ' + line for line in lines) + '\n\n'


def _render_list(node: ElementNode, options: ConversionOptions, depth: int) -> str:
    return render_list(node, options, depth, node.tag == 'ol')


def _render_table(node: ElementNode, options: ConversionOptions, depth: int) -> str:
    if not options.include_tables:
        return ''
    return render_table(node)


def _render_image(node: ElementNode, options: ConversionOptions, depth: int) -> str:
    if not options.include_images:
        return ''
    src = node.get('src')
    if not src:
        return ''
    alt = node.get('alt') or 'image'
    # Protocol-relative sources get an explicit scheme
    if src.startswith('//'):
        src = 'https:' + src
    return f"![{alt}]({src})\n\n"


def _render_rule(node: ElementNode, options: ConversionOptions, depth: int) -> str:
    return '---\n\n'


def _render_generic(node: ElementNode, options: ConversionOptions, depth: int) -> str:
    return render_block(node, options, depth)


def _render_unknown(node: ElementNode, options: ConversionOptions, depth: int) -> str:
    if not node.children:
        return ''
    return render_block(node, options, depth)


_HANDLERS: Dict[BlockKind, Callable[[ElementNode, ConversionOptions, int], str]] = {
    BlockKind.MATH: _render_math,
    BlockKind.HEADING: _render_heading,
    BlockKind.PARAGRAPH: _render_paragraph,
    BlockKind.QUOTE: _render_quote,
    BlockKind.LIST: _render_list,
    BlockKind.TABLE: _render_table,
    BlockKind.IMAGE: _render_image,
    BlockKind.RULE: _render_rule,
    BlockKind.GENERIC: _render_generic,
    BlockKind.UNKNOWN: _render_unknown,
}


def render_block(node: ElementNode, options: ConversionOptions, depth: int = 0) -> str:
    """Render the children of ``node`` as Markdown blocks.

    Args:
        node: Container element
        options: Conversion options
        depth: List nesting depth passed through to list rendering

    Returns:
        Markdown text (not yet normalized)
    """
    markdown = ''
    for child in node.children:
        if isinstance(child, TextNode):
            # Stray inline text directly in block context
            text = child.text.strip()
            if text:
                markdown += text + ' '
            continue
        handler = _HANDLERS[classify_block(child)]
        markdown += handler(child, options, depth)
    return markdown
