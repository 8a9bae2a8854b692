"""Inline Markdown rendering.

Renders the running text of a block: emphasis, links, code spans, line
breaks and inline math. Text is emitted verbatim; no Markdown escaping
is applied at this layer.
"""

from wiki2md.content_converter.math_extractor import extract_formula, is_math_node
from wiki2md.document.node import ElementNode, Node, TextNode
from wiki2md.models.conversion_options import ConversionOptions

WIKI_BASE_URL = 'https://en.wikipedia.org'
INTERNAL_LINK_PREFIX = '/wiki/'


def render_link(node: ElementNode, options: ConversionOptions) -> str:
    """Render an <a> element.

    Only internal article links survive as Markdown links. External URLs,
    same-page anchors and anything else collapse to their text.
    """
    text = node.text_content().strip()
    if not options.preserve_links:
        return text

    href = node.get('href')
    if href and href.startswith(INTERNAL_LINK_PREFIX):
        return f"[{text}]({WIKI_BASE_URL}{href})"
    return text


def render_inline_node(node: Node, options: ConversionOptions) -> str:
    """Render a single node in inline context.

    Args:
        node: Text or element node
        options: Conversion options

    Returns:
        Inline Markdown fragment
    """
    if isinstance(node, TextNode):
        return node.text

    # Math is recognised by class, before looking at the tag
    if is_math_node(node):
        if options.include_math:
            return f"${extract_formula(node)}$"
        return node.text_content()

    tag = node.tag
    if tag in ('strong', 'b'):
        return f"**{render_inline(node, options)}**"
    if tag in ('em', 'i'):
        return f"*{render_inline(node, options)}*"
    if tag == 'a':
        return render_link(node, options)
    if tag == 'code':
        return f"`{node.text_content()}`"
    if tag == 'br':
        return '\n'
    if tag in ('sup', 'sub'):
        return node.text_content()
    return render_inline(node, options)


def render_inline(node: ElementNode, options: ConversionOptions) -> str:
    """Render the children of ``node`` in inline context and concatenate them."""
    return ''.join(render_inline_node(child, options) for child in node.children)
