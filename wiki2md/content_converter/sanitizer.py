"""Removal of non-content nodes before rendering.

Article HTML carries a lot of furniture that has no place in a Markdown
export: edit links, citation markers, navigation boxes, infoboxes, hidden
elements, styles and scripts. sanitize() builds a fresh copy of the
content tree that leaves every such node (and its subtree) out. The
source tree is never touched.
"""

import logging
from typing import Tuple

from wiki2md.document.node import ElementNode, TextNode

logger = logging.getLogger(__name__)

REMOVED_CLASSES = frozenset({
    'mw-editsection',   # edit section links
    'reference',        # citation reference brackets
    'navbox',           # navigation boxes
    'ambox',            # article message boxes
    'sistersitebox',    # sister site boxes
    'toc',              # table of contents
    'infobox',
    'metadata',
    'catlinks',         # category links
    'printfooter',
    'mw-jump-link',
    'noprint',
    'hatnote',
    'mw-empty-elt',     # empty elements
})

REMOVED_IDS = frozenset({'toc'})

REMOVED_TAGS = frozenset({'style', 'script'})

HIDDEN_STYLES = ('display: none', 'display:none')


def is_removed(node: ElementNode) -> bool:
    """Return True if ``node`` matches any denylist rule."""
    if node.tag in REMOVED_TAGS:
        return True
    if not REMOVED_CLASSES.isdisjoint(node.classes):
        return True
    if node.get('id') in REMOVED_IDS:
        return True
    style = node.get('style')
    if style and any(hidden in style for hidden in HIDDEN_STYLES):
        return True
    return False


def _copy(node: ElementNode) -> Tuple[ElementNode, int]:
    clone = ElementNode(
        tag=node.tag,
        classes=node.classes,
        attributes=dict(node.attributes),
    )
    removed = 0
    for child in node.children:
        if isinstance(child, TextNode):
            clone.append(TextNode(child.text))
        elif is_removed(child):
            removed += 1
        else:
            child_clone, child_removed = _copy(child)
            clone.append(child_clone)
            removed += child_removed
    return clone, removed


def sanitize(root: ElementNode) -> ElementNode:
    """Return a copy of ``root`` without denylisted descendants.

    The root itself is always kept, even if it matches a rule.

    Args:
        root: Content container to clean

    Returns:
        New tree; ``root`` is left unchanged
    """
    clone, removed = _copy(root)
    logger.debug(f"Sanitizer removed {removed} node(s)")
    return clone
