"""Formula source recovery for math elements.

MediaWiki publishes each formula in up to three forms: MathML with a TeX
annotation, a fallback image whose alt text is the TeX source, and the
visible rendered text. extract_formula() tries them in that order.
"""

from wiki2md.document.node import ElementNode

MATH_CLASS = 'mwe-math-element'
DISPLAY_MATH_CLASS = 'mwe-math-mathml-display'
DISPLAY_CONTAINER_CLASS = 'mw-math-display'

TEX_ENCODING = 'application/x-tex'
FALLBACK_IMAGE_CLASSES = frozenset({
    'mwe-math-fallback-image-inline',
    'mwe-math-fallback-image-display',
})


def is_math_node(node: ElementNode) -> bool:
    return node.has_class(MATH_CLASS)


def is_display_math(node: ElementNode) -> bool:
    """Return True if ``node`` should render as a $$...$$ block.

    A formula is display math when it sits inside a display-math <dl>
    (the node itself included) or carries the MathML display class.
    """
    container = node.closest(
        lambda el: el.tag == 'dl' and el.has_class(DISPLAY_CONTAINER_CLASS)
    )
    return container is not None or node.has_class(DISPLAY_MATH_CLASS)


def _is_tex_annotation(node: ElementNode) -> bool:
    return node.tag == 'annotation' and node.get('encoding') == TEX_ENCODING


def _is_fallback_image(node: ElementNode) -> bool:
    return node.tag == 'img' and not FALLBACK_IMAGE_CLASSES.isdisjoint(node.classes)


def extract_formula(node: ElementNode) -> str:
    """Return the formula source for a math element.

    Args:
        node: Math element

    Returns:
        TeX annotation text, else fallback image alt text, else the
        element's own text. Always trimmed; may be empty.
    """
    annotation = node.find(_is_tex_annotation)
    if annotation is not None:
        return annotation.text_content().strip()

    image = node.find(_is_fallback_image)
    if image is not None and image.get('alt'):
        return image.get('alt').strip()

    # Last resort: may contain rendering artifacts
    return node.text_content().strip()
