"""Generic node tree used by the conversion engine.

The tree is a small, read-only abstraction over a parsed HTML document:
text nodes hold character data, element nodes hold a lowercase tag name,
a class set, attributes and ordered children. Every node keeps a
back-reference to its parent so renderers can ask ancestor questions
(for example "am I inside a display-math container?").

Trees are built once by the document loader and never mutated during a
conversion. The sanitizer produces a new tree instead of editing one.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Iterator, List, Optional, Union


@dataclass
class TextNode:
    """A run of character data."""
    text: str
    parent: Optional['ElementNode'] = field(default=None, repr=False, compare=False)

    def text_content(self) -> str:
        return self.text


@dataclass
class ElementNode:
    """An element with tag name, classes, attributes and children.

    Attributes:
        tag: Lowercase tag name (e.g. "p", "table")
        classes: Set of class names
        attributes: Attribute name -> value
        children: Child nodes in document order
        parent: Enclosing element (None for a tree root)
    """
    tag: str
    classes: FrozenSet[str] = frozenset()
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List['Node'] = field(default_factory=list)
    parent: Optional['ElementNode'] = field(default=None, repr=False, compare=False)

    def append(self, child: 'Node') -> 'Node':
        """Attach ``child`` as the last child and set its parent."""
        child.parent = self
        self.children.append(child)
        return child

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(name, default)

    def text_content(self) -> str:
        """Concatenated text of all descendant text nodes, in document order."""
        return ''.join(
            node.text for node in self.iter_descendants()
            if isinstance(node, TextNode)
        )

    def element_children(self) -> List['ElementNode']:
        return [child for child in self.children if isinstance(child, ElementNode)]

    def iter_descendants(self) -> Iterator['Node']:
        """Yield every descendant (not self) in document order."""
        for child in self.children:
            yield child
            if isinstance(child, ElementNode):
                yield from child.iter_descendants()

    def find_all(self, predicate: Callable[['ElementNode'], bool]) -> List['ElementNode']:
        """Return all descendant elements matching ``predicate``."""
        return [
            node for node in self.iter_descendants()
            if isinstance(node, ElementNode) and predicate(node)
        ]

    def find(self, predicate: Callable[['ElementNode'], bool]) -> Optional['ElementNode']:
        """Return the first descendant element matching ``predicate``."""
        for node in self.iter_descendants():
            if isinstance(node, ElementNode) and predicate(node):
                return node
        return None

    def closest(self, predicate: Callable[['ElementNode'], bool]) -> Optional['ElementNode']:
        """Return self or the nearest ancestor matching ``predicate``."""
        node: Optional[ElementNode] = self
        while node is not None:
            if predicate(node):
                return node
            node = node.parent
        return None


Node = Union[TextNode, ElementNode]


def is_tag(*names: str) -> Callable[[ElementNode], bool]:
    """Predicate matching elements whose tag is one of ``names``."""
    wanted = frozenset(names)
    return lambda node: node.tag in wanted
