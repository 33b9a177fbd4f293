"""In-memory document adapter for RenderedTextLib.

A minimal document tree with precomputed style snapshots. Useful for
tests, for feeding the collector from a parser plus a separate style
engine, and as a reference for writing providers over real DOMs.

Example:
    >>> from renderedtextlib.adapters.memory import document, element, MemoryNodeProvider
    >>> doc = document(element('div', 'Hello ', element('b', 'world'), display='block'))
    >>> div = doc.children[0]
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from ..core.node import ElementTag, NodeKind
from ..core.provider import NodeProvider
from ..core.style import Display, StyleSnapshot


class MemoryNode:
    """Base class for in-memory nodes.

    Nodes compare by identity, so they can serve as dictionary and weak
    dictionary keys.
    """

    kind = NodeKind.OTHER

    # Bumped on every change to any tree's structure or styles, so providers
    # know when their per-node bookkeeping is out of date.
    generation = 0

    def __init__(self):
        self.parent: Optional['MemoryNode'] = None
        self.children: List['MemoryNode'] = []

    @staticmethod
    def _changed() -> None:
        MemoryNode.generation += 1

    def append(self, *nodes: Union['MemoryNode', str]) -> 'MemoryNode':
        """Append children, converting strings to text nodes.

        A node that already has a parent is moved.

        Returns:
            self, for chaining
        """
        for node in nodes:
            child = MemoryText(node) if isinstance(node, str) else node
            if child.parent is not None:
                child.parent.remove(child)
            child.parent = self
            self.children.append(child)
        self._changed()
        return self

    def remove(self, child: 'MemoryNode') -> None:
        """Detach a child from this node."""
        self.children.remove(child)
        child.parent = None
        self._changed()

    def root(self) -> 'MemoryNode':
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def ancestors(self) -> Iterator['MemoryNode']:
        """Yield parent, grandparent, ... up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent


class MemoryDocument(MemoryNode):
    """Document root. Nodes under a document are connected."""

    def __repr__(self) -> str:
        return f"MemoryDocument(children={len(self.children)})"


class MemoryElement(MemoryNode):
    """Element with a tag, attributes and an optional computed style."""

    kind = NodeKind.ELEMENT

    def __init__(self,
                 name: str,
                 style: Optional[StyleSnapshot] = None,
                 tag: Optional[ElementTag] = None,
                 attributes: Optional[Dict[str, str]] = None):
        """Initialize an element.

        Args:
            name: Tag name as written in markup ("div", "td", ...)
            style: Computed style, or None for an unstyled element
            tag: Explicit ElementTag; derived from ``name`` by default
            attributes: Attribute values by name
        """
        super().__init__()
        self.name = name
        self.tag = tag if tag is not None else ElementTag.from_name(name)
        self.attributes: Dict[str, str] = dict(attributes or {})
        self._style = style

    @property
    def style(self) -> Optional[StyleSnapshot]:
        return self._style

    @style.setter
    def style(self, value: Optional[StyleSnapshot]) -> None:
        self._style = value
        self._changed()

    def __repr__(self) -> str:
        return f"MemoryElement(name={self.name!r})"


class MemoryText(MemoryNode):
    """Text node."""

    kind = NodeKind.TEXT

    def __init__(self, data: str):
        super().__init__()
        self.data = data

    def append(self, *nodes):
        raise TypeError("Text nodes cannot have children")

    def __repr__(self) -> str:
        return f"MemoryText(data={self.data[:30]!r})"


class MemoryComment(MemoryNode):
    """Comment node; contributes nothing to rendered text."""

    def __init__(self, data: str = ''):
        super().__init__()
        self.data = data

    def append(self, *nodes):
        raise TypeError("Comment nodes cannot have children")

    def __repr__(self) -> str:
        return f"MemoryComment(data={self.data[:30]!r})"


def _hides_descendants(node: MemoryNode) -> bool:
    return (isinstance(node, MemoryElement)
            and node.style is not None
            and node.style.display is Display.NONE)


class MemoryNodeProvider(NodeProvider):
    """NodeProvider over MemoryNode trees.

    Emulates a style engine that does not style the inside of a
    display:none subtree: ``get_style`` returns None for any element with
    an ancestor whose display is none.

    Each node's root and whether an ancestor hides it are remembered, so a
    whole walk costs time proportional to the number of nodes rather than
    nodes times depth. The memo is dropped whenever any tree changes.
    """

    def __init__(self):
        self._generation = -1
        self._context: Dict[MemoryNode, Tuple[MemoryNode, bool]] = {}

    def _context_of(self, node: MemoryNode) -> Tuple[MemoryNode, bool]:
        """Return (root, whether an ancestor has display none) for ``node``."""
        if self._generation != MemoryNode.generation:
            self._context.clear()
            self._generation = MemoryNode.generation

        context = self._context
        path = []
        current: Optional[MemoryNode] = node
        while current is not None and current not in context:
            path.append(current)
            current = current.parent

        if current is None:
            top = path.pop()
            context[top] = (top, False)
            current = top

        root, hidden = context[current]
        for child in reversed(path):
            hidden = hidden or _hides_descendants(current)
            context[child] = (root, hidden)
            current = child

        return context[node]

    def is_connected(self, node: MemoryNode) -> bool:
        return isinstance(self._context_of(node)[0], MemoryDocument)

    def node_kind(self, node: MemoryNode) -> NodeKind:
        return node.kind

    def element_tag(self, node: MemoryElement) -> ElementTag:
        return node.tag

    def get_parent(self, node: MemoryNode) -> Optional[MemoryNode]:
        return node.parent

    def get_children(self, node: MemoryNode) -> Iterator[MemoryNode]:
        return iter(node.children)

    def child_count(self, node: MemoryNode) -> int:
        return len(node.children)

    def get_attribute(self, node: MemoryNode, name: str) -> Optional[str]:
        if not isinstance(node, MemoryElement):
            return None
        return node.attributes.get(name)

    def get_style(self, node: MemoryNode) -> Optional[StyleSnapshot]:
        if not isinstance(node, MemoryElement):
            return None
        if self._context_of(node)[1]:
            return None
        return node.style

    def text_content(self, node: MemoryNode) -> str:
        return node.data if isinstance(node, MemoryText) else ''


# Builders

_DEFAULT = object()


def document(*children: Union[MemoryNode, str]) -> MemoryDocument:
    """Create a document holding ``children``."""
    return MemoryDocument().append(*children)


def element(name: str,
            *children: Union[MemoryNode, str],
            style: Any = _DEFAULT,
            attributes: Optional[Dict[str, str]] = None,
            **css: str) -> MemoryElement:
    """Create an element.

    The style is built from ``css`` keywords with underscores for hyphens
    (``display='table-cell'``, ``white_space='pre'``) unless ``style`` is
    given. Pass ``style=None`` for an element without style data.

    Args:
        name: Tag name
        *children: Child nodes; strings become text nodes
        style: Explicit StyleSnapshot or None
        attributes: Attribute values, e.g. ``{'open': ''}`` for details
        **css: Computed CSS keywords, see StyleSnapshot.from_css

    Returns:
        The new MemoryElement
    """
    if style is _DEFAULT:
        style = StyleSnapshot.from_css(css)
    elif css:
        raise TypeError("Pass either style or CSS keywords, not both")
    node = MemoryElement(name, style, attributes=attributes)
    node.append(*children)
    return node


def text(data: str) -> MemoryText:
    """Create a detached text node."""
    return MemoryText(data)
