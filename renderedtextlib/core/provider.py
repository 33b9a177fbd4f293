"""NodeProvider abstraction for RenderedTextLib.

The collector never touches nodes directly. Everything it needs to know
about a node - whether it is connected, what kind it is, its parent,
children, computed style and text - comes from a NodeProvider. This keeps
the algorithm independent of any particular DOM implementation: a provider
can wrap a browser engine's live tree, a parsed document with precomputed
styles, or the in-memory tree in renderedtextlib.adapters.memory.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional

from .node import ElementTag, NodeKind
from .style import StyleSnapshot


class NodeProvider(ABC):
    """Abstract provider answering questions about nodes of one tree.

    Nodes are opaque handles; any object the provider understands will do.
    The tree and its styles must not change while a collection is running.

    Providers are expected to behave like a style engine that skips
    display:none subtrees: an element whose display is none still has its
    own StyleSnapshot, but its descendants have none.
    """

    @abstractmethod
    def is_connected(self, node: Any) -> bool:
        """Check whether the node is attached to a document."""
        pass

    @abstractmethod
    def node_kind(self, node: Any) -> NodeKind:
        """Return the kind of the node."""
        pass

    @abstractmethod
    def element_tag(self, node: Any) -> ElementTag:
        """Return the tag of an element node.

        Only called for nodes whose kind is NodeKind.ELEMENT.
        """
        pass

    @abstractmethod
    def get_parent(self, node: Any) -> Optional[Any]:
        """Return the parent node, or None for a root."""
        pass

    @abstractmethod
    def get_children(self, node: Any) -> Iterator[Any]:
        """Return an iterator over the node's children in tree order."""
        pass

    @abstractmethod
    def get_style(self, node: Any) -> Optional[StyleSnapshot]:
        """Return the computed style snapshot, or None if not styled."""
        pass

    @abstractmethod
    def text_content(self, node: Any) -> str:
        """Return the character data of a text node."""
        pass

    def get_attribute(self, node: Any, name: str) -> Optional[str]:
        """Return an element attribute's value, or None if absent.

        Only consulted for the ``open`` attribute of details elements.
        The default reports every attribute as absent.
        """
        return None

    def child_count(self, node: Any) -> int:
        """Return the number of children; override if it is cheaper."""
        return sum(1 for _ in self.get_children(node))

    def tag_of(self, node: Any) -> Optional[ElementTag]:
        """Return the node's tag if it is an element, otherwise None."""
        if self.node_kind(node) is NodeKind.ELEMENT:
            return self.element_tag(node)
        return None

    def descendant_text_content(self, node: Any) -> str:
        """Concatenate the data of every descendant text node in tree order.

        Default implementation walks the tree with an explicit stack.
        Providers backed by a real DOM can override this with the DOM's own
        textContent.

        Args:
            node: Root of the subtree

        Returns:
            The subtree's text content, unstyled
        """
        if self.node_kind(node) is NodeKind.TEXT:
            return self.text_content(node)

        parts: List[str] = []
        stack = list(reversed(list(self.get_children(node))))
        while stack:
            current = stack.pop()
            kind = self.node_kind(current)
            if kind is NodeKind.TEXT:
                parts.append(self.text_content(current))
            elif kind is NodeKind.ELEMENT:
                stack.extend(reversed(list(self.get_children(current))))
        return ''.join(parts)
