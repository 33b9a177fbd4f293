"""Core abstractions for RenderedTextLib.

This package contains the node provider contract, the style and item
types, and the collection algorithm itself.
"""

from .node import NodeKind, ElementTag
from .style import (
    StyleSnapshot,
    Visibility,
    Display,
    Position,
    Float,
    WhiteSpaceCollapse,
    TextTransform,
)
from .items import Item, TextFragment, LineBreakCount
from .state import TraversalState
from .provider import NodeProvider
from .whitespace import collapse_whitespace, ASCII_WHITESPACE
from .transform import apply_text_transform, capitalize
from .collector import (
    RenderedTextCollector,
    RecursiveRenderedTextCollector,
    IterativeRenderedTextCollector,
    create_collector,
)

__all__ = [
    "NodeKind",
    "ElementTag",
    "StyleSnapshot",
    "Visibility",
    "Display",
    "Position",
    "Float",
    "WhiteSpaceCollapse",
    "TextTransform",
    "Item",
    "TextFragment",
    "LineBreakCount",
    "TraversalState",
    "NodeProvider",
    "collapse_whitespace",
    "ASCII_WHITESPACE",
    "apply_text_transform",
    "capitalize",
    "RenderedTextCollector",
    "RecursiveRenderedTextCollector",
    "IterativeRenderedTextCollector",
    "create_collector",
]
