"""RenderedTextLib - rendered text collection for styled document trees.

RenderedTextLib computes what an element's innerText would be: it walks a
document subtree, applies visibility, display, white space and
text-transform rules from each element's computed style, and produces the
plain text that approximates what the subtree displays.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from renderedtextlib import inner_text
    from renderedtextlib.adapters import MemoryNodeProvider, document, element

    body = element('body', element('p', 'Hello'), display='block')
    document(body)
    inner_text(body, MemoryNodeProvider())
━━━━━━━━━━━━━━━━━━━━━━━━━━

Any document tree works once it has a NodeProvider; see
renderedtextlib.core.provider.
"""

__version__ = "0.1.0"

from .core import (
    NodeKind,
    ElementTag,
    StyleSnapshot,
    Visibility,
    Display,
    Position,
    Float,
    WhiteSpaceCollapse,
    TextTransform,
    Item,
    TextFragment,
    LineBreakCount,
    TraversalState,
    NodeProvider,
    RenderedTextCollector,
    RecursiveRenderedTextCollector,
    IterativeRenderedTextCollector,
    create_collector,
)
from .config import CollectionConfig, CollectionStrategy, FilterConfig
from .planning import CollectionPlan, ConfigurationError
from .result import InnerTextRangeError, RenderedText, TextRange
from .serialization import condense_items, join_items, to_inner_text
from .cache import InnerTextCache
from .api import inner_text, render_text, collect_items

__all__ = [
    "__version__",
    # Core
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
    "RenderedTextCollector",
    "RecursiveRenderedTextCollector",
    "IterativeRenderedTextCollector",
    "create_collector",
    # Config
    "CollectionConfig",
    "CollectionStrategy",
    "FilterConfig",
    "CollectionPlan",
    "ConfigurationError",
    # Output
    "RenderedText",
    "TextRange",
    "InnerTextRangeError",
    "condense_items",
    "join_items",
    "to_inner_text",
    "InnerTextCache",
    # API
    "inner_text",
    "render_text",
    "collect_items",
]
