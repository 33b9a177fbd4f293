"""Node providers for specific document structures.

Adapters implement the NodeProvider interface for different document
trees, so the collector can work with any of them.
"""

from .memory import (
    MemoryNode,
    MemoryDocument,
    MemoryElement,
    MemoryText,
    MemoryComment,
    MemoryNodeProvider,
    document,
    element,
    text,
)

__all__ = [
    "MemoryNode",
    "MemoryDocument",
    "MemoryElement",
    "MemoryText",
    "MemoryComment",
    "MemoryNodeProvider",
    "document",
    "element",
    "text",
]
