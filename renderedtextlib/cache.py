"""Cache of rendered texts keyed by node.

Computing rendered text walks the whole subtree, so callers that ask for
the same node repeatedly (e.g. mapping many offsets into one element's
text) keep the result here and mark it stale when the node changes.
"""

from collections import OrderedDict
from typing import Any, Dict, Optional

from .config import CollectionConfig
from .core.provider import NodeProvider
from .planning import CollectionPlan
from .result import RenderedText


class InnerTextCache:
    """LRU registry of RenderedText per node.

    Entries hold strong references to nodes (items remember the node that
    produced them), so the cache is bounded: past ``max_entries`` the
    least recently used entry is evicted. Nodes must be hashable.

    Nothing is invalidated automatically. Call ``mark_stale`` when a node's
    subtree or styles change, for example from a mutation observer.
    """

    def __init__(self,
                 provider: NodeProvider,
                 config: Optional[CollectionConfig] = None,
                 max_entries: int = 1024):
        """Initialize the cache.

        Args:
            provider: NodeProvider for the document
            config: Collection configuration used for every entry
            max_entries: Maximum number of cached nodes

        Raises:
            ConfigurationError: If config is invalid
            ValueError: If max_entries is not positive
        """
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._plan = CollectionPlan(config or CollectionConfig(), provider)
        self._entries: 'OrderedDict[Any, RenderedText]' = OrderedDict()
        self.max_entries = max_entries
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def get(self, node: Any) -> RenderedText:
        """Get the rendered text for ``node``, computing it if needed."""
        if node in self._entries:
            self.hits += 1
            self._entries.move_to_end(node)
            return self._entries[node]

        self.misses += 1
        rendered = self._plan.execute(node)
        self._entries[node] = rendered

        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)
            self.evictions += 1

        return rendered

    def mark_stale(self, node: Any) -> None:
        """Drop the cached entry so the next ``get`` recomputes it."""
        self._entries.pop(node, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, node: Any) -> bool:
        return node in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get_stats(self) -> Dict[str, Any]:
        """Return cache statistics.

        Returns:
            Dictionary with entries, hits, misses, evictions and hit_rate
        """
        total = self.hits + self.misses
        return {
            'entries': len(self._entries),
            'hits': self.hits,
            'misses': self.misses,
            'evictions': self.evictions,
            'hit_rate': self.hits / total if total else 0.0,
        }
