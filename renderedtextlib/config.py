"""Configuration system for RenderedTextLib.

This module defines how users specify a collection: which walking
strategy to use, which elements to leave out, and how the collected
items are turned into the final text.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional


class CollectionStrategy(Enum):
    """How the collector walks the tree."""
    RECURSIVE = "recursive"     # One call per node; bounded by recursion limit
    ITERATIVE = "iterative"     # Explicit stack; any depth
    CUSTOM = "custom"           # User-supplied collector instance


@dataclass
class FilterConfig:
    """Configuration for leaving elements out of the rendered text."""

    # Elements for which this returns True contribute nothing, subtree included
    exclude_filter: Optional[Callable[[Any], bool]] = None

    def should_exclude(self, node: Any) -> bool:
        """Check if an element should be left out.

        Args:
            node: Element node to check

        Returns:
            True if the element and its subtree are excluded
        """
        if self.exclude_filter is None:
            return False
        return bool(self.exclude_filter(node))


@dataclass
class CollectionConfig:
    """Complete configuration for a rendered text collection.

    The CollectionPlan validates this and picks the collector.
    """

    # Walking strategy
    strategy: CollectionStrategy = CollectionStrategy.ITERATIVE
    custom_collector: Optional[Any] = None  # Custom collector instance

    # Element filtering
    filter: FilterConfig = field(default_factory=FilterConfig)

    # Post-processing
    condense: bool = True                 # Coalesce line break counts

    # Return the unstyled text content for a root that is not rendered
    text_content_fallback: bool = True

    @classmethod
    def standards(cls) -> 'CollectionConfig':
        """Config following the HTML standard's innerText getter."""
        return cls()

    @classmethod
    def raw_items(cls, strategy: CollectionStrategy = CollectionStrategy.ITERATIVE) -> 'CollectionConfig':
        """Config returning items exactly as the collector produced them.

        Args:
            strategy: Walking strategy to use

        Returns:
            CollectionConfig without condensing or fallback
        """
        return cls(strategy=strategy, condense=False, text_content_fallback=False)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, CollectionStrategy):
            errors.append(f"strategy must be a CollectionStrategy, got {self.strategy!r}")

        if self.strategy == CollectionStrategy.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when strategy is CUSTOM")

        if self.custom_collector is not None and self.strategy != CollectionStrategy.CUSTOM:
            errors.append("custom_collector given but strategy is not CUSTOM")

        if self.custom_collector is not None and not callable(getattr(self.custom_collector, 'collect', None)):
            errors.append("custom_collector must provide a collect(node, state) method")

        if self.filter.exclude_filter is not None and not callable(self.filter.exclude_filter):
            errors.append("exclude_filter must be callable")

        return errors
