"""Execution planning for RenderedTextLib.

The CollectionPlan validates a CollectionConfig, assembles the collector
it asks for and runs the collection, including the innerText getter's
handling of roots that are not rendered.
"""

import logging
from typing import Any, List, Optional

from .config import CollectionConfig, CollectionStrategy
from .core.collector import RenderedTextCollector, create_collector
from .core.items import Item, TextFragment
from .core.node import NodeKind
from .core.provider import NodeProvider
from .core.state import TraversalState
from .core.style import Display
from .result import RenderedText
from .serialization import condense_items, join_items

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when a CollectionConfig can't be executed."""
    pass


class CollectionPlan:
    """Validated plan for collecting rendered text.

    Bridges user intent (CollectionConfig) and execution: validates the
    configuration before any node is touched, then selects the collector.
    A plan holds no per-collection state and can be executed repeatedly.
    """

    def __init__(self, config: CollectionConfig, provider: NodeProvider):
        """Create and validate a collection plan.

        Args:
            config: Collection configuration
            provider: NodeProvider for the document

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config
        self.provider = provider

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.collector = self._select_collector()
        logger.debug("Collection plan using %s", type(self.collector).__name__)

    def _select_collector(self) -> RenderedTextCollector:
        if self.config.strategy == CollectionStrategy.CUSTOM:
            return self.config.custom_collector

        exclude_filter = None
        if self.config.filter.exclude_filter is not None:
            exclude_filter = self.config.filter.should_exclude

        return create_collector(self.config.strategy.value, self.provider, exclude_filter)

    def collect(self, root: Any, state: Optional[TraversalState] = None) -> List[Item]:
        """Run the collector and return the raw items."""
        items = self.collector.collect(root, state)
        logger.debug("Collected %d items from %r", len(items), root)
        return items

    def execute(self, root: Any) -> RenderedText:
        """Compute the rendered text of ``root``.

        Args:
            root: Node whose rendered text is wanted

        Returns:
            RenderedText with the final string and its items
        """
        if self.config.text_content_fallback and not self._is_being_rendered(root):
            content = self.provider.descendant_text_content(root)
            logger.debug("Root %r is not being rendered, using its text content", root)
            items: List[Item] = []
            if content:
                items.append(TextFragment(content, root, 0, self.provider.child_count(root)))
            return RenderedText(content, items)

        items = self.collect(root)
        if self.config.condense:
            items = condense_items(items, self.provider)
        return RenderedText(join_items(items), items)

    def _is_being_rendered(self, root: Any) -> bool:
        """Check the innerText getter's "being rendered" condition.

        Only element roots can fail it: disconnected, unstyled or
        display:none elements are not rendered. Replaced elements are always
        collected, as their content never renders as text anyway.
        """
        provider = self.provider
        if provider.node_kind(root) is not NodeKind.ELEMENT:
            return True
        if provider.element_tag(root).is_replaced:
            return True
        if not provider.is_connected(root):
            return False
        style = provider.get_style(root)
        return style is not None and style.display is not Display.NONE
