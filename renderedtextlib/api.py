"""High-level API for RenderedTextLib.

Simple functional interfaces over CollectionConfig and CollectionPlan for
the common cases: get the text, or get the items.
"""

from typing import Any, Callable, List, Optional, Union

from .config import CollectionConfig, CollectionStrategy, FilterConfig
from .core.items import Item
from .core.provider import NodeProvider
from .core.state import TraversalState
from .planning import CollectionPlan
from .result import RenderedText


def inner_text(root: Any,
               provider: NodeProvider,
               strategy: Union[CollectionStrategy, str] = CollectionStrategy.ITERATIVE,
               exclude_filter: Optional[Callable[[Any], bool]] = None,
               **kwargs) -> str:
    """Return the rendered text of ``root``, like an element's innerText.

    Args:
        root: Node whose text is wanted
        provider: NodeProvider for the document
        strategy: Walking strategy (iterative or recursive)
        exclude_filter: Predicate over elements to leave out
        **kwargs: Additional CollectionConfig options

    Returns:
        The rendered text

    Example:
        >>> from renderedtextlib.adapters.memory import document, element, MemoryNodeProvider
        >>> body = element('body', element('p', 'Hello'), element('p', 'world'),
        ...                display='block')
        >>> doc = document(body)
        >>> inner_text(body, MemoryNodeProvider())
        'Hello\\n\\nworld'
    """
    return render_text(root, provider,
                       _build_config(strategy, exclude_filter, **kwargs)).value


def render_text(root: Any,
                provider: NodeProvider,
                config: Optional[CollectionConfig] = None) -> RenderedText:
    """Return the rendered text of ``root`` along with its items.

    Args:
        root: Node whose text is wanted
        provider: NodeProvider for the document
        config: Collection configuration (defaults to CollectionConfig())

    Returns:
        RenderedText

    Raises:
        ConfigurationError: If config is invalid
    """
    plan = CollectionPlan(config or CollectionConfig(), provider)
    return plan.execute(root)


def collect_items(root: Any,
                  provider: NodeProvider,
                  strategy: Union[CollectionStrategy, str] = CollectionStrategy.ITERATIVE,
                  exclude_filter: Optional[Callable[[Any], bool]] = None,
                  state: Optional[TraversalState] = None,
                  **kwargs) -> List[Item]:
    """Run rendered text collection and return the raw items.

    Items are returned as the collector produced them: line break counts
    are not coalesced and the not-rendered fallback does not apply.

    Args:
        root: Root of the subtree
        provider: NodeProvider for the document
        strategy: Walking strategy (iterative or recursive)
        exclude_filter: Predicate over elements to leave out
        state: Traversal state to continue from
        **kwargs: Additional CollectionConfig options

    Returns:
        Items in document order
    """
    config = _build_config(strategy, exclude_filter, **kwargs)
    config.condense = False
    config.text_content_fallback = False
    return CollectionPlan(config, provider).collect(root, state)


def _build_config(strategy: Union[CollectionStrategy, str],
                  exclude_filter: Optional[Callable[[Any], bool]],
                  **kwargs) -> CollectionConfig:
    config = CollectionConfig(
        strategy=_parse_strategy(strategy),
        filter=FilterConfig(exclude_filter=exclude_filter),
    )

    # Apply any additional kwargs to config
    for key, value in kwargs.items():
        if not hasattr(config, key):
            raise TypeError(f"Unknown collection option: {key}")
        setattr(config, key, value)

    return config


def _parse_strategy(strategy: Union[CollectionStrategy, str]) -> CollectionStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If strategy string is not recognized
    """
    if isinstance(strategy, CollectionStrategy):
        return strategy

    strategy_map = {
        'recursive': CollectionStrategy.RECURSIVE,
        'iterative': CollectionStrategy.ITERATIVE,
        'stack': CollectionStrategy.ITERATIVE,
        'custom': CollectionStrategy.CUSTOM,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategy_map:
        raise ValueError(
            f"Unknown strategy: {strategy}. "
            f"Choose from: {', '.join(strategy_map.keys())}"
        )

    return strategy_map[strategy_lower]
