"""Turning collected items into a string.

Collection leaves required line break counts in place at every block
boundary. Before joining, runs of adjacent counts are coalesced to their
maximum (not their sum) and counts at the very start or end are removed,
so "<p>A</p><p>B</p>" becomes "A\\n\\nB" rather than "A\\n\\n\\n\\nB".
"""

from dataclasses import replace
from typing import List, Optional, Sequence

from .core.items import Item, LineBreakCount, TextFragment
from .core.node import ElementTag
from .core.provider import NodeProvider


def condense_items(items: Sequence[Item],
                   provider: Optional[NodeProvider] = None) -> List[Item]:
    """Coalesce line break counts and strip them from both ends.

    The input is left untouched.

    Args:
        items: Items as produced by a collector
        provider: Provider for the items' nodes. When given, a lone item
            produced by a br element condenses to nothing, as a br on its
            own does not start a new line.

    Returns:
        New list starting and ending with a TextFragment, with no two
        LineBreakCounts adjacent; empty if there is no text at all
    """
    if not items:
        return []
    if len(items) == 1 and provider is not None and _is_line_break_element(items[0], provider):
        return []

    last = len(items) - 1
    condensed: List[Item] = []
    for index, item in enumerate(items):
        if isinstance(item, TextFragment):
            condensed.append(item)
            continue

        if index == 0 or index == last:
            continue

        previous = condensed[-1] if condensed else None
        if isinstance(previous, LineBreakCount):
            if item.count > previous.count:
                condensed[-1] = replace(previous, count=item.count)
            continue

        condensed.append(item)

    start = next((i for i, item in enumerate(condensed) if isinstance(item, TextFragment)), None)
    if start is None:
        return []
    end = max(i for i, item in enumerate(condensed) if isinstance(item, TextFragment)) + 1

    return condensed[start:end]


def _is_line_break_element(item: Item, provider: NodeProvider) -> bool:
    return item.node is not None and provider.tag_of(item.node) is ElementTag.BR


def item_length(item: Item, index: int, count: int) -> int:
    """Length of ``item`` in the joined string.

    Args:
        item: The item
        index: Its position in the list
        count: Length of the list
    """
    if isinstance(item, TextFragment):
        return len(item.text)
    if 0 < index < count - 1:
        return item.count
    return 0


def join_items(items: Sequence[Item]) -> str:
    """Concatenate items into a string.

    LineBreakCount(n) becomes n newlines, except as the first or last item
    where it contributes nothing.
    """
    count = len(items)
    parts = []
    for index, item in enumerate(items):
        if isinstance(item, TextFragment):
            parts.append(item.text)
        else:
            parts.append('\n' * item_length(item, index, count))
    return ''.join(parts)


def to_inner_text(items: Sequence[Item], provider: Optional[NodeProvider] = None) -> str:
    """Condense then join: the final rendered string for ``items``."""
    return join_items(condense_items(items, provider))
