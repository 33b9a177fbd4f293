"""The rendered text of one node, and mapping positions in it back to the tree."""

from bisect import bisect_right
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, List, Optional, Tuple

from .core.items import Item, TextFragment
from .serialization import item_length


class InnerTextRangeError(ValueError):
    """Raised when a position lies outside the rendered text."""
    pass


@dataclass(frozen=True)
class TextRange:
    """A span of rendered text as a pair of tree positions.

    Each position is a node and an offset into it: a character offset for
    text nodes, a child index for elements.
    """
    start_node: Any
    start_offset: int
    end_node: Any
    end_offset: int
    text: str

    @property
    def collapsed(self) -> bool:
        return self.start_node is self.end_node and self.start_offset == self.end_offset


@dataclass(frozen=True)
class RenderedText:
    """Rendered text of a node, with the items it was joined from.

    ``items`` must be the items ``value`` was joined from, so positions in
    ``value`` can be traced back to the nodes that produced them.

    Example:
        >>> rendered = render_text(paragraph, provider)
        >>> node, offset = rendered.locate(3)
        >>> rendered.range(0, 5).text
    """

    value: str
    items: List[Item] = field(default_factory=list)

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    @cached_property
    def _spans(self) -> Tuple[List[int], List[Tuple[int, Item]]]:
        """Start index in ``value`` of every item that contributes text."""
        starts: List[int] = []
        spans: List[Tuple[int, Item]] = []
        position = 0
        count = len(self.items)
        for index, item in enumerate(self.items):
            length = item_length(item, index, count)
            if length == 0:
                continue
            starts.append(position)
            spans.append((position, item))
            position += length
        return starts, spans

    def locate(self, index: int) -> Tuple[Any, int]:
        """Map a position in the rendered text to a node and an offset.

        Args:
            index: Position in ``value``; ``len(value)`` means the end

        Returns:
            Tuple of (node, offset). For a character of a text node this is
            the character's offset in the node's data; line breaks map to a
            child index of the element that produced them.

        Raises:
            InnerTextRangeError: If index is not an integer within bounds
        """
        self._check_bounds(index)
        starts, spans = self._spans
        if not spans:
            raise InnerTextRangeError(f"{index} is out of bounds")

        if index == len(self.value):
            start, item = spans[-1]
            return self._position(item, index - start)

        start, item = spans[bisect_right(starts, index) - 1]
        return self._position(item, index - start)

    def range(self, start: int, end: Optional[int] = None) -> TextRange:
        """Map ``value[start:end]`` to a TextRange.

        Args:
            start: Start position in ``value``
            end: End position; a collapsed range at ``start`` if omitted

        Raises:
            InnerTextRangeError: If a position is out of bounds or start is
                greater than end
        """
        if end is None:
            end = start
        self._check_bounds(start)
        self._check_bounds(end)
        if start > end:
            raise InnerTextRangeError(f"start {start} is greater than end {end}")

        start_node, start_offset = self.locate(start)
        if start == end:
            end_node, end_offset = start_node, start_offset
        else:
            end_node, end_offset = self.locate(end)
        return TextRange(start_node, start_offset, end_node, end_offset, self.value[start:end])

    def _check_bounds(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InnerTextRangeError(f"{index!r} is not an integer")
        if index < 0 or index > len(self.value):
            raise InnerTextRangeError(f"{index} is out of bounds")

    @staticmethod
    def _position(item: Item, relative: int) -> Tuple[Any, int]:
        if isinstance(item, TextFragment):
            return item.node, item.source_offset(relative)
        return item.node, item.offset
