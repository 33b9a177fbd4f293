"""Items produced by rendered text collection.

Collection yields a flat, document-ordered list of two kinds of item:
literal text fragments, and required line break counts marking block
boundaries. The counts are resolved into newlines later, when adjacent
boundaries are coalesced (see renderedtextlib.serialization).

Every item remembers where it came from, so a position in the rendered
text can be mapped back to a (node, offset) position in the tree:

- A TextFragment from a text node covers ``start_offset`` to
  ``end_offset`` of that node's data. When white space collapsing or case
  mapping changed the length, ``offsets`` holds the source offset of every
  character of ``text``.
- Fragments the collector inserts itself (tabs, row separators, restored
  spaces) have both offsets 0.
- A LineBreakCount's ``offset`` is a child index of its element: 0 before
  the children, the number of children after them.
"""

from dataclasses import dataclass, field
from typing import Any, Tuple, Union


@dataclass(frozen=True)
class TextFragment:
    """A piece of rendered text.

    ``node`` and the offsets record the source of the fragment. They are
    kept for debugging and offset mapping and do not take part in equality.
    """
    text: str
    node: Any = field(default=None, compare=False, repr=False)
    start_offset: int = field(default=0, compare=False, repr=False)
    end_offset: int = field(default=0, compare=False, repr=False)
    offsets: Tuple[int, ...] = field(default=(), compare=False, repr=False)

    def source_offset(self, index: int) -> int:
        """Return the source offset of ``text[index]``.

        ``index`` may equal ``len(text)``, meaning the end of the fragment.
        """
        if index >= len(self.text):
            return self.end_offset
        if self.offsets:
            return self.offsets[index]
        return min(self.start_offset + index, self.end_offset)


@dataclass(frozen=True)
class LineBreakCount:
    """A required line break count at the start or end of a block."""
    count: int
    node: Any = field(default=None, compare=False, repr=False)
    offset: int = field(default=0, compare=False, repr=False)

    def __post_init__(self):
        if self.count < 1:
            raise ValueError(f"Line break count must be positive, got {self.count}")


Item = Union[TextFragment, LineBreakCount]
