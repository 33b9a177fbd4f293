"""Computed style snapshot consumed by the collection algorithm.

The library never computes styles. A NodeProvider hands out a read-only
StyleSnapshot per element, holding just the handful of computed values
the algorithm looks at.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class Visibility(Enum):
    VISIBLE = "visible"
    NOT_VISIBLE = "not-visible"   # hidden or collapse


class Display(Enum):
    NONE = "none"
    BLOCK = "block"
    INLINE = "inline"
    INLINE_BLOCK = "inline-block"
    INLINE_FLEX = "inline-flex"
    INLINE_GRID = "inline-grid"
    TABLE = "table"
    TABLE_ROW = "table-row"
    TABLE_CELL = "table-cell"
    TABLE_CAPTION = "table-caption"
    OTHER = "other"

    @property
    def is_inline_block_like(self) -> bool:
        """Inline-level boxes that establish their own formatting context."""
        return self in INLINE_BLOCK_LIKE


INLINE_BLOCK_LIKE = frozenset({
    Display.INLINE_BLOCK,
    Display.INLINE_FLEX,
    Display.INLINE_GRID,
})


class Position(Enum):
    ABSOLUTE = "absolute"
    OTHER = "other"


class Float(Enum):
    NONE = "none"
    OTHER = "other"


class WhiteSpaceCollapse(Enum):
    COLLAPSE = "collapse"
    PRESERVE = "preserve"


class TextTransform(Enum):
    NONE = "none"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    CAPITALIZE = "capitalize"


# Block-level display keywords that have no member of their own
_BLOCK_LEVEL = {'list-item', 'flex', 'grid', 'flow-root'}

_PRESERVING_WHITE_SPACE = {'pre', 'pre-wrap', 'break-spaces'}


@dataclass(frozen=True)
class StyleSnapshot:
    """Immutable snapshot of the computed values for one element."""

    visibility: Visibility = Visibility.VISIBLE
    display: Display = Display.INLINE
    position: Position = Position.OTHER
    float: Float = Float.NONE
    white_space_collapse: WhiteSpaceCollapse = WhiteSpaceCollapse.COLLAPSE
    text_transform: TextTransform = TextTransform.NONE

    @property
    def is_visible(self) -> bool:
        return self.visibility is Visibility.VISIBLE

    @property
    def is_out_of_flow(self) -> bool:
        """Absolutely positioned and floated boxes are treated like blocks."""
        return self.position is Position.ABSOLUTE or self.float is not Float.NONE

    @property
    def preserves_whitespace(self) -> bool:
        return self.white_space_collapse is WhiteSpaceCollapse.PRESERVE

    @classmethod
    def from_css(cls, computed: Mapping[str, Any]) -> 'StyleSnapshot':
        """Build a snapshot from computed CSS keyword values.

        Accepts hyphenated property names as a style engine would report
        them ("white-space-collapse") as well as underscored ones
        ("white_space_collapse"). Missing properties take their initial
        values; unrecognised keywords fall back to OTHER.

        Args:
            computed: Mapping of property name to keyword string

        Returns:
            StyleSnapshot for those values

        Example:
            >>> StyleSnapshot.from_css({'display': 'table-cell'}).display
            <Display.TABLE_CELL: 'table-cell'>
        """
        values: Dict[str, str] = {
            str(key).replace('_', '-').lower(): str(value).strip().lower()
            for key, value in computed.items()
            if value is not None
        }

        visibility = Visibility.VISIBLE
        if values.get('visibility', 'visible') != 'visible':
            visibility = Visibility.NOT_VISIBLE

        return cls(
            visibility=visibility,
            display=_parse_display(values.get('display')),
            position=(Position.ABSOLUTE if values.get('position') == 'absolute'
                      else Position.OTHER),
            float=Float.NONE if values.get('float', 'none') == 'none' else Float.OTHER,
            white_space_collapse=_parse_white_space(values),
            text_transform=_parse_text_transform(values.get('text-transform')),
        )


def _parse_display(value: Optional[str]) -> Display:
    if value is None:
        return Display.INLINE
    if value in _BLOCK_LEVEL:
        return Display.BLOCK
    try:
        return Display(value)
    except ValueError:
        return Display.OTHER


def _parse_white_space(values: Dict[str, str]) -> WhiteSpaceCollapse:
    if 'white-space-collapse' in values:
        if values['white-space-collapse'] == 'preserve':
            return WhiteSpaceCollapse.PRESERVE
        return WhiteSpaceCollapse.COLLAPSE
    if values.get('white-space') in _PRESERVING_WHITE_SPACE:
        return WhiteSpaceCollapse.PRESERVE
    return WhiteSpaceCollapse.COLLAPSE


def _parse_text_transform(value: Optional[str]) -> TextTransform:
    try:
        return TextTransform(value or 'none')
    except ValueError:
        return TextTransform.NONE
