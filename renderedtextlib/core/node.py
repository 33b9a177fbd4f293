"""Node and element kinds for RenderedTextLib.

Nodes themselves are opaque to the library - they are whatever the
NodeProvider hands out. The collector only ever asks the provider which
kind of node it is looking at, and for elements, which tag.
"""

from enum import Enum
from typing import Dict


class NodeKind(Enum):
    """The kinds of node the collection algorithm distinguishes."""
    TEXT = "text"
    ELEMENT = "element"
    OTHER = "other"          # Documents, comments, processing instructions...


class ElementTag(Enum):
    """Element tags the collection algorithm inspects.

    This is a closed set: every element the algorithm does not treat
    specially maps to OTHER.
    """
    CANVAS = "canvas"
    IMAGE = "img"
    IFRAME = "iframe"
    OBJECT = "object"
    INPUT = "input"
    TEXTAREA = "textarea"
    MEDIA = "media"          # audio and video
    SELECT = "select"
    OPTGROUP = "optgroup"
    OPTION = "option"
    BR = "br"
    PARAGRAPH = "p"
    DETAILS = "details"
    SUMMARY = "summary"
    NOSCRIPT = "noscript"     # Scripting is assumed on, so never rendered
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> 'ElementTag':
        """Map an HTML tag name (any case) to an ElementTag.

        Args:
            name: Tag name such as "P", "img" or "video"

        Returns:
            The matching ElementTag, or ElementTag.OTHER
        """
        return _TAG_NAMES.get(name.lower(), cls.OTHER)

    @property
    def is_replaced(self) -> bool:
        """Whether the element's children are never rendered as text."""
        return self in REPLACED_TAGS

    @property
    def is_option_like(self) -> bool:
        """Option and optgroup render even when their display is none."""
        return self in OPTION_TAGS


_TAG_NAMES: Dict[str, ElementTag] = {
    'canvas': ElementTag.CANVAS,
    'img': ElementTag.IMAGE,
    'iframe': ElementTag.IFRAME,
    'object': ElementTag.OBJECT,
    'input': ElementTag.INPUT,
    'textarea': ElementTag.TEXTAREA,
    'audio': ElementTag.MEDIA,
    'video': ElementTag.MEDIA,
    'select': ElementTag.SELECT,
    'optgroup': ElementTag.OPTGROUP,
    'option': ElementTag.OPTION,
    'br': ElementTag.BR,
    'p': ElementTag.PARAGRAPH,
    'details': ElementTag.DETAILS,
    'summary': ElementTag.SUMMARY,
    'noscript': ElementTag.NOSCRIPT,
}

# Any text or content contained in these elements is ignored
REPLACED_TAGS = frozenset({
    ElementTag.CANVAS,
    ElementTag.IMAGE,
    ElementTag.IFRAME,
    ElementTag.OBJECT,
    ElementTag.INPUT,
    ElementTag.TEXTAREA,
    ElementTag.MEDIA,
})

OPTION_TAGS = frozenset({ElementTag.OPTION, ElementTag.OPTGROUP})
