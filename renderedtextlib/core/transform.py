"""CSS text-transform applied to a character stream."""

import re
from typing import Iterable, Iterator, List, Tuple

from .style import TextTransform

# A letter not preceded by a word character, nor by a word character and an
# apostrophe ("don't" stays one word).
_WORD_INITIAL_LETTER = re.compile(r"(?<!\w)(?<!\w['’])[^\W\d_]")


def apply_text_transform(chars: Iterable[str],
                         transform: TextTransform) -> Iterator[str]:
    """Lazily apply a case mapping to each character.

    UPPERCASE and LOWERCASE map character by character; one character may
    expand to several (German sharp s uppercases to "SS"). CAPITALIZE needs
    to see whole words, so it passes characters through unchanged here and
    is applied afterwards with ``capitalize``.

    Args:
        chars: Source characters
        transform: The element's text-transform value

    Yields:
        Transformed characters
    """
    for _, char in transform_indexed(enumerate(chars), transform):
        yield char


def transform_indexed(chars: Iterable[Tuple[int, str]],
                      transform: TextTransform) -> Iterator[Tuple[int, str]]:
    """Like apply_text_transform, over (source offset, character) pairs.

    Characters produced by expanding one source character share its offset.
    """
    if transform is TextTransform.UPPERCASE:
        for offset, char in chars:
            for mapped in char.upper():
                yield offset, mapped
    elif transform is TextTransform.LOWERCASE:
        for offset, char in chars:
            for mapped in char.lower():
                yield offset, mapped
    else:
        yield from chars


def capitalize(text: str) -> str:
    """Title-case the first letter of every word in ``text``.

    The start of ``text`` counts as a word boundary, so text split in the
    middle of a word across sibling elements gets a stray capital:
    a<span style="text-transform: capitalize">b</span>c renders as "aBc".
    """
    return ''.join(char for _, char in capitalize_indexed(list(enumerate(text))))


def capitalize_indexed(chars: List[Tuple[int, str]]) -> List[Tuple[int, str]]:
    """Apply ``capitalize`` to (source offset, character) pairs."""
    text = ''.join(char for _, char in chars)
    initials = {match.start() for match in _WORD_INITIAL_LETTER.finditer(text)}

    result = []
    for position, (offset, char) in enumerate(chars):
        mapped = char.title() if position in initials else char
        result.extend((offset, part) for part in mapped)
    return result
