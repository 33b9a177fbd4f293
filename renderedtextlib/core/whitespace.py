"""CSS white space collapsing over a character stream."""

from typing import Iterable, Iterator, Tuple

from .style import WhiteSpaceCollapse

# https://infra.spec.whatwg.org/#ascii-whitespace
# U+0009 TAB, U+000A LF, U+000C FF, U+000D CR, and U+0020 SPACE
ASCII_WHITESPACE = frozenset('\t\n\x0c\r ')


def is_ascii_whitespace(char: str) -> bool:
    return char in ASCII_WHITESPACE


def collapse_whitespace(chars: Iterable[str],
                        mode: WhiteSpaceCollapse,
                        trim_leading: bool = False) -> Iterator[str]:
    """Lazily apply white space collapsing to a stream of characters.

    With PRESERVE the stream passes through untouched, soft hyphens
    included. With COLLAPSE each maximal run of ASCII whitespace becomes a
    single space, and a run at the very start is dropped entirely when
    ``trim_leading`` is set. A trailing run still yields its space; the
    collector decides whether to keep it.

    The result is a single-pass generator.

    Args:
        chars: Source characters (a string works)
        mode: White space collapse mode of the owning element
        trim_leading: Drop a leading whitespace run

    Yields:
        Characters after collapsing
    """
    for _, char in collapse_indexed(enumerate(chars), mode, trim_leading):
        yield char


def collapse_indexed(chars: Iterable[Tuple[int, str]],
                     mode: WhiteSpaceCollapse,
                     trim_leading: bool = False) -> Iterator[Tuple[int, str]]:
    """Like collapse_whitespace, over (source offset, character) pairs.

    A collapsed space carries the offset of the first character of its run.
    """
    if mode is WhiteSpaceCollapse.PRESERVE:
        yield from chars
        return

    run_start = None
    at_start = True
    for offset, char in chars:
        if char in ASCII_WHITESPACE:
            if run_start is None:
                run_start = offset
            continue
        if run_start is not None and not (at_start and trim_leading):
            yield run_start, ' '
        run_start = None
        at_start = False
        yield offset, char

    if run_start is not None and not (at_start and trim_leading):
        yield run_start, ' '
