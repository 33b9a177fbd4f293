"""Tests for white space collapsing."""

import types

import pytest

from renderedtextlib.core.style import WhiteSpaceCollapse
from renderedtextlib.core.whitespace import collapse_indexed, collapse_whitespace, is_ascii_whitespace


COLLAPSE = WhiteSpaceCollapse.COLLAPSE
PRESERVE = WhiteSpaceCollapse.PRESERVE


def collapsed(value: str, mode=COLLAPSE, trim_leading=False) -> str:
    return ''.join(collapse_whitespace(value, mode, trim_leading))


@pytest.mark.parametrize("source,expected", [
    ("a  \t\n b", "a b"),
    ("one\r\n\r\ntwo", "one two"),
    ("a\x0cb", "a b"),
    ("  leading", " leading"),
    ("trailing   ", "trailing "),
    ("   ", " "),
    ("", ""),
])
def test_collapse_runs(source, expected):
    assert collapsed(source) == expected


def test_trim_leading_drops_leading_run():
    assert collapsed("  \n a  b", trim_leading=True) == "a b"
    assert collapsed("   ", trim_leading=True) == ""


def test_trim_leading_keeps_trailing_space():
    assert collapsed("a b   ", trim_leading=True) == "a b "


def test_preserve_passes_through():
    source = "  a \t b\n\n soft\u00adhyphen  "
    assert collapsed(source, PRESERVE) == source
    assert collapsed(source, PRESERVE, trim_leading=True) == source


def test_non_ascii_whitespace_is_not_collapsed():
    assert collapsed("a\u00a0\u00a0b") == "a\u00a0\u00a0b"
    assert not is_ascii_whitespace("\u00a0")


def test_normalized_text_is_unchanged():
    for value in ["a b c", "word", "x y"]:
        assert collapsed(value) == value
        assert collapsed(value, trim_leading=True) == value


def test_stream_is_lazy():
    def source():
        yield 'a'
        yield ' '
        yield 'b'
        raise AssertionError("consumed past what was asked for")

    stream = collapse_whitespace(source(), COLLAPSE)
    assert isinstance(stream, types.GeneratorType)
    assert next(stream) == 'a'
    assert next(stream) == ' '


def test_collapsed_space_keeps_offset_of_its_run():
    pairs = list(collapse_indexed(enumerate(" a \t\n b  "), COLLAPSE, trim_leading=True))

    assert pairs == [(1, 'a'), (2, ' '), (6, 'b'), (7, ' ')]


def test_preserved_offsets_are_unchanged():
    source = list(enumerate(" a  b"))

    assert list(collapse_indexed(iter(source), PRESERVE)) == source
