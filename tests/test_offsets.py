"""Tests for mapping rendered text positions back to tree positions."""

import pytest

from renderedtextlib import InnerTextRangeError, RenderedText, render_text
from renderedtextlib.adapters import MemoryNodeProvider, document, element


@pytest.fixture
def provider():
    return MemoryNodeProvider()


def rendered(root, provider):
    document(root)
    return render_text(root, provider)


class TestFragmentOffsets:

    def test_collapsed_whitespace_keeps_source_offsets(self, provider):
        div = element('div', ' a   b ', display='block')
        source = div.children[0]

        result = rendered(div, provider)
        fragment = result.items[0]

        assert result.value == "a b"
        assert fragment.offsets == (1, 2, 5)
        assert (fragment.start_offset, fragment.end_offset) == (1, 6)
        assert result.locate(0) == (source, 1)
        assert result.locate(1) == (source, 2)
        assert result.locate(2) == (source, 5)
        assert result.locate(3) == (source, 6)

    def test_expanded_characters_share_offset(self, provider):
        div = element('div', 'straße', display='block', text_transform='uppercase')
        source = div.children[0]

        result = rendered(div, provider)

        assert result.value == "STRASSE"
        assert result.locate(4) == (source, 4)
        assert result.locate(5) == (source, 4)
        assert result.locate(6) == (source, 5)

    def test_capitalized_text(self, provider):
        div = element('div', 'big  top', display='block', text_transform='capitalize')
        source = div.children[0]

        result = rendered(div, provider)

        assert result.value == "Big Top"
        assert result.locate(4) == (source, 5)

    def test_preformatted_text_maps_one_to_one(self, provider):
        pre = element('pre', ' x \n y', display='block', white_space='pre')
        source = pre.children[0]

        result = rendered(pre, provider)

        assert result.value == " x \n y"
        assert [result.locate(i)[1] for i in range(len(result.value) + 1)] == [0, 1, 2, 3, 4, 5, 6]
        assert all(result.locate(i)[0] is source for i in range(len(result.value)))


class TestLocate:

    def test_line_breaks_map_to_child_index(self, provider):
        first = element('p', 'Hello')
        second = element('p', 'world')
        body = element('body', first, second, display='block')

        result = rendered(body, provider)

        assert result.value == "Hello\n\nworld"
        assert result.locate(4) == (first.children[0], 4)
        assert result.locate(5) == (first, 1)
        assert result.locate(6) == (first, 1)
        assert result.locate(7) == (second.children[0], 0)
        assert result.locate(12) == (second.children[0], 5)

    def test_inserted_fragments_map_to_their_node(self, provider):
        br = element('br')
        span = element('span', 'a', br, 'b')

        result = rendered(span, provider)

        assert result.value == "a\nb"
        assert result.locate(1) == (br, 0)
        assert result.locate(2) == (span.children[2], 0)

    def test_restored_space_maps_to_following_text(self, provider):
        bold = element('b', 'world')
        span = element('span', 'hello ', bold)

        result = rendered(span, provider)

        assert result.value == "hello world"
        assert result.locate(5) == (bold.children[0], 0)
        assert result.locate(6) == (bold.children[0], 0)

    def test_text_content_fallback(self, provider):
        div = element('div', 'ab', element('span', 'c'), display='none')

        result = rendered(div, provider)

        assert result.value == "abc"
        assert result.locate(1) == (div, 1)
        assert result.locate(2) == (div, 2)
        assert result.locate(3) == (div, 2)


class TestRange:

    def test_range(self, provider):
        first = element('p', 'Hello')
        second = element('p', 'world')
        body = element('body', first, second, display='block')

        text_range = rendered(body, provider).range(1, 9)

        assert text_range.text == "ello\n\nwo"
        assert (text_range.start_node, text_range.start_offset) == (first.children[0], 1)
        assert (text_range.end_node, text_range.end_offset) == (second.children[0], 2)
        assert not text_range.collapsed

    def test_collapsed_range(self, provider):
        span = element('span', 'abc')

        text_range = rendered(span, provider).range(2)

        assert text_range.collapsed
        assert text_range.text == ""
        assert (text_range.start_node, text_range.start_offset) == (span.children[0], 2)

    def test_whole_text(self, provider):
        span = element('span', 'abc')
        result = rendered(span, provider)

        text_range = result.range(0, len(result))

        assert text_range.text == "abc"
        assert text_range.end_offset == 3


class TestBounds:

    @pytest.mark.parametrize("index", [-1, 4, 1.5, True, "1"])
    def test_locate_rejects(self, provider, index):
        result = rendered(element('span', 'abc'), provider)

        with pytest.raises(InnerTextRangeError):
            result.locate(index)

    def test_start_after_end(self, provider):
        result = rendered(element('span', 'abc'), provider)

        with pytest.raises(InnerTextRangeError, match="greater than"):
            result.range(2, 1)

    def test_empty_text_has_no_positions(self):
        with pytest.raises(InnerTextRangeError, match="out of bounds"):
            RenderedText('').locate(0)

    def test_error_is_a_value_error(self):
        assert issubclass(InnerTextRangeError, ValueError)
