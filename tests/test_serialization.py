"""Tests for condensing and joining collected items."""

import pytest

from renderedtextlib import inner_text
from renderedtextlib.adapters.memory import MemoryNodeProvider, document, element, text
from renderedtextlib.core import LineBreakCount, TextFragment
from renderedtextlib.serialization import condense_items, join_items, to_inner_text


def T(value):
    return TextFragment(value)


def LB(count):
    return LineBreakCount(count)


class TestCondense:

    def test_empty(self):
        assert condense_items([]) == []

    def test_adjacent_counts_take_maximum(self):
        items = [T('A'), LB(1), LB(2), LB(1), T('B')]

        assert condense_items(items) == [T('A'), LB(2), T('B')]

    def test_counts_stripped_from_both_ends(self):
        items = [LB(2), T('A'), LB(2), LB(2), T('B'), LB(2)]

        assert condense_items(items) == [T('A'), LB(2), T('B')]

    def test_leading_run_of_counts(self):
        assert condense_items([LB(1), LB(2), T('A'), LB(1), LB(1)]) == [T('A')]

    def test_only_counts(self):
        assert condense_items([LB(1), LB(2), LB(1)]) == []

    def test_text_only_unchanged(self):
        items = [T('a'), T(' '), T('b')]

        assert condense_items(items) == items

    def test_input_not_modified(self):
        items = [T('A'), LB(1), LB(2), T('B')]
        snapshot = list(items)

        condense_items(items)

        assert items == snapshot
        assert items[1].count == 1

    def test_keeps_first_node_of_run(self):
        first, second = object(), object()
        items = [T('A'), LineBreakCount(1, first), LineBreakCount(2, second), T('B')]

        merged = condense_items(items)[1]

        assert merged.count == 2
        assert merged.node is first


class TestLoneLineBreakElement:

    def test_condenses_to_nothing(self):
        provider = MemoryNodeProvider()
        br = element('br')

        assert condense_items([TextFragment('\n', br)], provider) == []

    def test_kept_without_provider(self):
        br = element('br')

        assert condense_items([TextFragment('\n', br)]) == [T('\n')]

    def test_other_lone_text_is_kept(self):
        provider = MemoryNodeProvider()
        node = text('\n')

        assert condense_items([TextFragment('\n', node)], provider) == [T('\n')]

    def test_br_alone_renders_nothing(self):
        provider = MemoryNodeProvider()
        br = element('br')
        span = element('span', element('br'))
        document(br, span)

        assert inner_text(br, provider) == ""
        assert inner_text(span, provider) == ""

    def test_br_between_text_still_breaks(self):
        provider = MemoryNodeProvider()
        span = element('span', 'a', element('br'), 'b')
        document(span)

        assert inner_text(span, provider) == "a\nb"


class TestJoin:

    def test_interior_count_becomes_newlines(self):
        assert join_items([T('A'), LB(2), T('B')]) == "A\n\nB"

    def test_counts_at_ends_contribute_nothing(self):
        assert join_items([LB(2), T('A'), LB(1)]) == "A"
        assert join_items([LB(3)]) == ""

    def test_uncondensed_counts_add_up(self):
        assert join_items([T('A'), LB(1), LB(2), T('B')]) == "A\n\n\nB"

    def test_empty(self):
        assert join_items([]) == ""


def test_to_inner_text():
    items = [LB(2), T('A'), LB(2), LB(1), T('\n'), T('B'), LB(2)]

    assert to_inner_text(items) == "A\n\n\nB"


@pytest.mark.parametrize("count", [0, -1])
def test_line_break_count_must_be_positive(count):
    with pytest.raises(ValueError, match="must be positive"):
        LineBreakCount(count)


def test_items_ignore_node_in_equality():
    assert TextFragment('x', object()) == TextFragment('x', object())
    assert LineBreakCount(2, object()) == LineBreakCount(2)
    assert TextFragment('x') != TextFragment('y')
