"""Tests for text-transform handling."""

import unittest

from renderedtextlib.core.style import TextTransform
from renderedtextlib.core.transform import (
    apply_text_transform,
    capitalize,
    capitalize_indexed,
    transform_indexed,
)


def transformed(value: str, transform: TextTransform) -> str:
    return ''.join(apply_text_transform(value, transform))


class TestCaseMapping(unittest.TestCase):
    """Uppercase and lowercase map character by character."""

    def test_uppercase(self):
        self.assertEqual(transformed("Hello, world", TextTransform.UPPERCASE), "HELLO, WORLD")

    def test_uppercase_may_expand(self):
        self.assertEqual(transformed("straße", TextTransform.UPPERCASE), "STRASSE")

    def test_lowercase(self):
        self.assertEqual(transformed("HeLLo", TextTransform.LOWERCASE), "hello")

    def test_none_is_identity(self):
        self.assertEqual(transformed("MiXeD  text", TextTransform.NONE), "MiXeD  text")

    def test_capitalize_is_identity_per_character(self):
        self.assertEqual(transformed("hello world", TextTransform.CAPITALIZE), "hello world")


class TestCapitalize(unittest.TestCase):
    """Word-initial capitalization post-pass."""

    def test_words(self):
        self.assertEqual(capitalize("hello big world"), "Hello Big World")

    def test_punctuation_starts_words(self):
        self.assertEqual(capitalize("x-ray (beta)"), "X-Ray (Beta)")

    def test_apostrophe_does_not_start_word(self):
        self.assertEqual(capitalize("don't stop"), "Don't Stop")

    def test_digits_are_word_characters(self):
        self.assertEqual(capitalize("3rd place"), "3rd Place")

    def test_already_capitalized(self):
        self.assertEqual(capitalize("Hello World"), "Hello World")

    def test_start_counts_as_word_boundary(self):
        # Text split mid-word across elements gets capitalized anyway
        self.assertEqual(capitalize("bc"), "Bc")


class TestSourceOffsets(unittest.TestCase):
    """Transformed characters keep the offset of the character they came from."""

    def test_expansion_shares_offset(self):
        pairs = list(transform_indexed(enumerate("aß!"), TextTransform.UPPERCASE))

        self.assertEqual(pairs, [(0, 'A'), (1, 'S'), (1, 'S'), (2, '!')])

    def test_capitalize_keeps_offsets(self):
        pairs = capitalize_indexed([(3, 'x'), (4, ' '), (9, 'y')])

        self.assertEqual(pairs, [(3, 'X'), (4, ' '), (9, 'Y')])

    def test_none_passes_pairs_through(self):
        source = [(5, 'a'), (7, 'B')]

        self.assertEqual(list(transform_indexed(iter(source), TextTransform.NONE)), source)


if __name__ == '__main__':
    unittest.main()
