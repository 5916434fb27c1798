#!/usr/bin/env python3
"""
Tests for word and paragraph counting.
"""

import unittest

from bt_string_utils.counting import count_paragraphs, is_cjk, word_count


class TestWordCount(unittest.TestCase):
    """Test cases for word_count."""

    def test_basic_words(self):
        self.assertEqual(word_count("Hello world"), 2)
        self.assertEqual(word_count("One two three"), 3)

    def test_punctuation_handling(self):
        """Edge punctuation is ignored."""
        self.assertEqual(word_count("Hello, world!"), 2)
        self.assertEqual(word_count("(test)"), 1)
        self.assertEqual(word_count('"quoted"'), 1)

    def test_punctuation_only_tokens(self):
        """Tokens made only of punctuation do not count."""
        self.assertEqual(word_count("wait ... what ?!"), 2)

    def test_multiple_whitespace(self):
        self.assertEqual(word_count("a   b\tc\nd"), 4)
        self.assertEqual(word_count("   spaced   out   "), 2)

    def test_hyphenated_words(self):
        self.assertEqual(word_count("state-of-the-art"), 1)
        self.assertEqual(word_count("mother-in-law"), 1)

    def test_contractions(self):
        self.assertEqual(word_count("don't stop"), 2)
        self.assertEqual(word_count("I'm here"), 2)
        self.assertEqual(word_count("they're coming"), 2)

    def test_urls(self):
        self.assertEqual(word_count("Visit https://example.com now"), 3)
        self.assertEqual(word_count("example.com/test"), 1)

    def test_emojis(self):
        self.assertEqual(word_count("🙂"), 1)
        self.assertEqual(word_count("Hello 🙂 world"), 3)

    def test_cjk_characters_count_individually(self):
        """Each CJK ideograph is a word."""
        self.assertEqual(word_count("你好世界"), 4)
        self.assertEqual(word_count("Hello 你好"), 3)

    def test_empty_and_whitespace_only(self):
        self.assertEqual(word_count(""), 0)
        self.assertEqual(word_count("     "), 0)
        self.assertEqual(word_count("\n\t  "), 0)


class TestIsCjk(unittest.TestCase):
    """Test cases for is_cjk."""

    def test_cjk_characters(self):
        self.assertTrue(is_cjk("你"))
        self.assertTrue(is_cjk("界"))
        self.assertTrue(is_cjk("㐀"))  # Extension A
        self.assertTrue(is_cjk("\U00020000"))  # Extension B
        self.assertTrue(is_cjk("豈"))  # Compatibility Ideographs

    def test_non_cjk_characters(self):
        self.assertFalse(is_cjk("a"))
        self.assertFalse(is_cjk("🙂"))
        self.assertFalse(is_cjk("あ"))  # Hiragana is not an ideograph


class TestCountParagraphs(unittest.TestCase):
    """Test cases for count_paragraphs."""

    def test_single_paragraph_no_newline(self):
        self.assertEqual(count_paragraphs("Hello world"), 1)

    def test_two_paragraphs_each_newline_style(self):
        """Unix, Windows and old Mac newlines all end a paragraph."""
        for text in ("Hello\nWorld", "Hello\r\nWorld", "Hello\rWorld"):
            with self.subTest(text=text):
                self.assertEqual(count_paragraphs(text), 2)

    def test_empty_document(self):
        self.assertEqual(count_paragraphs(""), 0)

    def test_newline_only(self):
        """A lone newline is one empty paragraph."""
        self.assertEqual(count_paragraphs("\n"), 1)
        self.assertEqual(count_paragraphs("\r"), 1)
        self.assertEqual(count_paragraphs("\r\n"), 1)

    def test_trailing_newline_creates_empty_paragraph(self):
        self.assertEqual(count_paragraphs("Hello\n"), 2)
        self.assertEqual(count_paragraphs("Hello\r\n"), 2)

    def test_multiple_empty_paragraphs(self):
        self.assertEqual(count_paragraphs("A\n\nB"), 3)
        self.assertEqual(count_paragraphs("A\n\n\nB"), 4)

    def test_paragraphs_with_whitespace_only_lines(self):
        self.assertEqual(count_paragraphs("A\n   \nB"), 3)

    def test_mixed_newline_types(self):
        self.assertEqual(count_paragraphs("A\r\nB\nC\rD"), 4)

    def test_leading_newline(self):
        """Text starting with a newline counts one paragraph per newline."""
        self.assertEqual(count_paragraphs("\nHello\nWorld"), 2)


if __name__ == "__main__":
    unittest.main()
