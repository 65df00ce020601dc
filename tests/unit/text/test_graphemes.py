"""Tests for grapheme-aware truncation and padding."""

from __future__ import annotations

import unittest

from minils import text


class GraphemeShapingTests(unittest.TestCase):
    def test_combining_sequences_count_as_one_grapheme(self) -> None:
        accented = "e\u0301"
        self.assertEqual(text.grapheme_count(accented * 3), 3)
        self.assertEqual(text.graphemes("a" + accented), ["a", accented])

    def test_truncation_never_splits_a_cluster(self) -> None:
        accented = "e\u0301"
        truncated = text.truncate_graphemes(accented * 5, 2)
        self.assertEqual(truncated, accented * 2)
        self.assertEqual(len(truncated), 4)

    def test_padding_counts_graphemes_not_code_points(self) -> None:
        accented = "e\u0301"
        padded = text.pad_graphemes(accented * 2, 5)
        self.assertEqual(padded, accented * 2 + "   ")
        self.assertEqual(text.grapheme_count(padded), 5)

    def test_fit_pads_short_and_cuts_long_text(self) -> None:
        self.assertEqual(text.fit_graphemes("abc", 5), "abc  ")
        self.assertEqual(text.fit_graphemes("abcdefg", 4), "abcd")
        self.assertEqual(text.fit_graphemes("abcd", 4), "abcd")

    def test_emoji_with_modifier_stays_whole(self) -> None:
        thumbs = "\U0001F44D\U0001F3FD"
        fitted = text.fit_graphemes(thumbs + "xyz", 1)
        self.assertEqual(fitted, thumbs)


if __name__ == "__main__":
    unittest.main()
