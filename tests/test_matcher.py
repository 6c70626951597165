"""Tests for approximate substring matching.

Covers exact hits, window penalties, tie-breaks, and the no-match cases.
"""

from __future__ import annotations

import unittest

from repojump.matcher import NO_MATCH, Match, NoMatch, exclusion_windows, levenshtein, match


class LevenshteinTests(unittest.TestCase):
    def test_identical_strings_have_zero_distance(self) -> None:
        self.assertEqual(levenshtein("repojump", "repojump"), 0)

    def test_empty_side_costs_full_length(self) -> None:
        self.assertEqual(levenshtein("", "abc"), 3)
        self.assertEqual(levenshtein("abcd", ""), 4)

    def test_counts_substitutions_insertions_and_deletions(self) -> None:
        self.assertEqual(levenshtein("kitten", "sitting"), 3)
        self.assertEqual(levenshtein("abcde", "abcse"), 1)
        self.assertEqual(levenshtein("bcdef", "bdf"), 2)

    def test_works_on_code_points(self) -> None:
        self.assertEqual(levenshtein("café", "cafe"), 1)


class ExclusionWindowTests(unittest.TestCase):
    def test_windows_grow_by_penalty_with_left_trims_first(self) -> None:
        self.assertEqual(
            list(exclusion_windows(3)),
            [(0, 0), (1, 0), (0, 1), (2, 0), (1, 1), (0, 2)],
        )

    def test_every_window_keeps_at_least_one_character(self) -> None:
        for left, right in exclusion_windows(5):
            self.assertLess(left + right, 5)

    def test_empty_keyword_has_no_windows(self) -> None:
        self.assertEqual(list(exclusion_windows(0)), [])


class MatchTests(unittest.TestCase):
    def test_exact_and_prefix_and_suffix_matches(self) -> None:
        self.assertEqual(match("abc", "abc"), Match(start=0, length=3, distance=0))
        self.assertEqual(match("ab", "abc"), Match(start=0, length=2, distance=0))
        self.assertEqual(match("bc", "abc"), Match(start=1, length=2, distance=0))

    def test_single_character_keywords(self) -> None:
        self.assertEqual(match("a", "abc"), Match(start=0, length=1, distance=0))
        self.assertEqual(match("c", "abc"), Match(start=2, length=1, distance=0))

    def test_no_shared_characters_is_no_match(self) -> None:
        self.assertEqual(match("de", "abc"), NO_MATCH)
        self.assertIsInstance(match("xyz", "repojump"), NoMatch)

    def test_missing_middle_character_costs_one(self) -> None:
        self.assertEqual(match("ac", "abc"), Match(start=0, length=3, distance=1))

    def test_substituted_character_costs_one(self) -> None:
        self.assertEqual(match("abcse", "abcdef"), Match(start=0, length=5, distance=1))

    def test_doubled_character_costs_one(self) -> None:
        self.assertEqual(match("abcdde", "abcdef"), Match(start=0, length=5, distance=1))

    def test_two_deletions_inside_span(self) -> None:
        self.assertEqual(match("bdf", "abcdefg"), Match(start=1, length=5, distance=2))

    def test_substring_uses_first_occurrence(self) -> None:
        self.assertEqual(match("zen", "zenn"), Match(start=0, length=3, distance=0))
        self.assertEqual(match("ab", "xxabyyab"), Match(start=2, length=2, distance=0))

    def test_empty_keyword_never_matches(self) -> None:
        for target in ("", "a", "repojump"):
            self.assertEqual(match("", target), NO_MATCH)

    def test_keyword_matches_itself_exactly(self) -> None:
        for text in ("a", "repo", "dotfiles", "日本語"):
            self.assertEqual(match(text, text), Match(start=0, length=len(text), distance=0))

    def test_window_penalty_is_added_to_distance(self) -> None:
        # "app" only survives as the 3-char prefix of "apple": two trims from the right.
        self.assertEqual(match("apple", "sapporo"), Match(start=1, length=3, distance=2))

    def test_last_resort_single_character_window(self) -> None:
        self.assertEqual(match("apple", "banana"), Match(start=1, length=1, distance=4))

    def test_match_end_is_exclusive(self) -> None:
        result = match("bc", "abcd")
        assert isinstance(result, Match)
        self.assertEqual(result.end, 3)
        self.assertEqual("abcd"[result.start : result.end], "bc")


if __name__ == "__main__":
    unittest.main()
