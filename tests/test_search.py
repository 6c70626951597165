"""Tests for keyword normalization and ranked repository search."""

from __future__ import annotations

import unittest
from pathlib import Path

from repojump.matcher import Match
from repojump.scanner import Repo
from repojump.search import SearchIndex, normalize


def _repos(*names: str) -> list[Repo]:
    return [Repo(path=Path("/src") / name, name=name) for name in names]


class NormalizeTests(unittest.TestCase):
    def test_folds_case_and_separators(self) -> None:
        self.assertEqual(normalize("Foo_Bar"), "foo-bar")
        self.assertEqual(normalize("C++"), "c==")

    def test_is_idempotent(self) -> None:
        for text in ("Foo_Bar", "c++", "already-normal", "MiXeD_+_Case", ""):
            self.assertEqual(normalize(normalize(text)), normalize(text))


class SearchIndexTests(unittest.TestCase):
    def test_empty_keyword_returns_no_results(self) -> None:
        index = SearchIndex(_repos("alpha", "beta"))
        self.assertEqual(index.search(""), [])

    def test_results_are_sorted_by_distance(self) -> None:
        index = SearchIndex(_repos("banana", "sapporo", "appde", "apple"))

        found = index.search("apple")

        self.assertEqual([item.repo.name for item in found], ["apple", "appde", "sapporo", "banana"])
        self.assertEqual([item.matched.distance for item in found], [0, 1, 2, 4])

    def test_equal_distances_keep_collection_order(self) -> None:
        index = SearchIndex(_repos("zeta-api", "alpha-api", "api"))

        found = index.search("api")

        self.assertEqual([item.repo.name for item in found], ["zeta-api", "alpha-api", "api"])
        self.assertTrue(all(item.matched.distance == 0 for item in found))

    def test_keyword_and_names_are_normalized_alike(self) -> None:
        index = SearchIndex(_repos("My_Project", "other"))

        found = index.search("my-proj")

        self.assertEqual(found[0].repo.name, "My_Project")
        self.assertEqual(found[0].matched, Match(start=0, length=7, distance=0))

    def test_non_matching_repos_are_left_out(self) -> None:
        index = SearchIndex(_repos("alpha", "xyz"))

        found = index.search("al")

        self.assertEqual([item.repo.name for item in found], ["alpha"])

    def test_exposes_repos_and_length(self) -> None:
        repos = _repos("a", "b", "c")
        index = SearchIndex(repos)

        self.assertEqual(len(index), 3)
        self.assertEqual(list(index.repos), repos)


if __name__ == "__main__":
    unittest.main()
