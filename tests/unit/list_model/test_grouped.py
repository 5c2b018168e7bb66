"""Tests for group partitioning and group-preserving filtering."""

from __future__ import annotations

import unittest

from lazydirs.list_model.grouped import build_dataset, filter_preserving_groups, partition
from lazydirs.list_model.types import Entry, GroupBoundary
from lazydirs.search.fuzzy import LabelFuzzyScorer, SubstringScorer


def _entry(name: str) -> Entry:
    return Entry(key=f"/dirs/{name}", display_name=name)


A, B, C, D = (_entry(name) for name in ("A", "B", "C", "D"))
PINNED = GroupBoundary("Pinned")
DISKS = GroupBoundary("Disks")


class _FailingOnceScorer:
    def __init__(self, fail_on: str) -> None:
        self.fail_on = fail_on
        self.calls: list[list[str]] = []

    def filter(self, query: str, candidates):
        self.calls.append(list(candidates))
        if self.fail_on in candidates:
            raise RuntimeError("scorer exploded")
        return [name for name in candidates if query.lower() in name.lower()]


class PartitionTests(unittest.TestCase):
    def test_partition_splits_on_boundaries_and_keeps_empty_groups(self) -> None:
        groups = partition((A, B, PINNED, DISKS, C))

        self.assertEqual([group.label for group in groups], ["", "Pinned", "Disks"])
        self.assertIsNone(groups[0].boundary)
        self.assertEqual(groups[0].entries, (A, B))
        self.assertEqual(groups[1].entries, ())
        self.assertIs(groups[2].boundary, DISKS)
        self.assertEqual(groups[2].entries, (C,))

    def test_partition_omits_empty_headerless_leading_group(self) -> None:
        groups = partition((PINNED, A))

        self.assertEqual(len(groups), 1)
        self.assertIs(groups[0].boundary, PINNED)

    def test_partition_of_empty_dataset_is_one_empty_group(self) -> None:
        groups = partition(())

        self.assertEqual(len(groups), 1)
        self.assertEqual(groups[0].entries, ())

    def test_build_dataset_flattens_boundaries_and_entries(self) -> None:
        dataset = build_dataset([(None, [A]), (PINNED, []), (DISKS, [B])])

        self.assertEqual(dataset, (A, PINNED, DISKS, B))


class FilterPreservingGroupsTests(unittest.TestCase):
    def test_substring_query_keeps_header_of_matching_group(self) -> None:
        result = filter_preserving_groups((A, B, PINNED, C, D), "C", SubstringScorer())

        self.assertEqual(result, (PINNED, C))

    def test_boundaries_survive_when_nothing_matches(self) -> None:
        dataset = (A, PINNED, B, DISKS, C)

        result = filter_preserving_groups(dataset, "zzz", SubstringScorer())

        self.assertEqual(result, (PINNED, DISKS))

    def test_boundaries_keep_order_for_any_query(self) -> None:
        dataset = (A, PINNED, B, C, DISKS, D)
        boundaries = [item for item in dataset if isinstance(item, GroupBoundary)]

        for query in ("a", "b", "c", "d", "x", "ab"):
            result = filter_preserving_groups(dataset, query, LabelFuzzyScorer())
            self.assertEqual([item for item in result if isinstance(item, GroupBoundary)], boundaries)

    def test_empty_query_returns_same_dataset_object(self) -> None:
        dataset = (A, PINNED, B)

        self.assertIs(filter_preserving_groups(dataset, "", SubstringScorer()), dataset)

    def test_each_group_is_scored_independently(self) -> None:
        scorer = _FailingOnceScorer(fail_on="__never__")

        filter_preserving_groups((A, B, PINNED, C, DISKS, D), "x", scorer)

        self.assertEqual(scorer.calls, [["A", "B"], ["C"], ["D"]])

    def test_scorer_failure_degrades_only_that_group(self) -> None:
        scorer = _FailingOnceScorer(fail_on="C")

        with self.assertLogs("lazydirs.list_model.grouped", level="WARNING"):
            result = filter_preserving_groups((A, PINNED, C, DISKS, D), "d", scorer)

        self.assertEqual(result, (PINNED, DISKS, D))

    def test_result_follows_scorer_ranking_within_group(self) -> None:
        class ReversingScorer:
            def filter(self, query, candidates):
                return list(reversed(candidates))

        result = filter_preserving_groups((A, B, PINNED, C, D), "q", ReversingScorer())

        self.assertEqual(result, (B, A, PINNED, D, C))

    def test_duplicate_display_names_resolve_in_source_order(self) -> None:
        first = Entry(key="/a/docs", display_name="docs")
        second = Entry(key="/b/docs", display_name="docs")

        result = filter_preserving_groups((first, second), "docs", SubstringScorer())

        self.assertEqual(result, (first, second))

    def test_unknown_names_from_scorer_are_ignored(self) -> None:
        class InventingScorer:
            def filter(self, query, candidates):
                return ["ghost", *candidates]

        result = filter_preserving_groups((A,), "a", InventingScorer())

        self.assertEqual(result, (A,))

    def test_long_group_keeps_all_matches(self) -> None:
        entries = tuple(_entry(f"proj{idx}") for idx in range(800))
        dataset = (*entries, PINNED, C)

        result = filter_preserving_groups(dataset, "proj", LabelFuzzyScorer())

        self.assertEqual(len([item for item in result if isinstance(item, Entry)]), 800)
        self.assertEqual(result[-1], PINNED)

    def test_filter_does_not_mutate_source(self) -> None:
        dataset = (A, B, PINNED, C)
        snapshot = tuple(dataset)

        filter_preserving_groups(dataset, "b", SubstringScorer())

        self.assertEqual(dataset, snapshot)


if __name__ == "__main__":
    unittest.main()
