"""Tests for label scorers and the worker-thread scorer wrapper.

Covers substring-first ranking, source-order substring filtering, and the
busy/error behavior of the worker wrapper.
"""

from __future__ import annotations

import threading
import unittest

from lazydirs.errors import ScorerBusyError
from lazydirs.search.fuzzy import (
    LabelFuzzyScorer,
    SubstringScorer,
    WorkerFuzzyScorer,
    fuzzy_match_labels,
    fuzzy_score,
)


class LabelScorerTests(unittest.TestCase):
    def test_fuzzy_score_rejects_out_of_order_characters(self) -> None:
        self.assertIsNone(fuzzy_score("ba", "ab"))
        self.assertIsNotNone(fuzzy_score("dl", "Downloads"))

    def test_substring_hits_outrank_subsequence_hits(self) -> None:
        result = LabelFuzzyScorer().filter("doc", ["d_o_c", "Documents", "mydocs"])

        self.assertEqual(result, ["Documents", "mydocs"])

    def test_subsequence_matching_when_no_substring(self) -> None:
        result = LabelFuzzyScorer().filter("dls", ["Downloads", "Desktop", "Music"])

        self.assertEqual(result, ["Downloads"])

    def test_earlier_substring_position_ranks_first(self) -> None:
        labels = ["my-proj", "proj", "old-proj-x"]

        ranked = [label for _, label, _ in fuzzy_match_labels("proj", labels)]

        self.assertEqual(ranked, ["proj", "my-proj", "old-proj-x"])

    def test_limit_caps_results(self) -> None:
        labels = [f"dir{idx}" for idx in range(20)]

        self.assertEqual(len(LabelFuzzyScorer(limit=5).filter("dir", labels)), 5)

    def test_default_scorer_returns_every_match(self) -> None:
        labels = [f"/home/me/proj{idx}" for idx in range(800)]

        self.assertEqual(len(LabelFuzzyScorer().filter("proj", labels)), 800)
        self.assertEqual(len(LabelFuzzyScorer().filter("hmp", labels)), 800)

    def test_empty_candidates_return_empty(self) -> None:
        self.assertEqual(LabelFuzzyScorer().filter("x", []), [])

    def test_substring_scorer_keeps_source_order_case_insensitively(self) -> None:
        result = SubstringScorer().filter("o", ["Home", "music", "Documents", "Videos"])

        self.assertEqual(result, ["Home", "Documents", "Videos"])


class WorkerFuzzyScorerTests(unittest.TestCase):
    def test_delegates_to_inner_scorer(self) -> None:
        scorer = WorkerFuzzyScorer(SubstringScorer())

        self.assertEqual(scorer.filter("b", ["a", "b", "ab"]), ["b", "ab"])

    def test_runs_inner_scorer_off_the_calling_thread(self) -> None:
        seen: list[str] = []

        class RecordingScorer:
            def filter(self, query, candidates):
                seen.append(threading.current_thread().name)
                return list(candidates)

        WorkerFuzzyScorer(RecordingScorer(), thread_name="fuzzy-test").filter("q", ["a"])

        self.assertEqual(seen, ["fuzzy-test"])

    def test_inner_error_is_reraised_and_scorer_stays_usable(self) -> None:
        class ExplodingScorer:
            calls = 0

            def filter(self, query, candidates):
                self.calls += 1
                if self.calls == 1:
                    raise ValueError("bad query")
                return ["ok"]

        scorer = WorkerFuzzyScorer(ExplodingScorer())

        with self.assertRaises(ValueError):
            scorer.filter("q", ["ok"])
        self.assertEqual(scorer.filter("q", ["ok"]), ["ok"])

    def test_reentry_while_running_raises_busy(self) -> None:
        started = threading.Event()
        release = threading.Event()

        class BlockingScorer:
            def filter(self, query, candidates):
                started.set()
                release.wait(5)
                return list(candidates)

        scorer = WorkerFuzzyScorer(BlockingScorer())
        results: list[list[str]] = []
        caller = threading.Thread(target=lambda: results.append(scorer.filter("q", ["a"])))
        caller.start()
        try:
            self.assertTrue(started.wait(5))
            with self.assertRaises(ScorerBusyError):
                scorer.filter("q", ["b"])
        finally:
            release.set()
            caller.join(5)

        self.assertEqual(results, [["a"]])


if __name__ == "__main__":
    unittest.main()
