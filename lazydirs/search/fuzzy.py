"""Fuzzy scorers consumed by the grouped list engine.

A scorer takes a query plus ordered candidate labels and returns the matching
subset in relevance order. Non-matches are omitted; scores never leak out.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from typing import Protocol

from ..errors import ScorerBusyError


class FuzzyScorer(Protocol):
    def filter(self, query: str, candidates: Sequence[str]) -> list[str]: ...


def fuzzy_score(query: str, candidate: str) -> int | None:
    if not query:
        return 0
    query_folded = query.casefold()
    candidate_folded = candidate.casefold()

    score = 0
    prev_idx = -1
    run = 0
    for needle in query_folded:
        idx = candidate_folded.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        if idx == prev_idx + 1:
            run += 1
            score += 20 + min(16, run * 4)
        else:
            gap = idx - prev_idx - 1
            run = 0
            score -= min(40, gap * 2)
        if idx == 0 or candidate_folded[idx - 1] in "/_- .":
            score += 35
        prev_idx = idx

    score -= len(candidate_folded) // 5
    return score


def substring_index(query: str, candidate: str) -> int | None:
    if not query:
        return 0
    idx = candidate.casefold().find(query.casefold())
    if idx < 0:
        return None
    return idx


def _cap(items: list, limit: int | None) -> list:
    return items if limit is None else items[: max(1, limit)]


def fuzzy_match_labels(query: str, labels: Sequence[str], limit: int | None = None) -> list[tuple[int, str, int]]:
    """Return ``(label_index, label, score)`` tuples, best first.

    Substring hits win outright; subsequence scoring only runs when no label
    contains the query verbatim.
    """
    substring_scored: list[tuple[int, int, int, str]] = []
    for idx, label in enumerate(labels):
        substr_idx = substring_index(query, label)
        if substr_idx is None:
            continue
        substring_scored.append((substr_idx, len(label), idx, label))
    if substring_scored:
        substring_scored.sort(key=lambda item: (item[0], item[1], item[2]))
        return [
            (label_idx, label, 10_000 - (substr_idx * 50) - label_len)
            for substr_idx, label_len, label_idx, label in _cap(substring_scored, limit)
        ]

    scored: list[tuple[int, int, int, str]] = []
    for idx, label in enumerate(labels):
        score = fuzzy_score(query, label)
        if score is None:
            continue
        scored.append((score, len(label), idx, label))
    scored.sort(key=lambda item: (-item[0], item[1], item[2]))
    return [(idx, label, score) for score, _, idx, label in _cap(scored, limit)]


class LabelFuzzyScorer:
    """Case-insensitive substring-first fuzzy scorer."""

    def __init__(self, limit: int | None = None) -> None:
        self.limit = limit

    def filter(self, query: str, candidates: Sequence[str]) -> list[str]:
        if not candidates:
            return []
        return [label for _, label, _ in fuzzy_match_labels(query, candidates, limit=self.limit)]


class SubstringScorer:
    """Case-insensitive substring filter that keeps source order."""

    def filter(self, query: str, candidates: Sequence[str]) -> list[str]:
        return [label for label in candidates if substring_index(query, label) is not None]


class WorkerFuzzyScorer:
    """Run another scorer on a worker thread and block until it completes.

    The caller waits on a completion event, so from the UI thread this is an
    ordinary blocking call. Re-entering while a call is in flight raises
    :class:`ScorerBusyError`.
    """

    def __init__(self, inner: FuzzyScorer, thread_name: str = "lazydirs-fuzzy") -> None:
        self._inner = inner
        self._thread_name = thread_name
        self._busy = threading.Lock()

    def _run(self, work: Callable[[], list[str]], done: threading.Event, out: dict[str, object]) -> None:
        try:
            out["result"] = work()
        except Exception as exc:
            out["error"] = exc
        finally:
            done.set()

    def filter(self, query: str, candidates: Sequence[str]) -> list[str]:
        if not self._busy.acquire(blocking=False):
            raise ScorerBusyError("fuzzy scorer is already running")
        try:
            snapshot = tuple(candidates)
            done = threading.Event()
            out: dict[str, object] = {}
            worker = threading.Thread(
                target=self._run,
                args=(lambda: self._inner.filter(query, snapshot), done, out),
                name=self._thread_name,
                daemon=True,
            )
            worker.start()
            done.wait()
        finally:
            self._busy.release()

        error = out.get("error")
        if isinstance(error, Exception):
            raise error
        return list(out.get("result", ()))


def default_scorer() -> FuzzyScorer:
    """Label scorer run off the UI thread; the features use this unless given another."""
    return WorkerFuzzyScorer(LabelFuzzyScorer())


__all__ = [
    "FuzzyScorer",
    "LabelFuzzyScorer",
    "SubstringScorer",
    "WorkerFuzzyScorer",
    "default_scorer",
    "fuzzy_match_labels",
    "fuzzy_score",
    "substring_index",
]
