"""Fuzzy scorer exports."""

from __future__ import annotations

from .fuzzy import (
    FuzzyScorer,
    LabelFuzzyScorer,
    SubstringScorer,
    WorkerFuzzyScorer,
    default_scorer,
    fuzzy_match_labels,
    fuzzy_score,
)

__all__ = [
    "FuzzyScorer",
    "LabelFuzzyScorer",
    "SubstringScorer",
    "WorkerFuzzyScorer",
    "default_scorer",
    "fuzzy_match_labels",
    "fuzzy_score",
]
