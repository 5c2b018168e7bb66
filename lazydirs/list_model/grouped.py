"""Group partitioning and group-preserving filtering for datasets.

Boundaries are structural: filtering never drops or reorders them, so every
group header stays on screen even when its group has no matches.
"""

from __future__ import annotations

import logging
from collections import defaultdict, deque
from collections.abc import Iterable

from ..search.fuzzy import FuzzyScorer
from .types import Dataset, DatasetItem, Entry, Group, GroupBoundary

logger = logging.getLogger(__name__)

UNGROUPED_LABEL = ""


def build_dataset(groups: Iterable[tuple[GroupBoundary | None, Iterable[Entry]]]) -> Dataset:
    """Flatten ``(boundary, entries)`` pairs into one dataset tuple."""
    items: list[DatasetItem] = []
    for boundary, entries in groups:
        if boundary is not None:
            items.append(boundary)
        items.extend(entries)
    return tuple(items)


def partition(dataset: Dataset) -> list[Group]:
    """Split ``dataset`` on boundaries, keeping empty groups.

    Entries before the first boundary form a headerless leading group, which
    is only reported when it has members or the dataset has no boundaries.
    """
    groups: list[Group] = []
    label = UNGROUPED_LABEL
    boundary: GroupBoundary | None = None
    entries: list[Entry] = []
    for item in dataset:
        if isinstance(item, GroupBoundary):
            if boundary is not None or entries:
                groups.append(Group(label, boundary, tuple(entries)))
            label = item.label
            boundary = item
            entries = []
            continue
        entries.append(item)
    if boundary is not None or entries or not groups:
        groups.append(Group(label, boundary, tuple(entries)))
    return groups


def _resolve_matches(entries: tuple[Entry, ...], matched_names: Iterable[str]) -> list[Entry]:
    by_name: dict[str, deque[Entry]] = defaultdict(deque)
    for entry in entries:
        by_name[entry.display_name].append(entry)
    resolved: list[Entry] = []
    for name in matched_names:
        pending = by_name.get(name)
        if not pending:
            continue
        resolved.append(pending.popleft())
    return resolved


def filter_group(group: Group, query: str, scorer: FuzzyScorer) -> tuple[Entry, ...]:
    """Filter one group's entries, degrading to empty if the scorer fails."""
    if not group.entries:
        return ()
    try:
        matched_names = scorer.filter(query, [entry.display_name for entry in group.entries])
    except Exception:
        logger.warning("fuzzy filter failed for group %r; showing it empty", group.label, exc_info=True)
        return ()
    return tuple(_resolve_matches(group.entries, matched_names))


def filter_preserving_groups(dataset: Dataset, query: str, scorer: FuzzyScorer) -> Dataset:
    """Filter each group independently and re-emit boundaries in source order.

    An empty query returns ``dataset`` itself.
    """
    if not query:
        return dataset
    return build_dataset(
        (group.boundary, filter_group(group, query, scorer)) for group in partition(dataset)
    )


__all__ = [
    "UNGROUPED_LABEL",
    "build_dataset",
    "filter_group",
    "filter_preserving_groups",
    "partition",
]
