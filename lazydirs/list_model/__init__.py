"""Grouped, fuzzy-filterable navigable list engine.

``grouped`` partitions and filters datasets, ``navigable`` owns cursor and
viewport state, and ``session`` layers the search-mode protocol on top.
"""

from __future__ import annotations

from .types import (
    Dataset,
    DatasetItem,
    Entry,
    Frame,
    Group,
    GroupBoundary,
    ListState,
    SearchMode,
    SearchState,
)
from .actions import Action, ActionResult
from .grouped import build_dataset, filter_preserving_groups, partition
from .navigable import NavigableList
from .session import SearchSession

__all__ = [
    "Action",
    "ActionResult",
    "Dataset",
    "DatasetItem",
    "Entry",
    "Frame",
    "Group",
    "GroupBoundary",
    "ListState",
    "NavigableList",
    "SearchMode",
    "SearchSession",
    "SearchState",
    "build_dataset",
    "filter_preserving_groups",
    "partition",
]
