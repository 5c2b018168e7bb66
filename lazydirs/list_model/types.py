"""List-model datatypes shared by the grouped list engine and its features."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Entry:
    """One selectable row: ``key`` is the identity, ``display_name`` is matched."""

    key: str
    display_name: str


@dataclass(frozen=True)
class GroupBoundary:
    """Non-selectable group header interleaved between entries."""

    label: str


DatasetItem = Entry | GroupBoundary
Dataset = tuple[DatasetItem, ...]


@dataclass(frozen=True)
class Group:
    """One partitioned group; ``boundary`` is ``None`` for a headerless leading group."""

    label: str
    boundary: GroupBoundary | None
    entries: tuple[Entry, ...]


class SearchMode(enum.Enum):
    BROWSE = "browse"
    SEARCHING = "searching"


@dataclass
class ListState:
    all_entries: Dataset
    displayed: Dataset
    cursor: int = 0
    viewport_offset: int = 0
    viewport_height: int = 1


@dataclass
class SearchState:
    mode: SearchMode = SearchMode.BROWSE
    query_text: str = ""


@dataclass(frozen=True)
class Frame:
    """Per-frame snapshot handed to the presentation layer."""

    title: str
    rows: Dataset
    cursor_row: int | None
    query_text: str
    mode: SearchMode
    placeholder: str = ""
    total: int = 0
    hint: tuple[str, ...] = field(default_factory=tuple)
