"""Directory and history collaborators feeding the list engine."""

from __future__ import annotations

from .disks import external_media_directories, is_external_mountpoint
from .history import HistorySource
from .pinned import (
    load_pinned_directories,
    pin_directory,
    save_pinned_directories,
    unpin_directory,
)
from .sidebar import (
    DISKS_GROUP_LABEL,
    PINNED_GROUP_LABEL,
    SIDEBAR_GROUP_LABELS,
    SidebarSources,
    build_sidebar_dataset,
)
from .types import DirectoryRecord
from .well_known import well_known_directories

__all__ = [
    "DISKS_GROUP_LABEL",
    "DirectoryRecord",
    "HistorySource",
    "PINNED_GROUP_LABEL",
    "SIDEBAR_GROUP_LABELS",
    "SidebarSources",
    "build_sidebar_dataset",
    "external_media_directories",
    "is_external_mountpoint",
    "load_pinned_directories",
    "pin_directory",
    "save_pinned_directories",
    "unpin_directory",
    "well_known_directories",
]
