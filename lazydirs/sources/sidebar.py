"""Assemble the grouped sidebar dataset from directory sources.

Group order is fixed: well-known folders (headerless), then ``Pinned``, then
``Disks``. A failing source leaves its group empty but keeps its header.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from ..list_model.grouped import build_dataset
from ..list_model.types import Dataset, Entry, GroupBoundary
from ..runtime.config import load_external_mount_prefixes, load_pinned_file_path
from .disks import external_media_directories
from .pinned import load_pinned_directories
from .types import DirectoryRecord
from .well_known import well_known_directories

logger = logging.getLogger(__name__)

PINNED_GROUP_LABEL = "Pinned"
DISKS_GROUP_LABEL = "Disks"
SIDEBAR_GROUP_LABELS: tuple[str | None, ...] = (None, PINNED_GROUP_LABEL, DISKS_GROUP_LABEL)

DirectoryProvider = Callable[[], Iterable[DirectoryRecord]]


@dataclass(frozen=True)
class SidebarSources:
    """One provider per sidebar group, in ``SIDEBAR_GROUP_LABELS`` order."""

    well_known: DirectoryProvider
    pinned: DirectoryProvider
    disks: DirectoryProvider

    @classmethod
    def default(cls, pinned_path: Path | None = None) -> SidebarSources:
        store = pinned_path if pinned_path is not None else load_pinned_file_path()
        return cls(
            well_known=well_known_directories,
            pinned=lambda: load_pinned_directories(store),
            disks=lambda: external_media_directories(load_external_mount_prefixes()),
        )

    def providers(self) -> tuple[DirectoryProvider, ...]:
        return (self.well_known, self.pinned, self.disks)


def _collect(label: str, provider: DirectoryProvider) -> list[Entry]:
    try:
        records = list(provider())
    except Exception:
        logger.warning("directory source %r failed; showing it empty", label or "default", exc_info=True)
        return []
    entries: list[Entry] = []
    seen: set[str] = set()
    for record in records:
        if record.location in seen:
            continue
        seen.add(record.location)
        entries.append(record.to_entry())
    return entries


def build_sidebar_dataset(sources: SidebarSources | None = None) -> Dataset:
    active = sources if sources is not None else SidebarSources.default()
    groups = []
    for label, provider in zip(SIDEBAR_GROUP_LABELS, active.providers()):
        boundary = GroupBoundary(label) if label is not None else None
        groups.append((boundary, _collect(label or "", provider)))
    return build_dataset(groups)
