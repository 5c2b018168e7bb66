"""Collaborator record types produced by directory sources."""

from __future__ import annotations

from dataclasses import dataclass

from ..list_model.types import Entry


@dataclass(frozen=True)
class DirectoryRecord:
    """One ``{location, name}`` pair as produced by a directory source."""

    location: str
    name: str

    def to_entry(self) -> Entry:
        return Entry(key=self.location, display_name=self.name)
