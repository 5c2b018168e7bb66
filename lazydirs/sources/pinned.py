"""User-pinned directories store.

Two on-disk shapes exist. The legacy one is a JSON list of path strings; the
current one is a list of ``{"location", "name"}`` records. Decoding tries the
legacy shape first, then records. Anything else is logged and read as empty.
Writes always use the record shape.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from ..errors import MalformedPinnedDataError, SourceUnavailableError
from .types import DirectoryRecord

logger = logging.getLogger(__name__)


def _basename(path: str) -> str:
    return os.path.basename(path.rstrip("/\\")) or path


def _decode_path_list(data: object) -> list[DirectoryRecord] | None:
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        return None
    return [DirectoryRecord(location=path, name=_basename(path)) for path in data]


def _decode_record_list(data: object) -> list[DirectoryRecord] | None:
    if not isinstance(data, list):
        return None
    records: list[DirectoryRecord] = []
    for item in data:
        if not isinstance(item, dict):
            return None
        location = item.get("location")
        name = item.get("name")
        if not isinstance(location, str):
            return None
        if name is None:
            name = _basename(location)
        elif not isinstance(name, str):
            return None
        records.append(DirectoryRecord(location=location, name=name))
    return records


PINNED_DECODERS = (_decode_path_list, _decode_record_list)


def decode_pinned_data(raw: str) -> list[DirectoryRecord]:
    """Decode pinned-store text, raising :class:`MalformedPinnedDataError` on no match."""
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise MalformedPinnedDataError(f"pinned data is not valid JSON: {exc}") from exc
    for decoder in PINNED_DECODERS:
        records = decoder(data)
        if records is not None:
            return records
    raise MalformedPinnedDataError("pinned data matches neither a path list nor a record list")


def read_pinned_directories(path: Path) -> list[DirectoryRecord]:
    """Read and decode the store; missing files read as empty."""
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    except OSError as exc:
        raise SourceUnavailableError(f"cannot read pinned store {path}: {exc}") from exc
    if not raw.strip():
        return []
    return decode_pinned_data(raw)


def load_pinned_directories(path: Path) -> list[DirectoryRecord]:
    """Return pinned directories, degrading any failure to an empty list."""
    try:
        return read_pinned_directories(path)
    except (SourceUnavailableError, MalformedPinnedDataError) as exc:
        logger.warning("ignoring pinned directories at %s: %s", path, exc)
        return []


def save_pinned_directories(path: Path, records: list[DirectoryRecord]) -> None:
    payload = [{"location": record.location, "name": record.name} for record in records]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")


def pin_directory(path: Path, location: Path, name: str | None = None) -> bool:
    """Append ``location`` to the store unless already pinned; returns whether it changed."""
    resolved = str(location.expanduser().resolve())
    records = load_pinned_directories(path)
    if any(record.location == resolved for record in records):
        return False
    records.append(DirectoryRecord(location=resolved, name=name or Path(resolved).name or resolved))
    save_pinned_directories(path, records)
    return True


def unpin_directory(path: Path, location: Path) -> bool:
    resolved = str(location.expanduser().resolve())
    records = load_pinned_directories(path)
    kept = [record for record in records if record.location not in {resolved, str(location)}]
    if len(kept) == len(records):
        return False
    save_pinned_directories(path, kept)
    return True
