"""Removable and external media mount points."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

import psutil

from .types import DirectoryRecord

logger = logging.getLogger(__name__)

EXTERNAL_MOUNT_PREFIXES: tuple[str, ...] = ("/mnt", "/media", "/run/media", "/Volumes")


def is_external_mountpoint(mountpoint: str, prefixes: Iterable[str] = EXTERNAL_MOUNT_PREFIXES) -> bool:
    """Return whether ``mountpoint`` lives strictly below one of ``prefixes``."""
    normalized = mountpoint.rstrip("/") or "/"
    for prefix in prefixes:
        base = prefix.rstrip("/")
        if not base:
            continue
        if normalized.startswith(base + "/"):
            return True
    return False


def external_media_directories(extra_prefixes: Iterable[str] = ()) -> list[DirectoryRecord]:
    """List mounted external media; partition query errors yield ``[]``."""
    prefixes = (*EXTERNAL_MOUNT_PREFIXES, *extra_prefixes)
    try:
        partitions = psutil.disk_partitions(all=True)
    except Exception:
        logger.warning("could not enumerate disk partitions", exc_info=True)
        return []

    records: list[DirectoryRecord] = []
    seen: set[str] = set()
    for partition in partitions:
        mountpoint = partition.mountpoint
        if not mountpoint or mountpoint in seen:
            continue
        if not is_external_mountpoint(mountpoint, prefixes):
            continue
        seen.add(mountpoint)
        records.append(DirectoryRecord(location=mountpoint, name=os.path.basename(mountpoint.rstrip("/"))))
    return records
