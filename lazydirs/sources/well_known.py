"""Well-known user folders (Home, Downloads, ...) that exist on disk."""

from __future__ import annotations

import logging
import os
import shlex
from collections.abc import Callable
from pathlib import Path

import platformdirs

from .types import DirectoryRecord

logger = logging.getLogger(__name__)

USER_DIRS_FILENAME = "user-dirs.dirs"


def xdg_user_dir(key: str) -> str:
    """Read ``XDG_<KEY>_DIR`` from ``user-dirs.dirs``; returns ``""`` when unset.

    Templates and PublicShare are not exposed by platformdirs.
    """
    path = Path(platformdirs.user_config_dir()) / USER_DIRS_FILENAME
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""
    except OSError:
        logger.warning("could not read %s", path, exc_info=True)
        return ""
    wanted = f"XDG_{key}_DIR"
    for line in text.splitlines():
        name, sep, value = line.strip().partition("=")
        if not sep or name != wanted:
            continue
        parts = shlex.split(value)
        if not parts:
            return ""
        location = parts[0].replace("$HOME", str(Path.home()))
        return os.path.normpath(location)
    return ""


WELL_KNOWN_RESOLVERS: tuple[tuple[str, Callable[[], str]], ...] = (
    ("Home", lambda: str(Path.home())),
    ("Desktop", platformdirs.user_desktop_dir),
    ("Downloads", platformdirs.user_downloads_dir),
    ("Documents", platformdirs.user_documents_dir),
    ("Pictures", platformdirs.user_pictures_dir),
    ("Videos", platformdirs.user_videos_dir),
    ("Music", platformdirs.user_music_dir),
    ("Templates", lambda: xdg_user_dir("TEMPLATES")),
    ("PublicShare", lambda: xdg_user_dir("PUBLICSHARE")),
)


def well_known_directories() -> list[DirectoryRecord]:
    """Return existing well-known folders in fixed order, skipping duplicates.

    platformdirs falls back to ``$HOME/<Name>`` when XDG user dirs are unset,
    so a missing folder is simply skipped.
    """
    records: list[DirectoryRecord] = []
    seen: set[str] = set()
    for name, resolve in WELL_KNOWN_RESOLVERS:
        try:
            location = resolve()
        except Exception:
            logger.warning("could not resolve well-known folder %s", name, exc_info=True)
            continue
        if not location or location in seen:
            continue
        if not Path(location).is_dir():
            continue
        seen.add(location)
        records.append(DirectoryRecord(location=location, name=name))
    return records
