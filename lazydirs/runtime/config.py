"""Persistent JSON config helpers.

Stores the pinned-store location, history command, extra external-media
mount prefixes, and UI theme. All access is defensive: malformed or missing
config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir, user_log_dir

logger = logging.getLogger(__name__)

APP_NAME = "lazydirs"
CONFIG_FILENAME = "config.json"
PINNED_FILENAME = "pinned.json"
LOG_FILENAME = "lazydirs.log"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_PINNED_PATH = Path(user_data_dir(APP_NAME, appauthor=False)) / PINNED_FILENAME
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME
DEFAULT_HISTORY_COMMAND = "zoxide"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError):
        logger.warning("ignoring unreadable config at %s", CONFIG_PATH, exc_info=True)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        logger.warning("could not write config to %s", CONFIG_PATH, exc_info=True)


def _load_nonempty_str(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_pinned_file_path() -> Path:
    """Return the pinned-directories store path (``~`` is expanded)."""
    override = _load_nonempty_str("pinned_file")
    if override is None:
        return DEFAULT_PINNED_PATH
    return Path(override).expanduser()


def load_history_command() -> str:
    return _load_nonempty_str("history_command") or DEFAULT_HISTORY_COMMAND


def load_external_mount_prefixes() -> tuple[str, ...]:
    """Load extra mount prefixes treated as external media; non-strings are dropped."""
    value = load_config().get("external_mount_prefixes")
    if not isinstance(value, list):
        return ()
    return tuple(item.strip() for item in value if isinstance(item, str) and item.strip())


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_nonempty_str("theme")


def save_theme_name(theme_name: str) -> None:
    """Persist the chosen UI theme, keeping the other config keys."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)
