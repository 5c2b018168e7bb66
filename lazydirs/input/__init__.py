"""Input-layer public API for key decoding and action mapping.

Low-level terminal decoding (`read_key`) is kept apart from the logical
actions the list features consume.
"""

from ..list_model.actions import UNHANDLED, Action, ActionResult
from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import action_for_key, hint_for_mode
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "Action",
    "ActionResult",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "UNHANDLED",
    "action_for_key",
    "hint_for_mode",
    "read_key",
]
