"""Physical key tokens to logical list actions.

Browse and search modes use separate tables: while searching every printable
key is typed into the query, so letters like ``j``/``k``/``q`` lose their
browse meaning.
"""

from __future__ import annotations

from ..list_model.actions import Action
from .key_registry import KeyComboBinding, KeyComboRegistry

BROWSE_KEYS: KeyComboRegistry[Action] = KeyComboRegistry[Action]().register_bindings(
    KeyComboBinding(("UP", "k", "CTRL_P"), Action.MOVE_UP),
    KeyComboBinding(("DOWN", "j", "CTRL_N", "TAB"), Action.MOVE_DOWN),
    KeyComboBinding(("/",), Action.BEGIN_SEARCH),
    KeyComboBinding(("ENTER", "l", "RIGHT"), Action.CONFIRM),
    KeyComboBinding(("ESC", "q", "CTRL_C"), Action.CLOSE),
)

SEARCH_KEYS: KeyComboRegistry[Action] = KeyComboRegistry[Action]().register_bindings(
    KeyComboBinding(("ENTER",), Action.COMMIT_SEARCH),
    KeyComboBinding(("ESC", "CTRL_C"), Action.CANCEL_SEARCH),
    KeyComboBinding(("BACKSPACE",), Action.DELETE_CHAR),
    KeyComboBinding(("CTRL_U",), Action.CLEAR_QUERY),
    KeyComboBinding(("UP", "CTRL_P", "CTRL_K"), Action.MOVE_UP),
    KeyComboBinding(("DOWN", "CTRL_N", "TAB"), Action.MOVE_DOWN),
)

BROWSE_HINT = ("Enter: select", "/: search", "Esc: close")
SEARCH_HINT = ("Enter: apply", "Esc: cancel", "Ctrl+U: clear")


def action_for_key(key: str, searching: bool) -> tuple[Action, str] | None:
    """Resolve ``key`` to ``(action, typed_char)`` or ``None`` when unbound."""
    if not key:
        return None
    if searching:
        action = SEARCH_KEYS.lookup(key)
        if action is not None:
            return action, ""
        if len(key) == 1 and key.isprintable():
            return Action.TYPE_CHAR, key
        return None
    action = BROWSE_KEYS.lookup(key)
    if action is None:
        return None
    return action, ""


def hint_for_mode(searching: bool) -> tuple[str, ...]:
    return SEARCH_HINT if searching else BROWSE_HINT
