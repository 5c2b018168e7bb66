"""Logical list actions, independent of physical key bindings."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .types import Entry


class Action(enum.Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    BEGIN_SEARCH = "begin_search"
    TYPE_CHAR = "type_char"
    DELETE_CHAR = "delete_char"
    CLEAR_QUERY = "clear_query"
    COMMIT_SEARCH = "commit_search"
    CANCEL_SEARCH = "cancel_search"
    CONFIRM = "confirm"
    CLOSE = "close"


@dataclass(frozen=True)
class ActionResult:
    """Outcome of one dispatched action.

    ``changed`` tells the caller to redraw. ``selected`` carries a confirmed
    entry and ``close`` asks the owning feature to shut.
    """

    handled: bool = True
    changed: bool = False
    selected: Entry | None = None
    close: bool = False


UNHANDLED = ActionResult(handled=False)
