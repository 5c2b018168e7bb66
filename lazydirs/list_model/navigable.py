"""Cursor and viewport state machine over a displayed dataset.

Every mutation leaves ``ListState`` with the cursor inside the displayed
sequence, the viewport offset in range, and the cursor on screen. Group
boundaries count for scrolling but the cursor steps over them.
"""

from __future__ import annotations

from .types import Dataset, Entry, GroupBoundary, ListState


class NavigableList:
    """State-bound cursor/viewport operations used by search sessions."""

    def __init__(self, state: ListState) -> None:
        self.state = state
        self.clamp()
        self._settle_on_selectable()
        self.clamp()

    def __len__(self) -> int:
        return len(self.state.displayed)

    def _is_boundary(self, index: int) -> bool:
        return isinstance(self.state.displayed[index], GroupBoundary)

    def _has_selectable(self) -> bool:
        return any(isinstance(item, Entry) for item in self.state.displayed)

    def _max_offset(self) -> int:
        return max(0, len(self.state.displayed) - self.state.viewport_height)

    def _step_up(self) -> None:
        state = self.state
        if state.cursor > 0:
            state.cursor -= 1
            if state.cursor < state.viewport_offset:
                state.viewport_offset = state.cursor
            return
        state.cursor = len(state.displayed) - 1
        state.viewport_offset = self._max_offset()

    def _step_down(self) -> None:
        state = self.state
        if state.cursor >= len(state.displayed) - 1:
            state.cursor = 0
            state.viewport_offset = 0
            return
        state.cursor += 1
        if state.cursor >= state.viewport_offset + state.viewport_height:
            state.viewport_offset += 1

    def _move(self, direction: int) -> bool:
        if not self._has_selectable():
            return False
        previous = (self.state.cursor, self.state.viewport_offset)
        step = self._step_up if direction < 0 else self._step_down
        for _ in range(len(self.state.displayed)):
            step()
            if not self._is_boundary(self.state.cursor):
                break
        self.clamp()
        return (self.state.cursor, self.state.viewport_offset) != previous

    def move_up(self) -> bool:
        """Move one selectable row up, wrapping from the top to the bottom."""
        return self._move(-1)

    def move_down(self) -> bool:
        """Move one selectable row down, wrapping from the bottom to the top."""
        return self._move(1)

    def _settle_on_selectable(self) -> None:
        displayed = self.state.displayed
        if not displayed or not self._has_selectable():
            return
        while self._is_boundary(self.state.cursor):
            self._step_down()

    def replace(self, new_displayed: Dataset) -> None:
        """Swap the displayed sequence and return focus to the first entry."""
        self.state.displayed = new_displayed
        self.state.cursor = 0
        self.state.viewport_offset = 0
        self._settle_on_selectable()
        self.clamp()

    def resize(self, new_viewport_height: int) -> None:
        """Change viewport height, moving the offset only as far as needed."""
        self.state.viewport_height = max(1, new_viewport_height)
        self.clamp()

    def clamp(self) -> None:
        """Re-establish cursor and viewport bounds."""
        state = self.state
        state.viewport_height = max(1, state.viewport_height)
        count = len(state.displayed)
        if count == 0:
            state.cursor = 0
            state.viewport_offset = 0
            return
        state.cursor = max(0, min(state.cursor, count - 1))
        state.viewport_offset = max(0, min(state.viewport_offset, self._max_offset()))
        if state.cursor < state.viewport_offset:
            state.viewport_offset = state.cursor
        elif state.cursor >= state.viewport_offset + state.viewport_height:
            state.viewport_offset = state.cursor - state.viewport_height + 1

    def visible_rows(self) -> Dataset:
        start = self.state.viewport_offset
        return self.state.displayed[start : start + self.state.viewport_height]

    def cursor_row(self) -> int | None:
        """Cursor index relative to :meth:`visible_rows`, or ``None`` if nothing is selectable."""
        if self.selected() is None:
            return None
        return self.state.cursor - self.state.viewport_offset

    def selected(self) -> Entry | None:
        displayed = self.state.displayed
        if not displayed or not (0 <= self.state.cursor < len(displayed)):
            return None
        item = displayed[self.state.cursor]
        return item if isinstance(item, Entry) else None
