"""Interactive event loop shared by the sidebar and history features.

The loop only wires terminal size, background polling, input decoding and
rendering together; list behavior lives in the feature callbacks.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input.reader import read_key
from ..list_model.actions import ActionResult
from ..list_model.types import Frame
from ..render.frame import CHROME_ROWS, render_frame_lines
from ..render.theme import DEFAULT_THEME, UITheme
from .terminal import TerminalController

POLL_INTERVAL_MS = 50


@dataclass(frozen=True)
class ListLoopCallbacks:
    """Injected operations used by :func:`run_list_loop`.

    ``layout`` receives the terminal size and returns ``(width, list_rows)``
    for the list area.
    """

    is_open: Callable[[], bool]
    handle_key: Callable[[str], ActionResult]
    current_frame: Callable[[], Frame | None]
    layout: Callable[[int, int], tuple[int, int]]
    poll_background: Callable[[], bool] = lambda: False
    loading_message: str = "loading..."


def _loading_lines(message: str, theme: UITheme) -> list[str]:
    return ["", f"{theme.placeholder}{message}{theme.reset}"]


def run_list_loop(
    terminal: TerminalController,
    stdin_fd: int,
    callbacks: ListLoopCallbacks,
    theme: UITheme = DEFAULT_THEME,
) -> str | None:
    """Run until the feature closes; return the selected entry key, if any."""
    selected: str | None = None
    dirty = True
    last_size: tuple[int, int] | None = None
    width, list_rows = 80, 24 - CHROME_ROWS

    while callbacks.is_open():
        term = shutil.get_terminal_size((80, 24))
        size = (term.columns, term.lines)
        if size != last_size:
            width, list_rows = callbacks.layout(*size)
            last_size = size
            dirty = True

        if callbacks.poll_background():
            dirty = True

        if dirty:
            frame = callbacks.current_frame()
            if frame is None:
                terminal.draw(_loading_lines(callbacks.loading_message, theme))
            else:
                terminal.draw(render_frame_lines(frame, width, theme, rows=list_rows))
            dirty = False

        key = read_key(stdin_fd, timeout_ms=POLL_INTERVAL_MS)
        if not key:
            continue
        result = callbacks.handle_key(key)
        if result.selected is not None:
            selected = result.selected.key
        if result.close:
            break
        dirty = dirty or result.changed or result.handled

    return selected
