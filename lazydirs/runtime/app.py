"""Feature bootstrap: bind a feature to the terminal loop."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..features.history_modal import HistoryModal
from ..features.sidebar import SidebarDirectories
from ..render.frame import CHROME_ROWS
from ..render.theme import UITheme
from .loop import ListLoopCallbacks, run_list_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def _terminal() -> TerminalController:
    return TerminalController(sys.stdin.fileno(), sys.stdout.fileno())


def sidebar_callbacks(sidebar: SidebarDirectories) -> ListLoopCallbacks:
    def layout(columns: int, lines: int) -> tuple[int, int]:
        list_rows = max(1, lines - CHROME_ROWS)
        sidebar.resize(list_rows)
        return columns, list_rows

    return ListLoopCallbacks(
        is_open=lambda: sidebar.open,
        handle_key=sidebar.handle_key,
        current_frame=sidebar.frame,
        layout=layout,
    )


def history_callbacks(modal: HistoryModal) -> ListLoopCallbacks:
    def layout(columns: int, lines: int) -> tuple[int, int]:
        modal.update_size(columns, lines)
        return modal.width, modal.viewport_height

    return ListLoopCallbacks(
        is_open=modal.is_open,
        handle_key=modal.handle_key,
        current_frame=modal.frame,
        layout=layout,
        poll_background=modal.drain_results,
        loading_message="loading directory history...",
    )


def run_sidebar(sidebar: SidebarDirectories, theme: UITheme) -> str | None:
    """Run the sidebar browser interactively and return the chosen path."""
    sidebar.refresh()
    terminal = _terminal()
    with terminal.raw_mode():
        selected = run_list_loop(terminal, terminal.stdin_fd, sidebar_callbacks(sidebar), theme)
    logger.debug("sidebar closed with selection %r", selected)
    return selected


def run_history(modal: HistoryModal, exclude_path: Path | None, theme: UITheme) -> str | None:
    """Run the history picker; returns ``None`` when there is no history to show."""
    base = exclude_path if exclude_path is not None else Path(os.getcwd())
    if modal.source.is_empty(base):
        logger.info("no directory history outside %s", base)
        return None
    if not modal.open(base):
        return None
    terminal = _terminal()
    with terminal.raw_mode():
        selected = run_list_loop(terminal, terminal.stdin_fd, history_callbacks(modal), theme)
    return selected
