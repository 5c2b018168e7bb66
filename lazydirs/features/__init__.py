"""User-facing list features built on the list engine."""

from __future__ import annotations

from .history_modal import HistoryModal, modal_size_for_terminal
from .open_flag import OpenFlag
from .sidebar import SidebarDirectories

__all__ = ["HistoryModal", "OpenFlag", "SidebarDirectories", "modal_size_for_terminal"]
