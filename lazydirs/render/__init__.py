"""Render sink: frame-to-lines rendering and UI themes."""

from __future__ import annotations

from .frame import CHROME_ROWS, render_frame_lines, render_plain_dataset
from .theme import UITheme, available_theme_names, resolve_theme

__all__ = [
    "CHROME_ROWS",
    "UITheme",
    "available_theme_names",
    "render_frame_lines",
    "render_plain_dataset",
    "resolve_theme",
]
