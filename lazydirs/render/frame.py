"""Turn list frames into terminal lines.

Rendering is presentation-only and side-effect free: it reads a
:class:`~lazydirs.list_model.types.Frame` and returns styled strings.
"""

from __future__ import annotations

from ..list_model.types import Entry, Frame, GroupBoundary, SearchMode
from .text import clip_text, pad_text
from .theme import DEFAULT_THEME, UITheme

# Title, query line, separator, hint footer.
CHROME_ROWS = 4
CURSOR_MARKER = "> "
ROW_INDENT = "  "


def _query_line(frame: Frame, width: int, theme: UITheme) -> str:
    if frame.mode is SearchMode.SEARCHING:
        text = clip_text(f"/ {frame.query_text}", max(1, width - 1))
        return f"{theme.query}{text}{theme.reset}█"
    if frame.query_text:
        return f"{theme.query}{clip_text(f'Search: {frame.query_text}', width)}{theme.reset}"
    if frame.placeholder:
        return f"{theme.placeholder}{clip_text(frame.placeholder, width)}{theme.reset}"
    return ""


def _row_line(item: Entry | GroupBoundary, is_cursor: bool, width: int, theme: UITheme) -> str:
    if isinstance(item, GroupBoundary):
        return f"{theme.group_header}{clip_text(item.label, width)}{theme.reset}"
    if is_cursor:
        return f"{theme.selected}{pad_text(CURSOR_MARKER + item.display_name, width)}{theme.reset}"
    return f"{theme.entry}{clip_text(ROW_INDENT + item.display_name, width)}{theme.reset}"


def _hint_line(frame: Frame, width: int, theme: UITheme) -> str:
    if not frame.hint:
        return ""
    return f"{theme.hint_dim}{clip_text('  '.join(frame.hint), width)}{theme.reset}"


def render_frame_lines(frame: Frame, width: int, theme: UITheme = DEFAULT_THEME, rows: int | None = None) -> list[str]:
    """Render ``frame`` as ``CHROME_ROWS`` plus list rows.

    When ``rows`` is given the list area is padded with blank lines to that
    height so the footer stays anchored.
    """
    width = max(1, width)
    title = f"{frame.title} ({frame.total})" if frame.title else ""
    lines = [
        f"{theme.title}{clip_text(title, width)}{theme.reset}" if title else "",
        _query_line(frame, width, theme),
    ]
    for idx, item in enumerate(frame.rows):
        lines.append(_row_line(item, idx == frame.cursor_row, width, theme))
    if rows is not None:
        lines.extend("" for _ in range(max(0, rows - len(frame.rows))))
    lines.append("")
    lines.append(_hint_line(frame, width, theme))
    return lines


def render_plain_dataset(items: tuple[Entry | GroupBoundary, ...]) -> list[str]:
    """Unstyled dump used by non-interactive output: headers flush, entries indented."""
    out: list[str] = []
    for item in items:
        if isinstance(item, GroupBoundary):
            out.append(f"[{item.label}]")
        else:
            out.append(f"{ROW_INDENT}{item.display_name}\t{item.key}")
    return out
