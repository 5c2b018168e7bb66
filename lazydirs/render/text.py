"""Display-width measurement for plain (unstyled) text."""

from __future__ import annotations

import unicodedata


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two. Tabs are rendered as one space.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def clip_text(text: str, max_cols: int, ellipsis: str = "…") -> str:
    """Trim ``text`` to ``max_cols`` columns, marking truncation with ``ellipsis``."""
    if max_cols <= 0:
        return ""
    text = text.replace("\t", " ")
    if display_width(text) <= max_cols:
        return text
    budget = max(0, max_cols - display_width(ellipsis))
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > budget:
            break
        out.append(ch)
        col += w
    return "".join(out) + ellipsis if budget > 0 else "".join(out)


def pad_text(text: str, width: int) -> str:
    clipped = clip_text(text, width)
    return clipped + " " * max(0, width - display_width(clipped))
