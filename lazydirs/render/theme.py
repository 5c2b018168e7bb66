"""UI theme definitions and selection helpers.

Themes are ANSI palettes for list chrome only; the list engine never sees
them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    title: str
    entry: str
    selected: str
    group_header: str
    query: str
    placeholder: str
    hint_dim: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[1;38;5;81m",
    entry="\033[38;5;252m",
    selected="\033[7;38;5;81m",
    group_header="\033[1;34m",
    query="\033[1;38;5;81m",
    placeholder="\033[2;38;5;250m",
    hint_dim="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    title="\033[1;38;5;45m",
    entry="\033[38;5;153m",
    selected="\033[7;38;5;45m",
    group_header="\033[1;38;5;39m",
    query="\033[1;38;5;45m",
    placeholder="\033[2;38;5;110m",
    hint_dim="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    title="",
    entry="",
    selected="",
    group_header="",
    query="",
    placeholder="",
    hint_dim="",
)

_THEMES = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME, PLAIN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    return tuple(_THEMES)


def resolve_theme(name: str | None) -> UITheme:
    """Return the named theme, falling back to the default for unknown names."""
    if name is None:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)
