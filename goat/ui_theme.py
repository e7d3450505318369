"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the timer frame: title, legend, gauge, borders.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    title: str
    border: str
    legend_key: str
    legend_label: str
    gauge_title: str
    gauge_fill: str
    gauge_empty: str
    gauge_label: str
    gauge_fill_char: str = " "


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[1;35m",
    border="\033[38;5;45m",
    legend_key="\033[32m",
    legend_label="\033[38;5;252m",
    gauge_title="\033[38;5;250m",
    gauge_fill="\033[46;30m",
    gauge_empty="\033[2m",
    gauge_label="\033[1;33m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    title="\033[1;38;5;45m",
    border="\033[2;38;5;31m",
    legend_key="\033[38;5;153m",
    legend_label="\033[38;5;252m",
    gauge_title="\033[2;38;5;110m",
    gauge_fill="\033[48;5;39;38;5;16m",
    gauge_empty="\033[2;38;5;24m",
    gauge_label="\033[1;38;5;215m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    title="",
    border="",
    legend_key="",
    legend_label="",
    gauge_title="",
    gauge_fill="",
    gauge_empty="",
    gauge_label="",
    gauge_fill_char="#",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
