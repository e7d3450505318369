"""Frame rendering for the countdown screen.

Defines the per-redraw ``Frame`` handed over by the control loop and the ANSI
renderer that turns it into a legend box plus a progress gauge. Line building
is pure; only ``AnsiRenderer.draw`` touches the output descriptor.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from itertools import groupby

from .ansi import clip_ansi_line, display_width, pad_ansi_line
from .terminal import Geometry
from .ui_theme import DEFAULT_THEME, UITheme

GAUGE_TITLE = "timer"
GAUGE_BOX_HEIGHT = 3
LEGEND_BORDER_ROWS = 2
FRAME_MARGIN = 2


@dataclass(frozen=True)
class Frame:
    """Everything the renderer needs for one redraw."""

    title: str
    percent: int
    elapsed_label: str
    total_label: str
    legend: tuple[tuple[str, str], ...]
    geometry: Geometry


def _border_top(title: str, width: int, theme: UITheme, title_style: str) -> str:
    inner = max(0, width - 2)
    title_text = clip_ansi_line(f" {title} ", max(0, inner - 1)) if title else ""
    title_cols = display_width(title_text)
    rule_after = max(0, inner - 1 - title_cols) if title_text else inner
    parts = [theme.border, "╭"]
    if title_text:
        parts.extend(["─", theme.reset, title_style, title_text, theme.reset, theme.border])
    parts.extend(["─" * rule_after, "╮", theme.reset])
    return "".join(parts)


def _border_bottom(width: int, theme: UITheme) -> str:
    return f"{theme.border}╰{'─' * max(0, width - 2)}╯{theme.reset}"


def _boxed_row(content: str, width: int, theme: UITheme) -> str:
    inner = max(0, width - 2)
    return f"{theme.border}│{theme.reset}{pad_ansi_line(content, inner)}{theme.reset}{theme.border}│{theme.reset}"


def legend_lines(legend: tuple[tuple[str, str], ...], theme: UITheme) -> list[str]:
    """Return one styled ``<key> -> <label>`` row per mapping."""
    return [
        f" {theme.legend_key}{key}{theme.reset}{theme.legend_label} -> {label}{theme.reset}"
        for key, label in legend
    ]


def _styled_runs(text: str, blank_style: str, text_style: str, reset: str) -> str:
    out: list[str] = []
    for is_blank, run in groupby(text, key=lambda ch: ch == " "):
        out.append(f"{blank_style if is_blank else text_style}{''.join(run)}{reset}")
    return "".join(out)


def gauge_bar(percent: int, label: str, width: int, theme: UITheme) -> str:
    """Render a progress bar ``width`` columns wide with ``label`` centered.

    Label characters over the unfilled part use the label style; the blank
    remainder uses the empty style.
    """
    if width <= 0:
        return ""
    percent = max(0, min(100, percent))
    filled = width * percent // 100
    text = label[:width].center(width)
    fill_text = "".join(theme.gauge_fill_char if ch == " " else ch for ch in text[:filled])
    return (
        f"{theme.gauge_fill}{fill_text}{theme.reset}"
        f"{_styled_runs(text[filled:], theme.gauge_empty, theme.gauge_label, theme.reset)}"
    )


def gauge_label(frame: Frame) -> str:
    return f"{frame.percent}%  {frame.elapsed_label} / {frame.total_label}"


def build_frame_lines(frame: Frame, theme: UITheme = DEFAULT_THEME) -> list[str]:
    """Compose the full screen as a list of rows, clipped to the geometry.

    The legend box sits on top and the gauge box directly below it. A margin
    is applied only when the terminal has room for it. On short terminals
    legend rows are dropped first, then the legend box, so the gauge stays
    visible.
    """
    columns, lines = frame.geometry
    fixed_rows = LEGEND_BORDER_ROWS + GAUGE_BOX_HEIGHT
    needed_rows = len(frame.legend) + fixed_rows
    margin = FRAME_MARGIN if columns > 4 * FRAME_MARGIN + 10 and lines >= needed_rows + 2 * FRAME_MARGIN else 0
    box_width = max(2, columns - 2 * margin)
    indent = " " * margin

    rows: list[str] = [""] * margin
    if lines - margin >= fixed_rows:
        legend_room = lines - margin - fixed_rows
        rows.append(_border_top(frame.title, box_width, theme, theme.title))
        rows.extend(
            _boxed_row(line, box_width, theme) for line in legend_lines(frame.legend, theme)[:legend_room]
        )
        rows.append(_border_bottom(box_width, theme))
    rows.append(_border_top(GAUGE_TITLE, box_width, theme, theme.gauge_title))
    rows.append(
        f"{theme.border}│{theme.reset}"
        f"{gauge_bar(frame.percent, gauge_label(frame), box_width - 2, theme)}"
        f"{theme.border}│{theme.reset}"
    )
    rows.append(_border_bottom(box_width, theme))

    return [clip_ansi_line(indent + row, columns) if row else "" for row in rows[:lines]]


class AnsiRenderer:
    """Write composed frames to a terminal file descriptor."""

    def __init__(self, stdout_fd: int, theme: UITheme = DEFAULT_THEME) -> None:
        self.stdout_fd = stdout_fd
        self.theme = theme
        self._needs_clear = True

    def resize(self, geometry: Geometry) -> None:
        """Force a full clear on the next draw after a geometry change."""
        self._needs_clear = True

    def draw(self, frame: Frame) -> None:
        out: list[str] = []
        if self._needs_clear:
            out.append("\033[2J")
            self._needs_clear = False
        for row, line in enumerate(build_frame_lines(frame, self.theme)):
            out.append(f"\033[{row + 1};1H\033[2K")
            out.append(line)
        os.write(self.stdout_fd, "".join(out).encode("utf-8", errors="replace"))


__all__ = [
    "AnsiRenderer",
    "Frame",
    "GAUGE_TITLE",
    "build_frame_lines",
    "gauge_bar",
    "gauge_label",
    "legend_lines",
]
