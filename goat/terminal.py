"""Terminal control helpers for the timer session.

Owns raw-mode lifecycle, alternate-screen switching, and cursor visibility.
Also reports the current display geometry to the runtime loop.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty
from typing import NamedTuple

DEFAULT_GEOMETRY = (80, 24)


class Geometry(NamedTuple):
    columns: int
    lines: int


def current_geometry() -> Geometry:
    """Return terminal size, falling back to 80x24 when it cannot be queried."""
    size = shutil.get_terminal_size(DEFAULT_GEOMETRY)
    return Geometry(max(1, size.columns), max(1, size.lines))


class TerminalController:
    """Manage terminal mode transitions for the full-screen timer."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Enter alternate screen, clear it, and hide cursor.
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[2J\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Restore normal terminal state."""
        # Show cursor and restore the main screen buffer.
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()


__all__ = ["DEFAULT_GEOMETRY", "Geometry", "TerminalController", "current_geometry"]
