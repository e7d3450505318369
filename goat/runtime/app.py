"""Runtime composition layer for goat.

Wires the terminal, key reader, event producers, renderer, and control loop
for one interactive countdown. Non-interactive sessions skip all of that and
just sleep for the requested duration.
"""

from __future__ import annotations

import logging
import os
import sys
import time
from functools import partial

from ..input import read_key
from ..keymapping import MappingTable
from ..render import AnsiRenderer
from ..terminal import TerminalController, current_geometry
from ..timer import TimerState
from ..ui_theme import resolve_theme
from .events import TICK_INTERVAL_SECONDS, EventMerger
from .loop import EXPIRED_EXIT_CODE, run_control_loop

logger = logging.getLogger(__name__)


def is_interactive() -> bool:
    """Return whether both stdin and stdout are attached to a terminal."""
    try:
        return os.isatty(sys.stdin.fileno()) and os.isatty(sys.stdout.fileno())
    except (AttributeError, OSError, ValueError):
        return False


def sleep_fallback(duration: int, title: str) -> int:
    """Print a one-line status, sleep the full duration, and report success."""
    print(f"goat - sleeping for {duration} seconds: '{title}'", flush=True)
    logger.info("non-interactive session, sleeping %ss", duration)
    time.sleep(duration)
    return EXPIRED_EXIT_CODE


def run_timer(
    duration: int,
    mappings: MappingTable,
    title: str,
    *,
    theme_name: str | None = None,
    no_color: bool = False,
    tick_interval: float = TICK_INTERVAL_SECONDS,
) -> int:
    """Run one countdown and return the exit code chosen by the operator.

    Falls back to ``sleep_fallback`` when not attached to a terminal. The tty
    is restored on every exit path, including fatal errors.
    """
    if not is_interactive():
        return sleep_fallback(duration, title)

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    renderer = AnsiRenderer(stdout_fd, resolve_theme(theme_name, no_color=no_color))

    with terminal.raw_mode():
        timer = TimerState.start(duration)
        events = EventMerger(partial(read_key, stdin_fd), tick_interval=tick_interval)
        events.start()
        logger.info("countdown of %ss started with keys %s", duration, ", ".join(mappings))
        try:
            return run_control_loop(
                timer,
                mappings,
                events,
                renderer,
                geometry=current_geometry,
                title=title,
            )
        except Exception:
            logger.exception("countdown aborted")
            raise


__all__ = ["is_interactive", "run_timer", "sleep_fallback"]
