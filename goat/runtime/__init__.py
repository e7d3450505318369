"""Public runtime orchestration entry points.

This package groups the interactive timer bootstrap (`run_timer`) and the
lower-level event loop contracts used by tests and composition code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .events import EventMerger, KeyPressed, Tick
    from .loop import ControlLoop


def run_timer(*args, **kwargs):
    """Lazily import timer entrypoint to avoid terminal imports on package import."""
    from .app import run_timer as _run_timer

    return _run_timer(*args, **kwargs)


def run_control_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_control_loop as _run_control_loop

    return _run_control_loop(*args, **kwargs)


def __getattr__(name: str):
    if name in {"EventMerger", "KeyPressed", "Tick"}:
        from . import events as _events

        return getattr(_events, name)
    if name == "ControlLoop":
        from .loop import ControlLoop

        return ControlLoop
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ControlLoop",
    "EventMerger",
    "KeyPressed",
    "Tick",
    "run_control_loop",
    "run_timer",
]
