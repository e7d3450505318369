"""Countdown timer model.

Holds the start instant and target duration captured at loop entry. Every
other quantity is derived from the clock on demand, so the model never needs
to be written after construction and is safe to read from any thread.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

MILLIS_PER_SECOND = 1000


@dataclass(frozen=True)
class TimerState:
    """Start instant plus target duration, with pure time-derived queries."""

    start_instant: float
    target_duration: float
    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    @classmethod
    def start(cls, target_duration: float, clock: Callable[[], float] = time.monotonic) -> TimerState:
        """Capture ``clock()`` as the start instant for a new countdown."""
        return cls(start_instant=clock(), target_duration=float(target_duration), clock=clock)

    def elapsed(self) -> float:
        return max(0.0, self.clock() - self.start_instant)

    def remaining(self) -> float:
        return max(0.0, self.target_duration - self.elapsed())

    def percent_complete(self) -> int:
        """Return progress as an integer percentage clamped to ``[0, 100]``.

        Uses whole milliseconds so sub-second progress is visible on short
        timers. A zero-length countdown is always complete.
        """
        target_ms = int(self.target_duration * MILLIS_PER_SECOND)
        if target_ms <= 0:
            return 100
        elapsed_ms = int(self.elapsed() * MILLIS_PER_SECOND)
        return max(0, min(100, elapsed_ms * 100 // target_ms))

    def is_expired(self) -> bool:
        # Strict so the 100% frame is drawn before the loop terminates.
        return self.elapsed() > self.target_duration

    def elapsed_label(self) -> str:
        return f"{int(self.elapsed())}s"

    def total_label(self) -> str:
        return f"{int(self.target_duration)}s"


__all__ = ["MILLIS_PER_SECOND", "TimerState"]
