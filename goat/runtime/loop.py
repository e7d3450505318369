"""Countdown control loop.

Consumes merged events one at a time and decides, per event, whether to
redraw, keep waiting, or stop with an exit code. Rendering and event delivery
are injected so the state machine can run headless in tests.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, Union

from ..keymapping import CONTINUE_EXIT_CODE, MappingTable
from ..render import Frame
from ..terminal import Geometry
from ..timer import TimerState
from .events import Event, KeyPressed, Tick

logger = logging.getLogger(__name__)

EXPIRED_EXIT_CODE = CONTINUE_EXIT_CODE


class EventSource(Protocol):
    def next_event(self) -> Event: ...


class Renderer(Protocol):
    def resize(self, geometry: Geometry) -> None: ...

    def draw(self, frame: Frame) -> None: ...


@dataclass(frozen=True)
class Running:
    pass


@dataclass(frozen=True)
class Terminated:
    exit_code: int


LoopState = Union[Running, Terminated]
RUNNING = Running()


def next_state(event: Event, timer: TimerState, mappings: MappingTable) -> LoopState:
    """Apply one event to the ``Running`` state.

    A bound key terminates with its exit code and unbound keys are ignored.
    A tick after expiry terminates with the continue code.
    """
    if isinstance(event, KeyPressed):
        mapping = mappings.lookup(event.key)
        if mapping is None:
            return RUNNING
        logger.info("key %r pressed, exiting with %d (%s)", event.key, mapping.exit_code, mapping.label)
        return Terminated(mapping.exit_code)
    if isinstance(event, Tick):
        if timer.is_expired():
            logger.info("timer of %ss expired", timer.total_label())
            return Terminated(EXPIRED_EXIT_CODE)
        return RUNNING
    raise TypeError(f"unsupported event: {event!r}")


@dataclass
class ControlLoop:
    """Drive one countdown until a key or expiry ends it."""

    timer: TimerState
    mappings: MappingTable
    events: EventSource
    renderer: Renderer
    geometry: Callable[[], Geometry]
    title: str = ""
    _size: Geometry | None = field(default=None, init=False, repr=False)

    def frame(self) -> Frame:
        return Frame(
            title=self.title,
            percent=self.timer.percent_complete(),
            elapsed_label=self.timer.elapsed_label(),
            total_label=self.timer.total_label(),
            legend=self.mappings.legend(),
            geometry=self._size or self.geometry(),
        )

    def sync_geometry(self) -> None:
        size = self.geometry()
        if size != self._size:
            if self._size is not None:
                logger.debug("terminal resized to %sx%s", size.columns, size.lines)
            self.renderer.resize(size)
            self._size = size

    def run(self) -> int:
        """Run until terminated and return the exit code."""
        self.sync_geometry()
        self.renderer.draw(self.frame())
        while True:
            self.sync_geometry()
            event = self.events.next_event()
            state = next_state(event, self.timer, self.mappings)
            if isinstance(state, Terminated):
                return state.exit_code
            if isinstance(event, Tick):
                self.renderer.draw(self.frame())
            else:
                logger.debug("ignoring unbound key %r", event.key)


def run_control_loop(
    timer: TimerState,
    mappings: MappingTable,
    events: EventSource,
    renderer: Renderer,
    geometry: Callable[[], Geometry],
    title: str = "",
) -> int:
    """Convenience wrapper building a ``ControlLoop`` and running it."""
    return ControlLoop(
        timer=timer,
        mappings=mappings,
        events=events,
        renderer=renderer,
        geometry=geometry,
        title=title,
    ).run()


__all__ = [
    "ControlLoop",
    "EXPIRED_EXIT_CODE",
    "EventSource",
    "LoopState",
    "Renderer",
    "Running",
    "Terminated",
    "next_state",
    "run_control_loop",
]
