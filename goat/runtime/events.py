"""Event sources for the countdown loop.

Two daemon threads publish into one ``Queue``: a key reader that forwards
every key press and a ticker that emits a ``Tick`` every interval. The loop
consumes them in arrival order through ``EventMerger.next_event``.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from queue import Queue
from typing import Union

logger = logging.getLogger(__name__)

TICK_INTERVAL_SECONDS = 0.5


@dataclass(frozen=True)
class KeyPressed:
    """One decoded key press."""

    key: str


@dataclass(frozen=True)
class Tick:
    """Periodic wake-up driving redraws and expiry checks."""


Event = Union[KeyPressed, Tick]


class EventSourceError(RuntimeError):
    """A producer thread could no longer deliver events."""


@dataclass(frozen=True)
class _SourceFailed:
    source: str
    error: BaseException


class EventMerger:
    """Merge key presses and ticks into one ordered stream.

    Producers are started once by ``start`` and never joined; they are daemon
    threads abandoned at process exit.
    """

    def __init__(
        self,
        read_key: Callable[[], str],
        *,
        tick_interval: float = TICK_INTERVAL_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._read_key = read_key
        self._tick_interval = tick_interval
        self._sleep = sleep
        self._events: Queue[Event | _SourceFailed] = Queue()
        self._threads: list[threading.Thread] = []

    def _input_worker(self) -> None:
        try:
            while True:
                self._events.put(KeyPressed(self._read_key()))
        except Exception as exc:
            self._events.put(_SourceFailed("input", exc))

    def _tick_worker(self) -> None:
        try:
            while True:
                self._events.put(Tick())
                self._sleep(self._tick_interval)
        except Exception as exc:
            self._events.put(_SourceFailed("ticker", exc))

    def start(self) -> None:
        if self._threads:
            raise RuntimeError("event producers already started")
        for name, target in (("input", self._input_worker), ("ticker", self._tick_worker)):
            worker = threading.Thread(target=target, name=f"goat-{name}", daemon=True)
            self._threads.append(worker)
        for worker in self._threads:
            worker.start()
        logger.debug("started event producers with %.3fs tick interval", self._tick_interval)

    def next_event(self) -> Event:
        """Block until the next event arrives.

        Raises ``EventSourceError`` when a producer has died.
        """
        item = self._events.get()
        if isinstance(item, _SourceFailed):
            raise EventSourceError(f"{item.source} event source failed: {item.error}") from item.error
        return item


__all__ = [
    "Event",
    "EventMerger",
    "EventSourceError",
    "KeyPressed",
    "TICK_INTERVAL_SECONDS",
    "Tick",
]
