"""Tests for the key/tick event merger.

Producers run on real daemon threads; blocked readers are parked on events
that are never set, mirroring a terminal with no further input.
"""

from __future__ import annotations

import threading
import unittest

from goat.input import InputClosedError
from goat.runtime.events import EventMerger, EventSourceError, KeyPressed, Tick


def _scripted_reader(keys: list[str]):
    pending = list(keys)
    parked = threading.Event()

    def read_key() -> str:
        if pending:
            return pending.pop(0)
        parked.wait()
        return ""

    return read_key


def _receive(merger: EventMerger, count: int) -> list:
    return [merger.next_event() for _ in range(count)]


class EventMergerTests(unittest.TestCase):
    def test_key_presses_arrive_in_input_order(self) -> None:
        merger = EventMerger(_scripted_reader(["a", "b", "UP"]), tick_interval=60.0)
        merger.start()

        events = _receive(merger, 4)

        keys = [event.key for event in events if isinstance(event, KeyPressed)]
        self.assertEqual(keys, ["a", "b", "UP"])
        self.assertEqual(sum(isinstance(event, Tick) for event in events), 1)

    def test_ticker_publishes_immediately_and_then_repeats(self) -> None:
        merger = EventMerger(_scripted_reader([]), tick_interval=0.01)
        merger.start()

        events = _receive(merger, 3)

        self.assertEqual(events, [Tick(), Tick(), Tick()])

    def test_ticker_sleeps_the_configured_interval_between_ticks(self) -> None:
        sleeps: list[float] = []
        parked = threading.Event()

        def fake_sleep(seconds: float) -> None:
            sleeps.append(seconds)
            if len(sleeps) >= 2:
                parked.wait()

        merger = EventMerger(_scripted_reader([]), tick_interval=0.5, sleep=fake_sleep)
        merger.start()

        self.assertEqual(_receive(merger, 2), [Tick(), Tick()])
        self.assertEqual(sleeps[0], 0.5)

    def test_backed_up_ticks_are_all_delivered(self) -> None:
        merger = EventMerger(_scripted_reader([]), tick_interval=0.001)
        merger.start()
        threading.Event().wait(0.05)

        events = _receive(merger, 10)

        self.assertTrue(all(isinstance(event, Tick) for event in events))

    def test_input_failure_is_raised_in_the_consumer(self) -> None:
        def closed_reader() -> str:
            raise InputClosedError("end of input on fd 0")

        merger = EventMerger(closed_reader, tick_interval=60.0)
        merger.start()

        with self.assertRaises(EventSourceError) as ctx:
            for _ in range(3):
                merger.next_event()
        self.assertIsInstance(ctx.exception.__cause__, InputClosedError)
        self.assertIn("input", str(ctx.exception))

    def test_ticker_failure_is_raised_in_the_consumer(self) -> None:
        def broken_sleep(_seconds: float) -> None:
            raise OSError("clock unavailable")

        merger = EventMerger(_scripted_reader([]), sleep=broken_sleep)
        merger.start()

        self.assertEqual(merger.next_event(), Tick())
        with self.assertRaises(EventSourceError) as ctx:
            merger.next_event()
        self.assertIn("ticker", str(ctx.exception))

    def test_producers_start_only_once(self) -> None:
        merger = EventMerger(_scripted_reader([]), tick_interval=60.0)
        merger.start()

        with self.assertRaises(RuntimeError):
            merger.start()


if __name__ == "__main__":
    unittest.main()
