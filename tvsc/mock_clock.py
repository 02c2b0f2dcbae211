"""Manually driven clock for tests, with subsystems that follow its time."""

from __future__ import annotations

from abc import ABC, abstractmethod

from tvsc.clock import Clock, TimeType


class MockClock(Clock):
    """Clock whose time changes only when it is set, incremented or slept on.

    Every change of time is passed on to the registered :class:`Clockable`
    objects, in the order they registered.
    """

    def __init__(self) -> None:
        self._current_time_us: TimeType = 0
        self._clockables: list[Clockable] = []

    def register_clockable(self, clockable: Clockable) -> None:
        """Have ``clockable`` updated whenever the time changes."""
        self._clockables.append(clockable)

    def _update_clockables(self) -> None:
        for clockable in self._clockables:
            clockable.update(self._current_time_us)

    def current_time_millis(self) -> TimeType:
        return self._current_time_us // 1000

    def current_time_micros(self) -> TimeType:
        return self._current_time_us

    def sleep_ms(self, milliseconds: TimeType) -> None:
        """Advance the time instead of sleeping."""
        self.increment_current_time_millis(milliseconds)

    def sleep_us(self, microseconds: TimeType) -> None:
        """Advance the time instead of sleeping."""
        self.increment_current_time_micros(microseconds)

    def set_current_time_millis(self, current_time_ms: TimeType) -> None:
        self._current_time_us = current_time_ms * 1000
        self._update_clockables()

    def increment_current_time_millis(self, increment_ms: TimeType = 1) -> None:
        self._current_time_us += increment_ms * 1000
        self._update_clockables()

    def set_current_time_micros(self, current_time_us: TimeType) -> None:
        self._current_time_us = current_time_us
        self._update_clockables()

    def increment_current_time_micros(self, increment_us: TimeType = 1) -> None:
        self._current_time_us += increment_us
        self._update_clockables()


class Clockable(ABC):
    """A simulated subsystem that runs alongside a :class:`MockClock`.

    It registers itself with the clock on construction and is told the new
    time, in microseconds, each time the clock changes.
    """

    def __init__(self, clock: MockClock) -> None:
        self.clock = clock
        clock.register_clockable(self)

    @abstractmethod
    def update(self, current_time_us: TimeType) -> None:
        """Bring the subsystem's state up to ``current_time_us``."""