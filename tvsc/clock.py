"""Monotonic time functions and the Clock interface built on them."""

from __future__ import annotations

import time

TimeType = int

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000


def _check_duration(duration: TimeType) -> None:
    if duration < 0:
        raise ValueError(f"duration must be non-negative, got {duration}")


def delay_ms(milliseconds: TimeType) -> None:
    """Sleep the calling thread for the given number of milliseconds."""
    _check_duration(milliseconds)
    time.sleep(milliseconds / 1_000)


def delay_us(microseconds: TimeType) -> None:
    """Sleep the calling thread for the given number of microseconds."""
    _check_duration(microseconds)
    time.sleep(microseconds / 1_000_000)


def time_millis() -> TimeType:
    """Milliseconds on a monotonic clock with an unspecified starting point."""
    return time.monotonic_ns() // _NS_PER_MS


def time_micros() -> TimeType:
    """Microseconds on a monotonic clock with an unspecified starting point."""
    return time.monotonic_ns() // _NS_PER_US


class Clock:
    """Source of the current time that can also put the caller to sleep.

    The base class reads the system's monotonic clock; subclasses can model
    other clocks, such as a simulated or a remote one.
    """

    def current_time_millis(self) -> TimeType:
        """Current time in milliseconds."""
        return time_millis()

    def current_time_micros(self) -> TimeType:
        """Current time in microseconds."""
        return time_micros()

    def sleep_ms(self, milliseconds: TimeType) -> None:
        """Sleep for the given number of milliseconds."""
        delay_ms(milliseconds)

    def sleep_us(self, microseconds: TimeType) -> None:
        """Sleep for the given number of microseconds."""
        delay_us(microseconds)


_DEFAULT_CLOCK = Clock()


def default_clock() -> Clock:
    """The process-wide clock backed by the system's monotonic time."""
    return _DEFAULT_CLOCK