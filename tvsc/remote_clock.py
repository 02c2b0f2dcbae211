"""Clock that models the time kept on another machine."""

from __future__ import annotations

from tvsc.clock import Clock, TimeType


class RemoteClock(Clock):
    """Time as a remote clock would report it, estimated from a local clock.

    The remote time is modelled as the local time plus a fixed skew, set by
    :meth:`mark_remote_time_micros`. A negative skew means the remote clock
    is behind the local one.
    """

    def __init__(self, local_clock: Clock) -> None:
        self._local_clock = local_clock
        self._skew_us = 0.0

    def mark_remote_time_micros(self, remote_time_us: TimeType) -> None:
        """Record what the remote clock reads right now."""
        local_time_us = float(self._local_clock.current_time_micros())
        self._skew_us = remote_time_us - local_time_us

    def current_time_micros(self) -> TimeType:
        time_us = float(self._local_clock.current_time_micros()) + self._skew_us
        return int(time_us)

    def current_time_millis(self) -> TimeType:
        return self.current_time_micros() // 1000

    def sleep_ms(self, milliseconds: TimeType) -> None:
        self._local_clock.sleep_ms(milliseconds)

    def sleep_us(self, microseconds: TimeType) -> None:
        self._local_clock.sleep_us(microseconds)