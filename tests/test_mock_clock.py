import pytest

from tvsc.mock_clock import Clockable, MockClock


class RecordingClockable(Clockable):
    def __init__(self, clock):
        super().__init__(clock)
        self.updates = []

    def update(self, current_time_us):
        self.updates.append(current_time_us)


def test_returns_set_time():
    clock = MockClock()
    clock.set_current_time_millis(42)
    assert clock.current_time_millis() == 42


def test_sleep_ms_updates_current_time():
    clock = MockClock()
    clock.set_current_time_millis(42)
    assert clock.current_time_millis() == 42
    clock.sleep_ms(8)
    assert clock.current_time_millis() == 50


def test_sleep_us_updates_current_time():
    clock = MockClock()
    clock.set_current_time_millis(42)
    assert clock.current_time_millis() == 42
    clock.sleep_us(8000)
    assert clock.current_time_millis() == 50


def test_sleep_us_updates_current_time_with_round_off():
    clock = MockClock()
    clock.set_current_time_millis(42)
    assert clock.current_time_millis() == 42
    clock.sleep_us(8124)
    assert clock.current_time_millis() == 50


def test_starts_at_zero():
    clock = MockClock()
    assert clock.current_time_micros() == 0
    assert clock.current_time_millis() == 0


def test_set_micros_is_seen_in_millis():
    clock = MockClock()
    clock.set_current_time_micros(42999)
    assert clock.current_time_micros() == 42999
    assert clock.current_time_millis() == 42


def test_increment_defaults_to_one():
    clock = MockClock()
    clock.increment_current_time_millis()
    assert clock.current_time_micros() == 1000
    clock.increment_current_time_micros()
    assert clock.current_time_micros() == 1001


def test_increment_by_amount():
    clock = MockClock()
    clock.increment_current_time_millis(3)
    clock.increment_current_time_micros(7)
    assert clock.current_time_micros() == 3007


def test_clockable_is_updated_on_every_change():
    clock = MockClock()
    clockable = RecordingClockable(clock)
    clock.set_current_time_millis(2)
    clock.increment_current_time_micros(5)
    clock.sleep_ms(1)
    clock.sleep_us(10)
    assert clockable.updates == [2000, 2005, 3005, 3015]
    assert clockable.clock is clock


def test_all_clockables_are_updated():
    clock = MockClock()
    first = RecordingClockable(clock)
    second = RecordingClockable(clock)
    clock.set_current_time_micros(100)
    assert first.updates == [100]
    assert second.updates == [100]


def test_clockable_requires_update():
    with pytest.raises(TypeError):
        Clockable(MockClock())