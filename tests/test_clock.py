import time

from symposium.clock import Clock


class _Ticking:
    """Fake nanosecond source advancing one millisecond per reading."""

    def __init__(self):
        self.value = 0
        self.calls = 0

    def __call__(self):
        self.calls += 1
        self.value += 1_000_000
        return self.value


def test_readings_never_decrease():
    clock = Clock(source=_Ticking(), pause=0)
    readings = [clock.now() for _ in range(20)]
    assert readings == sorted(readings)
    assert readings[-1] > readings[0]


def test_real_clock_starts_near_zero():
    clock = Clock()
    assert 0 <= clock.now() < 50


def test_sleep_refused_when_already_stopped():
    source = _Ticking()
    clock = Clock(source=source, pause=0)
    assert clock.sleep(1000, lambda: True) is False
    assert source.calls == 0


def test_sleep_waits_for_duration_with_fake_source():
    clock = Clock(source=_Ticking(), pause=0)
    begin = clock.now()
    assert clock.sleep(5, lambda: False) is True
    assert clock.now() - begin >= 5


def test_sleep_waits_real_time():
    clock = Clock()
    before = time.monotonic()
    assert clock.sleep(20, lambda: False) is True
    assert time.monotonic() - before >= 0.019


def test_sleep_stops_early_when_condition_turns_true():
    checks = []

    def stopped():
        checks.append(None)
        return len(checks) > 3

    clock = Clock(source=_Ticking(), pause=0)
    begin = clock.now()
    assert clock.sleep(10_000, stopped) is True
    assert clock.now() - begin < 100
    assert len(checks) == 4