import time

import pytest

from sstest.timer import Stopwatch


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_fresh_stopwatch_reports_zero(clock):
    watch = Stopwatch(clock)
    clock.now = 7.0
    assert not watch.running
    assert watch.time() == 0.0
    assert watch.split() == 0.0
    assert watch.lap() == 0.0


def test_time_while_running(clock):
    watch = Stopwatch(clock)
    clock.now = 1.0
    watch.start()
    assert watch.running
    clock.now = 4.0
    assert watch.time() == 3.0


def test_lap_advances_lap_point(clock):
    watch = Stopwatch(clock)
    watch.start()
    clock.now = 2.0
    assert watch.lap() == 2.0
    clock.now = 5.0
    assert watch.lap() == 3.0
    assert watch.time() == 5.0


def test_split_does_not_advance(clock):
    watch = Stopwatch(clock)
    watch.start()
    clock.now = 2.0
    assert watch.split() == 2.0
    clock.now = 3.0
    assert watch.split() == 3.0
    assert watch.lap() == 3.0
    assert watch.split() == 0.0


def test_stop_freezes_time(clock):
    watch = Stopwatch(clock)
    watch.start()
    clock.now = 2.0
    watch.lap()
    clock.now = 6.0
    assert watch.stop() == 6.0
    assert not watch.running
    clock.now = 100.0
    assert watch.time() == 6.0
    assert watch.split() == 4.0
    assert watch.lap() == 4.0


def test_stop_twice_keeps_first_stop(clock):
    watch = Stopwatch(clock)
    watch.start()
    clock.now = 3.0
    first = watch.stop()
    clock.now = 9.0
    assert watch.stop() == first


def test_start_after_stop_restarts(clock):
    watch = Stopwatch(clock)
    watch.start()
    clock.now = 5.0
    watch.stop()
    watch.start()
    clock.now = 6.0
    assert watch.time() == 1.0


def test_reset_returns_to_idle(clock):
    watch = Stopwatch(clock)
    watch.start()
    clock.now = 8.0
    watch.reset()
    assert not watch.running
    clock.now = 20.0
    assert watch.time() == 0.0


def test_real_clock_is_monotonic():
    watch = Stopwatch()
    watch.start()
    time.sleep(0.01)
    first = watch.time()
    second = watch.time()
    assert first > 0.0
    assert second >= first
    total = watch.stop()
    assert total >= second
    assert watch.time() == total