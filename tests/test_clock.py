import pytest

from game.flappy.clock import FrameClock


def test_first_delta_is_zero():
    clock = FrameClock()
    assert clock.delta(12.5) == 0.0


def test_delta_is_clamped():
    clock = FrameClock(max_dt=0.033)
    clock.delta(1.0)
    assert clock.delta(1.01) == pytest.approx(0.01)
    # a stalled tab comes back with one capped step
    assert clock.delta(3.0) == 0.033
    # clocks that run backwards never yield negative time
    assert clock.delta(2.0) == 0.0


def test_reset_forgets_last_timestamp():
    clock = FrameClock()
    clock.delta(1.0)
    clock.reset()
    assert clock.delta(5.0) == 0.0
