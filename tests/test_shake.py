import random

import pytest

from game.flappy.shake import ScreenShake


def test_trigger_never_lowers_magnitude():
    shake = ScreenShake(rng=random.Random(0))
    shake.trigger(0.35)
    shake.trigger(0.1)
    assert shake.magnitude == 0.35


def test_decays_and_snaps_to_zero():
    shake = ScreenShake(rng=random.Random(0))
    shake.trigger(0.1)
    shake.update(1 / 60)
    assert shake.magnitude == pytest.approx(0.092)
    assert abs(shake.offset_x) <= 0.1 * 8
    assert abs(shake.offset_y) <= 0.1 * 8

    for _ in range(200):
        shake.update(1 / 60)
    assert shake.magnitude == 0.0
    assert (shake.offset_x, shake.offset_y) == (0.0, 0.0)


def test_controller_shake_decays_in_every_state(game):
    game.shake.trigger(0.3)
    game.tick(1 / 60)
    assert game.state.value == "menu"
    assert game.shake.magnitude < 0.3
