import random

import pytest

from game.flappy.background import Background
from game.flappy.config import GameConfig, Viewport


@pytest.fixture
def background():
    return Background(GameConfig(), Viewport(480, 720), random.Random(3))


def test_starts_at_noon(background):
    assert background.day_factor == pytest.approx(1.0)
    assert background.night_factor == pytest.approx(0.0)


def test_night_at_half_cycle(background):
    for _ in range(1000):
        background.update(0.03, 0)
    assert background.cycle_time == pytest.approx(30.0)
    assert background.day_factor == pytest.approx(0.0, abs=1e-9)
    assert background.night_factor == pytest.approx(0.5)


def test_cycle_wraps(background):
    for _ in range(2100):
        background.update(0.03, 0)
    assert background.cycle_time < background.config.day_length
    assert background.t == pytest.approx(63.0)


def test_clouds_wrap_to_the_right(background):
    cloud = background.clouds[0]
    cloud["x"] = -259
    background.update(0.03, 300)
    assert cloud["x"] > background.viewport.width


def test_stars_only_at_night(background, surface):
    background.draw(surface)
    day_circles = surface.names.count("fill_circle")

    for _ in range(1000):
        background.update(0.03, 0)
    surface.calls.clear()
    background.draw(surface)
    assert surface.names.count("fill_circle") == day_circles + len(background.stars)
