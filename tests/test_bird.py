import math

import pytest

from game.flappy.bird import Bird
from game.flappy.config import GameConfig
from game.flappy.entities import Circle
from game.flappy.particles import ParticleSystem


@pytest.mark.parametrize("dt", [0.0, 0.001, 0.016, 0.033])
def test_update_integrates_gravity(dt):
    bird = Bird(100, 300)
    bird.vy = -50.0
    bird.update(dt)
    assert bird.vy == pytest.approx(-50.0 + 900.0 * dt)


def test_flap_resets_velocity_regardless_of_fall_speed():
    bird = Bird(100, 300)
    for vy in (750.0, 0.0, -500.0):
        bird.vy = vy
        bird.flap()
        assert bird.vy == -280.0


def test_flap_sheds_feathers_and_starts_wing_timer():
    particles = ParticleSystem()
    bird = Bird(100, 300)
    bird.flap(particles)
    assert len(particles) == 10
    assert bird.wing_flap_time == pytest.approx(0.25)
    assert all(p.x == pytest.approx(90) and p.y == pytest.approx(308) for p in particles.particles)


def test_dead_bird_ignores_flap_and_update():
    bird = Bird(100, 300)
    bird.alive = False
    bird.vy = 12.0
    bird.flap()
    bird.update(0.03)
    assert bird.vy == 12.0
    assert bird.y == 300


def test_rotation_is_smoothed_and_bounded():
    bird = Bird(100, 300)
    bird.update(0.016)
    target = math.atan2(bird.vy, 240)
    assert 0 < bird.rotation < target

    for _ in range(200):
        bird.update(0.033)
    assert bird.rotation <= 1.0

    bird.flap()
    for _ in range(3):
        bird.update(0.016)
    assert -1.0 <= bird.rotation < 1.0


def test_trail_is_capped():
    bird = Bird(100, 300)
    for _ in range(30):
        bird.update(0.02)
    assert len(bird.trail) == 12
    # older points have faded more than the newest
    assert bird.trail[0].alpha < bird.trail[-1].alpha


def test_wing_timer_runs_down():
    bird = Bird(100, 300)
    bird.flap()
    bird.update(0.1)
    assert bird.wing_flap_time == pytest.approx(0.15)
    bird.update(0.5)
    assert bird.wing_flap_time == 0.0


def test_bounds():
    bird = Bird(120, 240, GameConfig(bird_radius=18))
    assert bird.get_bounds() == Circle(120.0, 240.0, 18.0)
