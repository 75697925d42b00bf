import pytest

from game.flappy.config import GameConfig, Viewport
from game.flappy.entities import Circle, RoundState
from game.flappy.particles import ParticleSystem
from game.flappy.powerup import PowerUpPolicy


@pytest.fixture
def policy():
    return PowerUpPolicy(GameConfig(), Viewport(480, 720))


def test_spawns_once_at_threshold(policy):
    state = RoundState(score=5, next_fruit_score=5)
    fruit = policy.maybe_spawn(state, 190.0)
    assert fruit is not None
    assert state.next_fruit_score == 55
    assert fruit.x == pytest.approx(480 + 320)
    assert fruit.y == pytest.approx(288)
    assert fruit.radius == 14

    assert policy.maybe_spawn(state, 190.0) is None
    state.score = 60
    assert policy.maybe_spawn(state, 190.0) is None
    assert policy.fruit is fruit


def test_no_spawn_below_threshold_or_while_invincible(policy):
    assert policy.maybe_spawn(RoundState(score=4, next_fruit_score=5), 160) is None
    state = RoundState(score=5, next_fruit_score=5, invincible=True, invincible_pipes_remaining=3)
    assert policy.maybe_spawn(state, 160) is None
    assert state.next_fruit_score == 5


def test_fruit_moves_at_given_speed_and_bobs(policy):
    fruit = policy.maybe_spawn(RoundState(score=5, next_fruit_score=5), 160)
    policy.update(0.5, 200.0)
    assert fruit.x == pytest.approx(800 - 100)
    assert fruit.speed == 200.0
    assert fruit.bob_t == pytest.approx(1.5)
    assert fruit.y == pytest.approx(288)


def test_missed_fruit_is_discarded(policy):
    state = RoundState(score=5, next_fruit_score=5)
    fruit = policy.maybe_spawn(state, 160)
    fruit.x = -40
    policy.update(0.01, 160)
    assert policy.fruit is None
    assert not state.invincible
    assert state.next_fruit_score == 55


def test_collection_grants_invincibility(policy):
    state = RoundState(score=5, next_fruit_score=5)
    particles = ParticleSystem()
    fruit = policy.maybe_spawn(state, 160)
    assert not policy.try_collect(Circle(100, 100, 22), state, particles)
    assert policy.try_collect(Circle(fruit.x - 30, fruit.y, 22), state, particles)
    assert state.invincible
    assert state.invincible_pipes_remaining == 10
    assert policy.fruit is None
    assert len(particles) == 40


def test_invincibility_counts_down_per_pass():
    state = RoundState(invincible=True, invincible_pipes_remaining=10)
    for remaining in range(9, 0, -1):
        PowerUpPolicy.on_pipe_passed(state)
        assert state.invincible_pipes_remaining == remaining
        assert state.invincible
    PowerUpPolicy.on_pipe_passed(state)
    assert state.invincible_pipes_remaining == 0
    assert not state.invincible
    PowerUpPolicy.on_pipe_passed(state)
    assert state.invincible_pipes_remaining == 0
