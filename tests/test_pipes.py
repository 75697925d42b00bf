import random

import pytest

from game.flappy.config import GameConfig, Viewport
from game.flappy.entities import Circle, Pipe
from game.flappy.pipes import PipeManager, pipe_collides


@pytest.fixture
def manager():
    return PipeManager(GameConfig(), Viewport(480, 720), rng=random.Random(7))


def test_gap_shrinks_until_saturation(manager):
    assert manager.gap_for(0) == pytest.approx(200)
    assert manager.gap_for(10) == pytest.approx(176)
    assert manager.gap_for(25) == pytest.approx(140)
    assert manager.gap_for(30) == pytest.approx(140)


def test_spawned_gap_heights(manager):
    assert manager.spawn(0).gap_h == pytest.approx(200)
    assert manager.spawn(30).gap_h == pytest.approx(140)


def test_speed_scales_with_score_and_caps(manager):
    assert manager.speed_for(0) == 160
    assert manager.speed_for(10) == 220
    assert manager.speed_for(100) == 300


def test_spawns_on_interval(manager):
    manager.update(1.0, 0)
    assert manager.pipes == []
    manager.update(0.5, 0)
    assert len(manager.pipes) == 1
    assert manager.acc == 0.0
    pipe = manager.pipes[0]
    # spawned at width + 200, then moved by this frame's speed
    assert pipe.x == pytest.approx(680 - 160 * 0.5)
    assert pipe.width == 70
    assert not pipe.passed


def test_gap_centre_stays_inside_margins(manager):
    for score in range(0, 40):
        pipe = manager.spawn(score)
        assert 120 <= pipe.gap_y <= 720 - 120 - 120
        assert 140 <= pipe.gap_h <= 200


def test_all_pipes_share_current_speed(manager):
    manager.spawn(0)
    manager.update(0.0, 0)
    manager.spawn(0)
    manager.update(0.01, 10)
    assert [p.speed for p in manager.pipes] == [220, 220]


def test_offscreen_pipes_are_retired(manager):
    manager.pipes = [
        Pipe(x=-95, gap_y=300, gap_h=200, speed=0),
        Pipe(x=-85, gap_y=300, gap_h=200, speed=0),
        Pipe(x=200, gap_y=300, gap_h=200, speed=0),
    ]
    manager.update(0.0, 0)
    assert [p.x for p in manager.pipes] == [-85, 200]


def test_passed_latches_once_when_right_edge_is_strictly_left(manager):
    manager.pipes = [Pipe(x=30, gap_y=300, gap_h=200, speed=0)]
    assert manager.collect_passed(100) == 0
    assert not manager.pipes[0].passed
    assert manager.collect_passed(100.5) == 1
    assert manager.pipes[0].passed
    assert manager.collect_passed(500) == 0


def test_pipe_collision_regions():
    pipe = Pipe(x=100, gap_y=300, gap_h=200, speed=0)  # solid above 200 and below 400
    assert not pipe_collides(pipe, Circle(135, 300, 22), 720)
    assert pipe_collides(pipe, Circle(135, 215, 22), 720)
    assert pipe_collides(pipe, Circle(135, 385, 22), 720)
    # left of the pipe, level with the top block
    assert pipe_collides(pipe, Circle(80, 100, 22), 720)
    assert not pipe_collides(pipe, Circle(70, 100, 22), 720)


def test_manager_collides_with_any_pipe(manager):
    manager.pipes = [Pipe(x=400, gap_y=300, gap_h=200, speed=0), Pipe(x=100, gap_y=500, gap_h=140, speed=0)]
    assert manager.collides(Circle(135, 300, 22))
    assert not manager.collides(Circle(20, 300, 22))


def test_reset(manager):
    manager.update(2.0, 0)
    manager.reset()
    assert manager.pipes == []
    assert manager.acc == 0.0
