"""
Pipe spawning, scrolling and collision queries
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from .config import GameConfig, Viewport
from .entities import Circle, Pipe
from .utils import circle_rect_collide, clamp, lerp, rand_range

logger = logging.getLogger(__name__)

PIPE_LIGHT = (106, 223, 146, 255)
PIPE_DARK = (63, 186, 108, 255)
PIPE_CAP = (47, 154, 88, 255)
BEVEL_LIGHT = (255, 255, 255, 41)
BEVEL_DARK = (0, 0, 0, 51)


def pipe_collides(pipe: Pipe, circle: Circle, floor_y: float) -> bool:
    """True if the circle touches the solid part above or below the gap"""
    if circle_rect_collide(circle.x, circle.y, circle.r, pipe.x, 0.0, pipe.width, pipe.top_height):
        return True
    return circle_rect_collide(
        circle.x, circle.y, circle.r, pipe.x, pipe.bottom_y, pipe.width, floor_y - pipe.bottom_y
    )


class PipeManager:
    """
    Spawns a pipe every `spawn_interval` seconds.

    Speed is recomputed from the score every frame and applied to every live
    pipe, so older pipes speed up together with new ones. Gap height shrinks
    linearly from max_gap to min_gap until the saturation score.
    """

    def __init__(self, config: Optional[GameConfig] = None, viewport: Optional[Viewport] = None, rng=None):
        self.config = config or GameConfig()
        self.viewport = viewport or Viewport()
        self.rng = rng if rng is not None else random
        self.pipes: List[Pipe] = []
        self.acc = 0.0
        self.speed = self.speed_for(0)

    def reset(self) -> None:
        self.pipes.clear()
        self.acc = 0.0
        self.speed = self.speed_for(0)

    def speed_for(self, score: int) -> float:
        cfg = self.config
        return cfg.base_speed + min(cfg.max_speed_bonus, score * cfg.speed_per_point)

    def gap_for(self, score: int) -> float:
        cfg = self.config
        t = clamp(score / cfg.gap_saturation_score, 0.0, 1.0)
        return clamp(lerp(cfg.max_gap, cfg.min_gap, t), cfg.min_gap, cfg.max_gap)

    @property
    def spawn_x(self) -> float:
        return self.viewport.width + self.config.spawn_offset

    @property
    def ground_y(self) -> float:
        return self.viewport.height - self.config.ground_height

    def spawn(self, score: int) -> Pipe:
        cfg = self.config
        gap = self.gap_for(score)
        lo = cfg.gap_margin
        hi = max(lo, self.ground_y - cfg.gap_margin)
        gap_y = rand_range(self.rng, lo, hi)
        pipe = Pipe(x=self.spawn_x, gap_y=gap_y, gap_h=gap, speed=self.speed, width=cfg.pipe_width)
        self.pipes.append(pipe)
        logger.debug("Pipe spawned at x=%.0f gap_y=%.1f gap_h=%.1f", pipe.x, gap_y, gap)
        return pipe

    def update(self, dt: float, score: int) -> None:
        self.speed = self.speed_for(score)
        self.acc += dt
        if self.acc >= self.config.spawn_interval:
            self.acc = 0.0
            self.spawn(score)
        for p in self.pipes:
            p.speed = self.speed
            p.x -= p.speed * dt
        limit = -self.config.offscreen_margin
        self.pipes = [p for p in self.pipes if p.right >= limit]

    def collides(self, circle: Circle) -> bool:
        floor_y = self.viewport.height
        return any(pipe_collides(p, circle, floor_y) for p in self.pipes)

    def collect_passed(self, x: float) -> int:
        """Latch every pipe whose right edge is now strictly left of x; returns how many"""
        count = 0
        for p in self.pipes:
            if not p.passed and p.right < x:
                p.passed = True
                count += 1
        return count

    def draw(self, surface) -> None:
        floor_y = self.viewport.height
        for p in self.pipes:
            top_h = p.top_height
            bot_y = p.bottom_y
            bot_h = floor_y - bot_y
            for y, h in ((0.0, top_h), (bot_y, bot_h)):
                surface.horizontal_gradient(p.x, y, p.width, h, PIPE_LIGHT, PIPE_DARK)
                surface.fill_rect(p.x + 4, y, 3, h, BEVEL_LIGHT)
                surface.fill_rect(p.x + p.width - 5, y, 3, h, BEVEL_DARK)
            surface.fill_rect(p.x - 6, top_h - 20, p.width + 12, 20, PIPE_CAP)
            surface.fill_rect(p.x - 6, bot_y, p.width + 12, 20, PIPE_CAP)
