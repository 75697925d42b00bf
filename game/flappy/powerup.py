"""
Fruit power-up: score-threshold spawning and the invincibility window
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from .config import GameConfig, Viewport
from .entities import Circle, Fruit, RoundState
from .particles import ParticleSystem
from .utils import circle_collide, clamp

logger = logging.getLogger(__name__)

STRING_COLOR = (255, 255, 255, 89)
BERRY_LIGHT = (255, 154, 160, 255)
BERRY_DARK = (255, 62, 85, 255)
HIGHLIGHT = (255, 255, 255, 178)
LEAF = (88, 193, 105, 255)


class PowerUpPolicy:
    """
    At most one fruit exists at a time. It spawns once the score reaches
    `state.next_fruit_score` and no fruit is active and invincibility is off;
    the threshold advances by `fruit_score_step` at spawn time. Collecting
    the fruit makes the bird invincible for the next `invincible_pipes` passes.
    """

    def __init__(self, config: Optional[GameConfig] = None, viewport: Optional[Viewport] = None):
        self.config = config or GameConfig()
        self.viewport = viewport or Viewport()
        self.fruit: Optional[Fruit] = None

    def reset(self) -> None:
        self.fruit = None

    def maybe_spawn(self, state: RoundState, speed: float) -> Optional[Fruit]:
        if state.invincible or self.fruit is not None or state.score < state.next_fruit_score:
            return None
        vw, vh = self.viewport.width, self.viewport.height
        y = clamp(vh * 0.4, 140.0, max(140.0, vh - 200.0))
        self.fruit = Fruit(
            x=vw + self.config.fruit_spawn_offset,
            y=y,
            speed=speed,
            radius=self.config.fruit_radius,
        )
        state.next_fruit_score += self.config.fruit_score_step
        logger.info("Fruit spawned at score %d; next threshold %d", state.score, state.next_fruit_score)
        return self.fruit

    def update(self, dt: float, speed: float) -> None:
        fruit = self.fruit
        if fruit is None:
            return
        fruit.speed = speed
        fruit.x -= fruit.speed * dt
        fruit.bob_t += dt * 3
        if fruit.x + fruit.radius < -20:
            logger.debug("Fruit missed")
            self.fruit = None

    def try_collect(self, bounds: Circle, state: RoundState, particles: Optional[ParticleSystem] = None) -> bool:
        fruit = self.fruit
        if fruit is None:
            return False
        if not circle_collide(bounds.x, bounds.y, bounds.r, fruit.x, fruit.y, fruit.radius):
            return False
        state.invincible = True
        state.invincible_pipes_remaining = self.config.invincible_pipes
        if particles is not None:
            particles.explode(fruit.x, fruit.y)
        self.fruit = None
        logger.info("Fruit collected at score %d: invincible for %d pipes",
                    state.score, state.invincible_pipes_remaining)
        return True

    @staticmethod
    def on_pipe_passed(state: RoundState) -> None:
        """Count down the invincibility window; clears exactly at zero"""
        if not state.invincible or state.invincible_pipes_remaining <= 0:
            return
        state.invincible_pipes_remaining -= 1
        if state.invincible_pipes_remaining == 0:
            state.invincible = False
            logger.info("Invincibility expired at score %d", state.score)

    def draw(self, surface) -> None:
        f = self.fruit
        if f is None:
            return
        surface.line(f.x, 0, f.x, f.y - f.radius, STRING_COLOR, 1.5)
        bob_y = math.sin(f.bob_t) * 4
        cy = f.y + bob_y
        surface.radial_glow(f.x, cy, f.radius, [(0.0, BERRY_LIGHT), (1.0, BERRY_DARK)])
        surface.fill_circle(f.x - 5, cy - 6, 4, HIGHLIGHT)
        surface.fill_circle(f.x + 6, cy - f.radius - 2, 3, LEAF)
