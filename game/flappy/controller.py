"""
GameController - owns every piece of game state and advances it one frame
at a time.

The controller never schedules itself: a host (the arcade window, the gym
environment, or a test) calls tick(dt) once per frame and draw(surface)
whenever it wants a picture.

State machine:
    menu -> running            start()
    running <-> paused         toggle_pause()
    running -> gameover        fatal collision
    gameover -> running        restart()
"""

from __future__ import annotations

import logging
import math
import random
from typing import Optional

from .background import Background
from .bird import Bird
from .config import GameConfig, Viewport
from .entities import BirdColor, GameState, RoundState
from .particles import ParticleSystem
from .pipes import PipeManager
from .powerup import PowerUpPolicy
from .shake import ScreenShake
from .storage import MemoryPreferenceStore, PreferenceStore

logger = logging.getLogger(__name__)

AURA_COLOR = (123, 220, 255)
SCORE_SHADOW = (0, 0, 0, 89)
SCORE_COLOR = (255, 255, 255, 255)
BEST_COLOR = (255, 255, 255, 191)


class GameController:
    """Single-threaded game session: one tick(dt) per displayed frame"""

    def __init__(
        self,
        width: float = 480,
        height: float = 720,
        config: Optional[GameConfig] = None,
        store: Optional[PreferenceStore] = None,
        seed: Optional[int] = None,
    ):
        self.config = config or GameConfig()
        self.viewport = Viewport(width, height)
        self.rng = random.Random(seed)
        self.store: PreferenceStore = store if store is not None else MemoryPreferenceStore()

        # Read persisted preferences once
        self.round = RoundState(best=self.store.load_best(), next_fruit_score=self.config.first_fruit_score)
        self.color = self.store.load_color()

        self.state = GameState.MENU
        self.background = Background(self.config, self.viewport, self.rng)
        self.particles = ParticleSystem(self.config.particle_gravity, self.rng)
        self.shake = ScreenShake(
            decay=self.config.shake_decay,
            scale=self.config.shake_scale,
            cutoff=self.config.shake_cutoff,
            rng=self.rng,
        )
        self.pipes = PipeManager(self.config, self.viewport, self.rng)
        self.powerup = PowerUpPolicy(self.config, self.viewport)
        self.bird = self._new_bird()

    # ----------------------------
    # Read-only views
    # ----------------------------

    @property
    def score(self) -> int:
        return self.round.score

    @property
    def best(self) -> int:
        return self.round.best

    @property
    def invincible(self) -> bool:
        return self.round.invincible

    @property
    def fruit(self):
        return self.powerup.fruit

    @property
    def ground_y(self) -> float:
        return self.viewport.height - self.config.ground_height

    # ----------------------------
    # Input intents
    # ----------------------------

    def start(self) -> None:
        """Begin a fresh round from any state"""
        self.round.reset(self.config.first_fruit_score)
        self.bird = self._new_bird()
        self.pipes.reset()
        self.powerup.reset()
        self.state = GameState.RUNNING
        logger.info("Round started (best %d)", self.round.best)

    def restart(self) -> None:
        self.start()

    def flap(self) -> None:
        """Flap intent: starts from the menu, restarts after game over, ignored while paused"""
        if self.state == GameState.MENU:
            self.start()
            return
        if self.state == GameState.GAMEOVER:
            self.restart()
            return
        if self.state != GameState.RUNNING:
            return
        self.bird.flap(self.particles)
        self.shake.trigger(self.config.flap_shake)

    def toggle_pause(self) -> None:
        if self.state == GameState.RUNNING:
            self.state = GameState.PAUSED
        elif self.state == GameState.PAUSED:
            self.state = GameState.RUNNING
        else:
            return
        logger.info("Game %s", "paused" if self.state == GameState.PAUSED else "resumed")

    def select_color(self, color) -> None:
        color = BirdColor.parse(color)
        self.color = color
        self.bird.color = color
        self.store.save_color(color)

    def resize(self, width: float, height: float) -> None:
        self.viewport.resize(width, height)

    # ----------------------------
    # Frame step
    # ----------------------------

    def tick(self, dt: float) -> None:
        """Advance one frame; dt is clamped to [0, max_dt]"""
        dt = min(max(float(dt), 0.0), self.config.max_dt)
        self.update(dt)

    def update(self, dt: float) -> None:
        self.background.update(dt, self._background_speed())

        if self.state == GameState.RUNNING:
            self.bird.update(dt)
            self.pipes.update(dt, self.round.score)
            self.particles.update(dt)

            speed = self.pipes.speed
            self.powerup.maybe_spawn(self.round, speed)
            self.powerup.update(dt, speed)
            self.powerup.try_collect(self.bird.get_bounds(), self.round, self.particles)

            self._score_passed_pipes()
            if self._is_fatal():
                self._game_over()
        elif self.state in (GameState.PAUSED, GameState.GAMEOVER):
            self.particles.update(dt * self.config.idle_particle_rate)

        self.shake.update(dt)

    def _score_passed_pipes(self) -> None:
        for _ in range(self.pipes.collect_passed(self.bird.x)):
            self.round.score += 1
            self.particles.emit_spark(self.bird.x, self.bird.y)
            if self.round.score > self.round.best:
                self.round.best = self.round.score
                self.store.save_best(self.round.best)
            self.powerup.on_pipe_passed(self.round)

    def _is_fatal(self) -> bool:
        if self.round.invincible:
            return False
        bounds = self.bird.get_bounds()
        if bounds.y + bounds.r >= self.ground_y:
            return True
        return self.pipes.collides(bounds)

    def _game_over(self) -> None:
        self.bird.alive = False
        self.state = GameState.GAMEOVER
        self.particles.explode(self.bird.x, self.bird.y)
        self.shake.trigger(self.config.death_shake)
        logger.info("Game over at score %d (best %d)", self.round.score, self.round.best)

    def _background_speed(self) -> float:
        cfg = self.config
        return cfg.background_base_speed + min(cfg.max_speed_bonus, self.round.score * cfg.speed_per_point)

    def _new_bird(self) -> Bird:
        return Bird(self.viewport.width * 0.3, self.viewport.height * 0.45, self.config, self.color)

    # ----------------------------
    # Rendering
    # ----------------------------

    def draw(self, surface) -> None:
        """Back-to-front: world under the shake offset, then the HUD"""
        surface.set_offset(self.shake.offset_x, self.shake.offset_y)
        self.background.draw(surface)
        self.pipes.draw(surface)
        self.powerup.draw(surface)
        self.particles.draw(surface)
        if self.round.invincible:
            pulse = (math.sin(self.background.t * 10) * 0.5 + 0.5) * 0.4 + 0.6
            surface.stroke_circle(
                self.bird.x, self.bird.y, self.bird.radius + 10,
                (*AURA_COLOR, int(255 * 0.6 * pulse)), 6,
            )
        self.bird.draw(surface)
        surface.set_offset(0.0, 0.0)
        self._draw_hud(surface)

    def _draw_hud(self, surface) -> None:
        cx = self.viewport.width * 0.5
        text = str(self.round.score)
        surface.text(text, cx + 2, 26, SCORE_SHADOW, 42, bold=True)
        surface.text(text, cx, 24, SCORE_COLOR, 42, bold=True)
        surface.text(f"Best {self.round.best}", cx, 84, BEST_COLOR, 14, bold=True)
