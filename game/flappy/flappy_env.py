"""
FlappyEnv - the Flappy Luxe game exposed as a Gymnasium environment
--------------------------------------------------------------------
- Wraps GameController; one env step == one fixed-dt frame
- Discrete action space: 0 glide, 1 flap
- Vector observation: bird state + next pipe gap + power-up state
- Reward: +1 per pipe passed, small survival bonus, penalty on death
- Human rendering through the same arcade window used for play

Install:
    pip install gymnasium arcade numpy

Quick test:
    python -m game.flappy.flappy_env
"""

from __future__ import annotations

from typing import Optional, Dict, Any

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import GameConfig
from .controller import GameController
from .entities import GameState
from .storage import MemoryPreferenceStore
from .utils import clamp, seed_everything


class FlappyEnv(gym.Env):
    """Flappy Luxe as a single-agent RL environment"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 30}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 480,
        height: int = 720,
        dt: float = 1 / 30,
        max_steps: int = 3000,
        reward_pipe: float = 1.0,
        reward_alive: float = 0.01,
        reward_death: float = 1.0,
        game_config: Optional[dict] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode

        self.width = width
        self.height = height
        self.max_steps = max_steps
        self.reward_pipe = reward_pipe
        self.reward_alive = reward_alive
        self.reward_death = reward_death
        self.config = GameConfig.from_dict(game_config or {})
        # steps larger than the controller's clamp would silently slow the game down
        self.dt = min(dt, self.config.max_dt)

        self.action_space = spaces.Discrete(2)

        # bird y, bird vy, rotation, next pipe dx, gap top dy, gap bottom dy,
        # invincible flag, fruit dx
        self.observation_space = spaces.Box(low=-1.0, high=1.0, shape=(8,), dtype=np.float32)

        self.store = MemoryPreferenceStore()
        self.game: GameController = None  # type: ignore
        self._window = None
        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        game_seed = seed if seed is not None else int(self.np_random.integers(0, 2**31 - 1))
        self.game = GameController(
            width=self.width,
            height=self.height,
            config=self.config,
            store=self.store,
            seed=game_seed,
        )
        self.game.start()
        self._step_count = 0

        if self._window is not None:
            self._window.controller = self.game

        return self._get_obs(), self._get_info()

    def step(self, action):
        assert self.game is not None, "Call reset() before step()"
        score_before = self.game.score

        if int(action) == 1:
            self.game.flap()
        self.game.tick(self.dt)

        passed = self.game.score - score_before
        terminated = self.game.state == GameState.GAMEOVER
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        reward = self.reward_pipe * passed + self.reward_alive
        if terminated:
            reward -= self.reward_death

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, float(reward), terminated, truncated, info

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _next_pipe(self):
        bird = self.game.bird
        ahead = [p for p in self.game.pipes.pipes if p.right >= bird.x - bird.radius]
        return min(ahead, key=lambda p: p.x) if ahead else None

    def _get_obs(self) -> np.ndarray:
        g = self.game
        vw, vh = g.viewport.width, g.viewport.height
        bird = g.bird

        obs_parts = [
            clamp(bird.y / vh * 2 - 1, -1, 1),
            clamp(bird.vy / 600.0, -1, 1),
            clamp(bird.rotation / self.config.max_rotation, -1, 1),
        ]

        pipe = self._next_pipe()
        if pipe is not None:
            obs_parts += [
                clamp((pipe.x - bird.x) / vw, -1, 1),
                clamp((pipe.top_height - bird.y) / vh, -1, 1),
                clamp((pipe.bottom_y - bird.y) / vh, -1, 1),
            ]
        else:
            # no pipe yet: pretend the gap is far ahead and centred on the bird
            half = self.config.max_gap * 0.5 / vh
            obs_parts += [1.0, -half, half]

        obs_parts.append(1.0 if g.invincible else -1.0)

        fruit = g.fruit
        obs_parts.append(clamp((fruit.x - bird.x) / vw, -1, 1) if fruit is not None else 1.0)

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "best": self.game.best,
            "invincible": self.game.invincible,
            "num_pipes": len(self.game.pipes.pipes),
            "num_particles": len(self.game.particles),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None or self.game is None:
            return None

        if self._window is None:
            from .window import FlappyWindow

            self._window = FlappyWindow(
                self.game,
                title="FlappyEnv - Arcade",
                interactive=False,
                visible=self.render_mode == "human",
            )

        self._window.dispatch_events()
        self._window.on_draw()

        if self.render_mode == "rgb_array":
            import arcade

            image = arcade.get_image(0, 0, self._window.width, self._window.height)
            return np.asarray(image.convert("RGB"))

        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, flap_prob: float = 0.08, seed: int = 42):
    """Run one episode with a random flapping policy"""
    env = FlappyEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)
    rng = np.random.default_rng(seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = int(rng.random() < flap_prob)
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        if render:
            import time
            time.sleep(env.dt)

    print(f"Random episode return: {total:.2f}  score: {info['score']}  steps: {info['step']}")
    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
