"""Flappy Luxe - side-scrolling flap-through-the-gaps arcade game"""

from .config import GameConfig, Viewport
from .controller import GameController
from .entities import BirdColor, GameState
from .flappy_env import FlappyEnv, run_random_episode

__all__ = [
    'GameConfig', 'Viewport', 'GameController', 'BirdColor', 'GameState',
    'FlappyEnv', 'run_random_episode',
]
