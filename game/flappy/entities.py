"""
Game entity dataclasses and enumerations
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .utils import hex_color

Color = Tuple[int, int, int, int]


class GameState(str, Enum):
    """Top-level game state; simulation only advances while RUNNING"""
    MENU = "menu"
    RUNNING = "running"
    PAUSED = "paused"
    GAMEOVER = "gameover"


@dataclass(frozen=True)
class Circle:
    """Collision circle"""
    x: float
    y: float
    r: float


@dataclass
class Particle:
    """Decaying visual-feedback particle"""
    x: float
    y: float
    vx: float
    vy: float
    life: float  # seconds
    radius: float
    color: Color
    age: float = 0.0

    @property
    def alpha(self) -> float:
        """Linear fade from 1 at birth to 0 at end of life"""
        if self.life <= 0:
            return 0.0
        return max(0.0, 1.0 - self.age / self.life)


@dataclass
class TrailPoint:
    """Fading afterimage behind the bird"""
    x: float
    y: float
    r: float
    alpha: float = 0.22


@dataclass
class Pipe:
    """Obstacle pair with a vertical gap centred on gap_y"""
    x: float
    gap_y: float
    gap_h: float
    speed: float
    width: float = 70.0
    passed: bool = False

    @property
    def top_height(self) -> float:
        return self.gap_y - self.gap_h * 0.5

    @property
    def bottom_y(self) -> float:
        return self.gap_y + self.gap_h * 0.5

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class Fruit:
    """Collectible power-up granting invincibility"""
    x: float
    y: float
    speed: float
    radius: float = 14.0
    bob_t: float = 0.0  # visual only


@dataclass
class RoundState:
    """Score and power-up bookkeeping for one round"""
    score: int = 0
    best: int = 0
    invincible: bool = False
    invincible_pipes_remaining: int = 0
    next_fruit_score: int = 5

    def reset(self, first_threshold: int) -> None:
        """Start a fresh round; best score survives"""
        self.score = 0
        self.invincible = False
        self.invincible_pipes_remaining = 0
        self.next_fruit_score = first_threshold


@dataclass(frozen=True)
class BirdPalette:
    body_start: Color
    body_end: Color
    wing_start: Color
    wing_end: Color
    eye_white: Color
    pupil: Color


class BirdColor(str, Enum):
    RED = "red"
    WHITE = "white"
    BLACK = "black"
    PURPLE = "purple"
    PINK = "pink"

    @classmethod
    def parse(cls, value: str) -> "BirdColor":
        """Validate a color identifier, raising ValueError for unknown names"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown bird color {value!r}; expected one of: {names}") from None

    @property
    def palette(self) -> BirdPalette:
        return PALETTES[self]


PALETTES = {
    BirdColor.RED: BirdPalette(
        hex_color("#ffb07a"), hex_color("#ff6a42"), hex_color("#ffd1b0"),
        hex_color("#ff9a6b"), hex_color("#ffffff"), hex_color("#111111"),
    ),
    BirdColor.WHITE: BirdPalette(
        hex_color("#ffffff"), hex_color("#e9eef5"), hex_color("#ffffff"),
        hex_color("#dfe6f0"), hex_color("#ffffff"), hex_color("#111111"),
    ),
    BirdColor.BLACK: BirdPalette(
        hex_color("#3b3b3b"), hex_color("#0f0f0f"), hex_color("#4a4a4a"),
        hex_color("#1a1a1a"), hex_color("#e9eef5"), hex_color("#000000"),
    ),
    BirdColor.PURPLE: BirdPalette(
        hex_color("#c1a2ff"), hex_color("#7a50ff"), hex_color("#e0d4ff"),
        hex_color("#a385ff"), hex_color("#ffffff"), hex_color("#111111"),
    ),
    BirdColor.PINK: BirdPalette(
        hex_color("#ffb1df"), hex_color("#ff5bb5"), hex_color("#ffd1ec"),
        hex_color("#ff93cd"), hex_color("#ffffff"), hex_color("#111111"),
    ),
}
