"""
Tunable constants for the simulation and the viewport they run in
"""

from dataclasses import dataclass, fields

MIN_VIEWPORT_WIDTH = 360.0
MIN_VIEWPORT_HEIGHT = 600.0


@dataclass(frozen=True)
class GameConfig:
    """All gameplay tunables. Build from a plain dict with GameConfig(**GAME_CONFIG)."""

    # Bird
    gravity: float = 900.0  # px/s^2
    flap_velocity: float = -280.0  # px/s
    bird_radius: float = 22.0
    forward_speed: float = 240.0  # reference speed for the tilt angle
    rotation_smoothing: float = 8.0
    max_rotation: float = 1.0  # radians
    trail_every: float = 0.02  # seconds
    trail_length: int = 12
    wing_flap_time: float = 0.25
    flap_feathers: int = 10

    # Ground
    ground_height: float = 120.0

    # Pipes
    pipe_width: float = 70.0
    max_gap: float = 200.0
    min_gap: float = 140.0
    gap_saturation_score: int = 25
    gap_margin: float = 120.0
    spawn_interval: float = 1.45  # seconds
    spawn_offset: float = 200.0  # px beyond the right edge
    base_speed: float = 160.0  # px/s
    background_base_speed: float = 170.0  # drives cloud wind only
    speed_per_point: float = 6.0
    max_speed_bonus: float = 140.0
    offscreen_margin: float = 20.0

    # Power-up
    first_fruit_score: int = 5
    fruit_score_step: int = 50
    invincible_pipes: int = 10
    fruit_radius: float = 14.0
    fruit_spawn_offset: float = 320.0

    # Particles
    particle_gravity: float = 300.0  # px/s^2
    idle_particle_rate: float = 0.5  # time scale while paused / game over

    # Frame timing
    max_dt: float = 0.033

    # Screen shake
    shake_decay: float = 0.92  # per 1/60 s
    shake_scale: float = 8.0  # px per unit of magnitude
    shake_cutoff: float = 0.02
    flap_shake: float = 0.1
    death_shake: float = 0.35

    # Environment
    day_length: float = 60.0  # seconds for a full day -> night -> day cycle

    def __post_init__(self):
        positive = (
            "gravity", "bird_radius", "forward_speed", "pipe_width", "max_gap", "min_gap",
            "spawn_interval", "base_speed", "fruit_radius", "max_dt", "day_length",
            "trail_every", "ground_height",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.min_gap > self.max_gap:
            raise ValueError(f"min_gap ({self.min_gap}) exceeds max_gap ({self.max_gap})")
        if self.gap_saturation_score <= 0:
            raise ValueError("gap_saturation_score must be positive")
        for name in ("first_fruit_score", "fruit_score_step", "invincible_pipes", "trail_length"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)!r}")
        if not 0.0 < self.shake_decay <= 1.0:
            raise ValueError("shake_decay must be in (0, 1]")

    @classmethod
    def from_dict(cls, values: dict) -> "GameConfig":
        """Build from a mapping, rejecting unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**values)


@dataclass
class Viewport:
    """Playable area in px; y grows downwards"""
    width: float = 480.0
    height: float = 720.0

    def __post_init__(self):
        self.resize(self.width, self.height)

    def resize(self, width: float, height: float) -> None:
        """Clamp to the minimum playable size instead of failing"""
        self.width = max(MIN_VIEWPORT_WIDTH, float(width))
        self.height = max(MIN_VIEWPORT_HEIGHT, float(height))
