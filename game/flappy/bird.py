"""
The player-controlled bird: gravity, flap impulses, tilt and trail
"""

from __future__ import annotations

import math
from typing import List, Optional

from .config import GameConfig
from .entities import BirdColor, Circle, TrailPoint
from .particles import ParticleSystem
from .utils import clamp, lerp

TRAIL_COLOR = (123, 220, 255)
BEAK_COLOR = (255, 138, 61, 255)


def _ellipse(cx: float, cy: float, rx: float, ry: float, angle: float, steps: int = 20):
    """Polygon approximation of an ellipse rotated by `angle` around its centre"""
    ca, sa = math.cos(angle), math.sin(angle)
    pts = []
    for i in range(steps):
        t = (i / steps) * math.tau
        ex, ey = math.cos(t) * rx, math.sin(t) * ry
        pts.append((cx + ex * ca - ey * sa, cy + ex * sa + ey * ca))
    return pts


class Bird:
    """Falls under gravity; flap() resets vertical velocity to a fixed upward value"""

    def __init__(
        self,
        x: float,
        y: float,
        config: Optional[GameConfig] = None,
        color: BirdColor = BirdColor.RED,
    ):
        self.config = config or GameConfig()
        self.x = float(x)
        self.y = float(y)
        self.vx = 0.0
        self.vy = 0.0
        self.rotation = 0.0
        self.radius = self.config.bird_radius
        self.alive = True
        self.color = color

        self.trail: List[TrailPoint] = []
        self._trail_acc = 0.0

        # wing animation
        self.wing_flap_time = 0.0  # seconds left of the strong flap
        self.wing_idle_phase = 0.0

    def flap(self, particles: Optional[ParticleSystem] = None) -> None:
        if not self.alive:
            return
        self.vy = self.config.flap_velocity
        if particles is not None:
            particles.emit_feathers(self.x - 10, self.y + 8, self.config.flap_feathers)
        self.wing_flap_time = self.config.wing_flap_time

    def update(self, dt: float) -> None:
        if not self.alive:
            return
        cfg = self.config
        self.vy += cfg.gravity * dt
        self.y += self.vy * dt
        self.x += self.vx * dt
        target = math.atan2(self.vy, cfg.forward_speed)
        self.rotation = clamp(
            lerp(self.rotation, target, dt * cfg.rotation_smoothing),
            -cfg.max_rotation,
            cfg.max_rotation,
        )

        self._trail_acc += dt
        if self._trail_acc >= cfg.trail_every:
            self._trail_acc = 0.0
            self.trail.append(TrailPoint(self.x, self.y, self.radius * 0.85))
            if len(self.trail) > cfg.trail_length:
                self.trail.pop(0)
        for t in self.trail:
            t.alpha *= 0.92
            t.r *= 0.985

        if self.wing_flap_time > 0:
            self.wing_flap_time = max(0.0, self.wing_flap_time - dt)
        self.wing_idle_phase += dt * 6

    def get_bounds(self) -> Circle:
        return Circle(self.x, self.y, self.radius)

    # ----------------------------
    # Rendering
    # ----------------------------

    def _wing_angle(self) -> float:
        if self.wing_flap_time > 0:
            phase = 1 - self.wing_flap_time / self.config.wing_flap_time
            return math.sin(phase * 26) * 0.9
        return math.sin(self.wing_idle_phase * 8) * 0.25

    def _local(self, lx: float, ly: float):
        """Bird-local offset -> world point, honouring the current tilt"""
        ca, sa = math.cos(self.rotation), math.sin(self.rotation)
        return self.x + lx * ca - ly * sa, self.y + lx * sa + ly * ca

    def draw(self, surface) -> None:
        for t in self.trail:
            surface.fill_circle(t.x - 10, t.y + 6, t.r, (*TRAIL_COLOR, int(255 * t.alpha)))

        pal = self.color.palette
        rot = self.rotation

        # body: dark base with a lighter upper-left sheen
        surface.fill_polygon(_ellipse(self.x, self.y, 26, 20, rot), pal.body_end)
        sx, sy = self._local(-5, -5)
        surface.fill_polygon(_ellipse(sx, sy, 17, 12, rot), pal.body_start)

        wing = self._wing_angle()
        lx, ly = self._local(-8, 0)
        surface.fill_polygon(_ellipse(lx, ly, 8, 6, rot - 0.6 + wing * 0.5), pal.wing_end)
        rx, ry = self._local(-2, 2)
        surface.fill_polygon(_ellipse(rx, ry, 7, 5, rot - 0.2 + wing * 0.4), pal.wing_start)

        surface.fill_polygon([self._local(24, -5), self._local(38, 0), self._local(24, 5)], BEAK_COLOR)

        ex, ey = self._local(8, -8)
        surface.fill_circle(ex, ey, 7, pal.eye_white)
        px, py = self._local(10, -8)
        surface.fill_circle(px, py, 3.2, pal.pupil)
