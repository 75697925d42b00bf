"""
Day-night sky, drifting clouds, parallax mountains and the ground band.
Purely visual; nothing here affects gameplay.
"""

from __future__ import annotations

import math
import random
from typing import List, Optional

from .config import GameConfig, Viewport
from .utils import hex_color, mix_color, rand_range

DAY_TOP = hex_color("#7cc6ff")
DAY_BOTTOM = hex_color("#e7f4ff")
NIGHT_TOP = hex_color("#0f1740")
NIGHT_BOTTOM = hex_color("#070b1f")
CLOUD = hex_color("#cfe7ff", 191)
GROUND_TOP = hex_color("#203a28")
GROUND_BOTTOM = hex_color("#0f1f17")

MOUNTAINS = [
    {"h": 160, "speed": 12, "color": hex_color("#0f1a3a")},
    {"h": 120, "speed": 20, "color": hex_color("#132050")},
    {"h": 90, "speed": 30, "color": hex_color("#172966")},
]


class Background:
    def __init__(self, config: Optional[GameConfig] = None, viewport: Optional[Viewport] = None, rng=None):
        self.config = config or GameConfig()
        self.viewport = viewport or Viewport()
        self.rng = rng if rng is not None else random
        self.t = 0.0
        self.cycle_time = 0.0
        vw, vh = self.viewport.width, self.viewport.height
        self.clouds: List[dict] = [
            {
                "x": rand_range(self.rng, -200, vw + 200),
                "y": rand_range(self.rng, 40, vh * 0.5),
                "r": rand_range(self.rng, 20, 60),
                "s": rand_range(self.rng, 0.06, 0.18),
            }
            for _ in range(8)
        ]
        self.stars: List[dict] = [
            {
                "x": self.rng.random() * vw,
                "y": self.rng.random() * vh * 0.6,
                "a": self.rng.random() * 0.6 + 0.2,
                "r": self.rng.random() * 1.6 + 0.4,
            }
            for _ in range(80)
        ]

    @property
    def phase(self) -> float:
        """0..2pi over one day; 0 is noon"""
        return (self.cycle_time / self.config.day_length) * math.tau

    @property
    def day_factor(self) -> float:
        """1 at noon, 0 through the night half of the cycle"""
        return max(0.0, math.cos(self.phase))

    @property
    def night_factor(self) -> float:
        return 1.0 - (self.day_factor + 1.0) / 2.0

    def update(self, dt: float, speed: float) -> None:
        self.t += dt
        self.cycle_time = (self.cycle_time + dt) % self.config.day_length
        wind = speed * 0.25 + 18
        vw, vh = self.viewport.width, self.viewport.height
        for c in self.clouds:
            c["x"] -= c["s"] * wind * dt * 60
            if c["x"] < -260:
                c["x"] = vw + rand_range(self.rng, 20, 120)
                c["y"] = rand_range(self.rng, 40, vh * 0.5)
                c["r"] = rand_range(self.rng, 20, 60)

    def draw(self, surface) -> None:
        vw, vh = self.viewport.width, self.viewport.height
        day, night = self.day_factor, self.night_factor
        blend = (day + 1) / 2

        surface.vertical_gradient(
            0, 0, vw, vh,
            mix_color(NIGHT_TOP, DAY_TOP, blend),
            mix_color(NIGHT_BOTTOM, DAY_BOTTOM, blend),
        )

        # sun and moon travel on opposite arcs
        arc_y = vh * 0.22
        sun_x = vw * (0.2 + 0.6 * ((math.cos(self.phase) + 1) / 2))
        moon_x = vw * (0.2 + 0.6 * ((math.cos(self.phase + math.pi) + 1) / 2))
        surface.radial_glow(sun_x, arc_y, 160, [
            (0.0, (255, 242, 175, int(255 * 0.8 * blend))),
            (0.4, (255, 200, 100, int(255 * 0.3 * blend))),
            (1.0, (255, 160, 80, 0)),
        ])
        surface.radial_glow(moon_x, arc_y, 120, [
            (0.0, (200, 220, 255, int(255 * 0.7 * night))),
            (0.5, (160, 180, 220, int(255 * 0.25 * night))),
            (1.0, (160, 180, 220, 0)),
        ])

        if night > 0.05:
            for s in self.stars:
                a = night * (0.6 + math.sin((self.t + s["x"]) * 0.3) * 0.2)
                surface.fill_circle(s["x"], s["y"], s["r"], (255, 255, 255, int(255 * max(0.0, a))))

        for c in self.clouds:
            x, y, r = c["x"], c["y"], c["r"]
            surface.fill_circle(x, y, r, CLOUD)
            surface.fill_circle(x + r * 0.8, y + r * 0.2, r * 0.9, CLOUD)
            surface.fill_circle(x - r * 0.7, y + r * 0.25, r * 0.75, CLOUD)
            surface.fill_circle(x + r * 0.1, y + r * 0.35, r * 0.65, CLOUD)

        ground_h = self.config.ground_height
        for i, layer in enumerate(MOUNTAINS):
            base_y = vh - ground_h - 20 - i * 22
            peaks = 6 + i
            points = [(-vw / peaks, vh)]
            for p in range(-1, peaks + 1):
                x = (p / peaks) * vw
                points.append((x, base_y - abs(math.sin((p + i) * 1.3)) * layer["h"]))
            points.append((vw, vh))
            surface.fill_polygon(points, layer["color"])

        surface.vertical_gradient(0, vh - ground_h, vw, ground_h, GROUND_TOP, GROUND_BOTTOM)
