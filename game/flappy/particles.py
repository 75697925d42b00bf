"""
Particle bursts for flaps, scoring and crashes
"""

from __future__ import annotations

import random
from typing import List, Tuple

from .entities import Color, Particle
from .utils import hsl_color, rand_range

SPARK_COLOR: Color = (123, 220, 255, 230)


class ParticleSystem:
    """
    Owns every live particle.

    Expired particles are moved to a free list and reused by the next emit
    call, so long sessions do not keep allocating new objects.
    """

    def __init__(self, gravity: float = 300.0, rng=None):
        self.gravity = gravity
        self.rng = rng if rng is not None else random
        self.particles: List[Particle] = []
        self._free: List[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    def clear(self) -> None:
        self._free.extend(self.particles)
        self.particles = []

    def emit(
        self,
        x: float,
        y: float,
        count: int,
        vx_range: Tuple[float, float],
        vy_range: Tuple[float, float],
        life_range: Tuple[float, float],
        radius_range: Tuple[float, float],
        color,
    ) -> None:
        """
        Append `count` particles at (x, y).

        `color` is either an RGBA tuple or a callable returning one, so each
        particle of a burst can get its own shade.
        """
        rng = self.rng
        for _ in range(count):
            c = color() if callable(color) else color
            vx = rand_range(rng, *vx_range)
            vy = rand_range(rng, *vy_range)
            life = rand_range(rng, *life_range)
            r = rand_range(rng, *radius_range)
            if self._free:
                p = self._free.pop()
                p.x, p.y, p.vx, p.vy = x, y, vx, vy
                p.life, p.radius, p.color, p.age = life, r, c, 0.0
            else:
                p = Particle(x=x, y=y, vx=vx, vy=vy, life=life, radius=r, color=c)
            self.particles.append(p)

    def emit_feathers(self, x: float, y: float, count: int = 10) -> None:
        """Soft yellow feathers shed on every flap"""
        rng = self.rng
        self.emit(
            x, y, count,
            vx_range=(-60, 60), vy_range=(-140, -20),
            life_range=(0.4, 0.9), radius_range=(1.5, 3.2),
            color=lambda: hsl_color(rand_range(rng, 45, 60), 0.9, rand_range(rng, 0.7, 0.9)),
        )

    def emit_spark(self, x: float, y: float, color: Color = SPARK_COLOR) -> None:
        """Small burst when a pipe is passed"""
        self.emit(
            x, y, 10,
            vx_range=(-100, 100), vy_range=(-60, -10),
            life_range=(0.25, 0.5), radius_range=(1.2, 2.4),
            color=color,
        )

    def explode(self, x: float, y: float) -> None:
        """Large fiery burst for deaths and fruit pickups"""
        rng = self.rng
        self.emit(
            x, y, 40,
            vx_range=(-180, 180), vy_range=(-220, 60),
            life_range=(0.6, 1.1), radius_range=(1.5, 3.5),
            color=lambda: hsl_color(rand_range(rng, 0, 60), 0.9, rand_range(rng, 0.55, 0.8)),
        )

    def update(self, dt: float) -> None:
        # swap-remove: order of survivors is irrelevant for rendering
        particles = self.particles
        i = 0
        while i < len(particles):
            p = particles[i]
            p.age += dt
            if p.age >= p.life:
                last = particles.pop()
                if last is not p:
                    particles[i] = last
                self._free.append(p)
                continue
            p.vy += self.gravity * dt
            p.x += p.vx * dt
            p.y += p.vy * dt
            i += 1

    def draw(self, surface) -> None:
        for p in self.particles:
            r, g, b, a = p.color
            surface.fill_circle(p.x, p.y, p.radius, (r, g, b, int(a * p.alpha)))
