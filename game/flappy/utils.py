"""
Math helpers and collision geometry
"""

from __future__ import annotations
import colorsys
import random
from typing import Optional, Tuple
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b"""
    return a + (b - a) * t


def rand_range(rng, lo: float, hi: float) -> float:
    """Uniform draw in [lo, hi) from any object exposing random()"""
    return lo + rng.random() * (hi - lo)


def circle_collide(x1, y1, r1, x2, y2, r2) -> bool:
    """Check if two circles collide"""
    dx = x1 - x2
    dy = y1 - y2
    rr = r1 + r2
    return (dx * dx + dy * dy) <= (rr * rr)


def circle_rect_collide(cx, cy, cr, rx, ry, rw, rh) -> bool:
    """Check if a circle touches an axis-aligned rectangle (x, y, w, h)"""
    nx = clamp(cx, rx, rx + rw)
    ny = clamp(cy, ry, ry + rh)
    dx = cx - nx
    dy = cy - ny
    return (dx * dx + dy * dy) <= (cr * cr)


def hsl_color(hue: float, sat: float, light: float, alpha: int = 255) -> Tuple[int, int, int, int]:
    """Convert HSL (hue in degrees, sat/light in [0,1]) to an RGBA tuple"""
    r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, light, sat)
    return int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), alpha


def hex_color(value: str, alpha: int = 255) -> Tuple[int, int, int, int]:
    """'#rrggbb' -> RGBA tuple"""
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16), alpha


def mix_color(c1, c2, t: float) -> Tuple[int, int, int, int]:
    """Blend two RGBA tuples; t=0 gives c1, t=1 gives c2"""
    return tuple(int(round(lerp(a, b, t))) for a, b in zip(c1, c2))  # type: ignore[return-value]


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
