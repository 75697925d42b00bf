"""
Drawing surface used by the game objects, and its arcade implementation.

Game code works in canvas coordinates (origin top-left, y grows down);
ArcadeSurface flips to arcade's bottom-left origin.
"""

from __future__ import annotations

from typing import Protocol, Sequence, Tuple

import arcade

from .utils import lerp, mix_color

Color = Tuple[int, int, int, int]
Point = Tuple[float, float]


class Surface(Protocol):
    def set_offset(self, dx: float, dy: float) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...

    def fill_circle(self, x: float, y: float, r: float, color: Color) -> None: ...

    def stroke_circle(self, x: float, y: float, r: float, color: Color, width: float) -> None: ...

    def fill_polygon(self, points: Sequence[Point], color: Color) -> None: ...

    def line(self, x1: float, y1: float, x2: float, y2: float, color: Color, width: float) -> None: ...

    def vertical_gradient(self, x: float, y: float, w: float, h: float, top: Color, bottom: Color) -> None: ...

    def horizontal_gradient(self, x: float, y: float, w: float, h: float, left: Color, right: Color) -> None: ...

    def radial_glow(self, x: float, y: float, radius: float, stops: Sequence[Tuple[float, Color]]) -> None: ...

    def text(self, text: str, x: float, y: float, color: Color, size: float, bold: bool = False) -> None: ...


def color_at(stops: Sequence[Tuple[float, Color]], t: float) -> Color:
    """Interpolate a color from (offset, color) stops sorted by offset"""
    if t <= stops[0][0]:
        return stops[0][1]
    for (o1, c1), (o2, c2) in zip(stops, stops[1:]):
        if t <= o2:
            span = (o2 - o1) or 1.0
            return mix_color(c1, c2, (t - o1) / span)
    return stops[-1][1]


class ArcadeSurface:
    """Surface backed by arcade's immediate-mode draw calls"""

    GRADIENT_BANDS = 24
    GLOW_RINGS = 12

    def __init__(self, window: arcade.Window, viewport=None):
        self.window = window
        # y flips against the simulated viewport when given, not the window
        self.viewport = viewport
        self.dx = 0.0
        self.dy = 0.0

    def _x(self, x: float) -> float:
        return x + self.dx

    def _y(self, y: float) -> float:
        height = self.viewport.height if self.viewport is not None else self.window.height
        return height - (y + self.dy)

    def set_offset(self, dx: float, dy: float) -> None:
        self.dx = dx
        self.dy = dy

    def fill_rect(self, x, y, w, h, color) -> None:
        if w <= 0 or h <= 0:
            return
        left, right = self._x(x), self._x(x + w)
        arcade.draw_lrbt_rectangle_filled(left, right, self._y(y + h), self._y(y), color)

    def fill_circle(self, x, y, r, color) -> None:
        if r <= 0 or color[3] <= 0:
            return
        arcade.draw_circle_filled(self._x(x), self._y(y), r, color)

    def stroke_circle(self, x, y, r, color, width) -> None:
        arcade.draw_circle_outline(self._x(x), self._y(y), r, color, width)

    def fill_polygon(self, points, color) -> None:
        arcade.draw_polygon_filled([(self._x(px), self._y(py)) for px, py in points], color)

    def line(self, x1, y1, x2, y2, color, width) -> None:
        arcade.draw_line(self._x(x1), self._y(y1), self._x(x2), self._y(y2), color, width)

    def vertical_gradient(self, x, y, w, h, top, bottom) -> None:
        # banded approximation, good enough at game resolutions
        bands = self.GRADIENT_BANDS
        step = h / bands
        for i in range(bands):
            self.fill_rect(x, y + i * step, w, step + 1, mix_color(top, bottom, i / (bands - 1)))

    def horizontal_gradient(self, x, y, w, h, left, right) -> None:
        bands = 8
        step = w / bands
        for i in range(bands):
            self.fill_rect(x + i * step, y, step + 0.5, h, mix_color(left, right, i / (bands - 1)))

    def radial_glow(self, x, y, radius, stops) -> None:
        rings = self.GLOW_RINGS
        for i in range(rings):
            t = 1.0 - i / rings
            self.fill_circle(x, y, lerp(0, radius, t), color_at(stops, t))

    def text(self, text, x, y, color, size, bold=False) -> None:
        arcade.draw_text(
            text, self._x(x), self._y(y), color, size,
            anchor_x="center", anchor_y="top", bold=bold,
        )
