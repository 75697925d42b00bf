"""
Arcade host: drives GameController from the window's frame callbacks and
translates keyboard / mouse input into game intents.

Run:
    python -m game.flappy.window
"""

from __future__ import annotations

import argparse
import logging
import os
import time
from typing import Optional

import arcade

from .clock import FrameClock
from .config import MIN_VIEWPORT_HEIGHT, MIN_VIEWPORT_WIDTH
from .controller import GameController
from .entities import BirdColor, GameState
from .render import ArcadeSurface
from .storage import JsonPreferenceStore

OVERLAY_TEXT = {
    GameState.MENU: ("Flappy Luxe", "Space / click to start   P to pause   1-5 bird color"),
    GameState.PAUSED: ("Paused", "P to resume"),
    GameState.GAMEOVER: ("Game Over", "Space / click to restart"),
}

COLOR_KEYS = {
    arcade.key.KEY_1: BirdColor.RED,
    arcade.key.KEY_2: BirdColor.WHITE,
    arcade.key.KEY_3: BirdColor.BLACK,
    arcade.key.KEY_4: BirdColor.PURPLE,
    arcade.key.KEY_5: BirdColor.PINK,
}


class FlappyWindow(arcade.Window):
    """Arcade window for playing (or watching) a GameController"""

    def __init__(
        self,
        controller: GameController,
        title: str = "Flappy Luxe",
        interactive: bool = True,
        **kwargs,
    ):
        super().__init__(
            int(controller.viewport.width),
            int(controller.viewport.height),
            title,
            resizable=True,
            **kwargs,
        )
        self.surface = ArcadeSurface(self, controller.viewport)
        self.controller = controller
        # the gym environment steps the controller itself
        self.interactive = interactive
        self.clock = FrameClock(controller.config.max_dt)
        self.set_minimum_size(int(MIN_VIEWPORT_WIDTH), int(MIN_VIEWPORT_HEIGHT))
        arcade.set_background_color((7, 11, 31))

    @property
    def controller(self) -> GameController:
        return self._controller

    @controller.setter
    def controller(self, controller: GameController):
        # FlappyEnv swaps in a fresh controller on every reset
        self._controller = controller
        self.surface.viewport = controller.viewport

    def on_update(self, delta_time: float):
        # wall-clock delta, clamped; the very first frame advances nothing
        if self.interactive:
            self.controller.tick(self.clock.delta(time.perf_counter()))

    def on_draw(self):
        self.clear()
        self.controller.draw(self.surface)
        self._draw_overlay()

    def _draw_overlay(self):
        text = OVERLAY_TEXT.get(self.controller.state)
        if text is None:
            return
        title, hint = text
        w, h = self.width, self.height
        arcade.draw_lrbt_rectangle_filled(0, w, 0, h, (0, 0, 0, 110))
        arcade.draw_text(title, w / 2, h / 2 + 30, (255, 255, 255, 255), 36,
                         anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text(hint, w / 2, h / 2 - 20, (220, 230, 255, 230), 13,
                         anchor_x="center", anchor_y="center")

    def on_key_press(self, symbol: int, modifiers: int):
        if not self.interactive:
            return
        if symbol in (arcade.key.SPACE, arcade.key.UP):
            self.controller.flap()
        elif symbol == arcade.key.P:
            self.controller.toggle_pause()
        elif symbol in COLOR_KEYS:
            self.controller.select_color(COLOR_KEYS[symbol])
        elif symbol == arcade.key.ESCAPE:
            self.close()

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        if self.interactive:
            self.controller.flap()

    def on_resize(self, width: int, height: int):
        super().on_resize(width, height)
        self.controller.resize(width, height)


def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(description="Play Flappy Luxe")
    parser.add_argument("--width", type=int, default=480, help="Window width (default: 480)")
    parser.add_argument("--height", type=int, default=720, help="Window height (default: 720)")
    parser.add_argument(
        "--prefs",
        type=str,
        default=os.path.join(os.path.expanduser("~"), ".flappy_luxe.json"),
        help="Preferences file for best score and bird color",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--log-level",
        type=str,
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Logging level (default: info)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    controller = GameController(
        width=args.width,
        height=args.height,
        store=JsonPreferenceStore(args.prefs),
        seed=args.seed,
    )
    FlappyWindow(controller)
    arcade.run()


if __name__ == "__main__":
    main()
