"""
Persistence for the two player preferences: best score and bird color
"""

from __future__ import annotations

import json
import logging
import os
from typing import Protocol

from .entities import BirdColor

logger = logging.getLogger(__name__)


class PreferenceStore(Protocol):
    def load_best(self) -> int: ...

    def save_best(self, value: int) -> None: ...

    def load_color(self) -> BirdColor: ...

    def save_color(self, color: BirdColor) -> None: ...


class MemoryPreferenceStore:
    """Keeps preferences in memory only (tests, training runs)"""

    def __init__(self, best: int = 0, color: BirdColor = BirdColor.RED):
        self.best = max(0, int(best))
        self.color = color
        self.saves = 0

    def load_best(self) -> int:
        return self.best

    def save_best(self, value: int) -> None:
        self.best = max(0, int(value))
        self.saves += 1

    def load_color(self) -> BirdColor:
        return self.color

    def save_color(self, color: BirdColor) -> None:
        self.color = color


class JsonPreferenceStore:
    """
    Preferences in a single JSON file: {"best": int, "color": str}.

    Read and write failures are logged and never interrupt the game.
    """

    def __init__(self, path: str):
        self.path = path

    def _read(self) -> dict:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning("Could not read preferences from %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed preferences file %s", self.path)
            return {}
        return data

    def _write(self, key: str, value) -> None:
        data = self._read()
        data[key] = value
        try:
            directory = os.path.dirname(os.path.abspath(self.path))
            os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f)
        except OSError as e:
            logger.warning("Could not save preferences to %s: %s", self.path, e)

    def load_best(self) -> int:
        try:
            return max(0, int(self._read().get("best", 0)))
        except (TypeError, ValueError):
            logger.warning("Stored best score is not an integer; using 0")
            return 0

    def save_best(self, value: int) -> None:
        self._write("best", max(0, int(value)))

    def load_color(self) -> BirdColor:
        raw = self._read().get("color", BirdColor.RED.value)
        try:
            return BirdColor.parse(raw)
        except ValueError as e:
            logger.warning("%s; falling back to red", e)
            return BirdColor.RED

    def save_color(self, color: BirdColor) -> None:
        self._write("color", BirdColor.parse(color).value)
