import pytest

from game.flappy.controller import GameController
from game.flappy.storage import MemoryPreferenceStore


class RecordingSurface:
    """Stand-in for the arcade surface: remembers every draw call"""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.calls.append((name, args, kwargs))
        return record

    @property
    def names(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def store():
    return MemoryPreferenceStore()


@pytest.fixture
def game(store):
    return GameController(width=480, height=720, store=store, seed=1234)


@pytest.fixture
def running_game(game):
    game.start()
    return game


@pytest.fixture
def surface():
    return RecordingSurface()
