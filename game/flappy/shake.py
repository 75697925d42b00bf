"""Screen shake driven by a decaying magnitude."""

import random


class ScreenShake:
    def __init__(self, decay: float = 0.92, scale: float = 8.0, cutoff: float = 0.02, rng=None):
        self.decay = decay
        self.scale = scale
        self.cutoff = cutoff
        self.rng = rng if rng is not None else random
        self.magnitude = 0.0
        self.offset_x = 0.0
        self.offset_y = 0.0

    def trigger(self, amount: float) -> None:
        # a weaker kick never cuts a stronger one short
        self.magnitude = max(self.magnitude, amount)

    def reset(self) -> None:
        self.magnitude = 0.0
        self.offset_x = 0.0
        self.offset_y = 0.0

    def update(self, dt: float) -> None:
        if self.magnitude < self.cutoff:
            self.reset()
            return
        self.offset_x = (self.rng.random() * 2 - 1) * self.magnitude * self.scale
        self.offset_y = (self.rng.random() * 2 - 1) * self.magnitude * self.scale
        self.magnitude *= self.decay ** (dt * 60)
