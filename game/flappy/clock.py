"""Turns host frame timestamps into clamped frame deltas."""

from typing import Optional


class FrameClock:
    def __init__(self, max_dt: float = 0.033):
        self.max_dt = max_dt
        self.last: Optional[float] = None

    def reset(self) -> None:
        self.last = None

    def delta(self, timestamp: float) -> float:
        """Seconds since the previous timestamp, clamped to [0, max_dt]; 0 on the first call"""
        if self.last is None:
            self.last = timestamp
        dt = timestamp - self.last
        self.last = timestamp
        return min(max(dt, 0.0), self.max_dt)
