"""logic/clock.py — Simulation clock: speed ramp, score accrual, frame timing.

One ``advance()`` per tick.  Speed climbs by a fixed increment per tick
up to the difficulty's cap, and the score grows by ``floor(speed / 10)``
each tick, so below speed 10 the distance score does not move at all.

``delta_time`` is recorded but never scales movement: the game runs
per frame, not per second.

The frame timer (``mark`` / ``reset``) turns the driver's millisecond
timestamps into tick deltas.  ``reset()`` forgets the previous
timestamp so the first frame after a resume reports 0 instead of the
whole time spent paused.
"""

from __future__ import annotations
import math


class SimulationClock:
    __slots__ = ("speed", "base_speed", "max_speed", "speed_increment",
                 "frames", "elapsed", "last_dt", "_last_stamp")

    def __init__(self, base_speed: float = 3.0, max_speed: float = 15.0,
                 speed_increment: float = 0.001):
        self.base_speed = base_speed
        self.max_speed = max_speed
        self.speed_increment = speed_increment
        self.speed = base_speed
        self.frames = 0
        self.elapsed = 0.0          # ms, sum of deltas passed to advance()
        self.last_dt = 0.0
        self._last_stamp: float | None = None

    def configure(self, base_speed: float, max_speed: float,
                  speed_increment: float) -> None:
        """Set new bounds and restart at *base_speed*."""
        self.base_speed = base_speed
        self.max_speed = max_speed
        self.speed_increment = speed_increment
        self.speed = base_speed
        self.frames = 0
        self.elapsed = 0.0
        self.last_dt = 0.0
        self.reset()

    def advance(self, delta_time: float = 0.0) -> int:
        """Ramp speed for one tick and return the points it earns."""
        self.frames += 1
        self.last_dt = delta_time
        self.elapsed += delta_time
        self.speed = min(self.speed + self.speed_increment, self.max_speed)
        return score_for_speed(self.speed)

    # ── frame timer ─────────────────────────────────────────────────

    def mark(self, timestamp: float) -> float:
        """Return ms since the previous ``mark`` (0 on the first call)."""
        dt = 0.0 if self._last_stamp is None else timestamp - self._last_stamp
        self._last_stamp = timestamp
        return max(0.0, dt)

    def reset(self) -> None:
        self._last_stamp = None


def score_for_speed(speed: float) -> int:
    """Points earned by one tick at *speed*."""
    return math.floor(speed / 10)
