"""components.vehicles — The player's car, obstacle cars, and steering intent.

All coordinates and dimensions are in pixels; speeds are px/tick.
"""

from __future__ import annotations
from dataclasses import dataclass

from core.constants import COLOR_PLAYER


@dataclass
class Player:
    x: float = 0.0          # px, left edge
    y: float = 0.0          # px, top edge
    width: float = 40.0     # px
    height: float = 70.0    # px
    move_speed: float = 8.0  # px/tick sideways
    color: tuple = COLOR_PLAYER


@dataclass
class Obstacle:
    """A car falling down one lane.  Same size as the player."""
    x: float = 0.0
    y: float = 0.0
    width: float = 40.0
    height: float = 70.0
    color: tuple = (231, 76, 60)
    lane: int = 0


@dataclass
class DriveIntent:
    """Steering flags written by the input adapter, read at tick start.

    Both may be held at once; the controller applies left then right.
    """
    move_left: bool = False
    move_right: bool = False

    def clear(self) -> None:
        self.move_left = False
        self.move_right = False
