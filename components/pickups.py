"""components.pickups — Collectible coins."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Coin:
    """Drawn as a spinning circle, collides as its bounding square."""
    x: float = 0.0          # px, left edge
    y: float = 0.0          # px, top edge
    size: float = 20.0      # px, diameter
    rotation: float = 0.0   # rad, cosmetic
    lane: int = 0

    @property
    def width(self) -> float:
        return self.size

    @property
    def height(self) -> float:
        return self.size

    @property
    def center(self) -> tuple[float, float]:
        half = self.size / 2
        return self.x + half, self.y + half
