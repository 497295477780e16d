"""core/collision.py — Axis-aligned rectangle overlap.

Every collision in the game (player vs obstacle car, player vs coin) is
a plain AABB test.  Coins are drawn as circles but collide as their
bounding square.

Anything with ``x``, ``y``, ``width`` and ``height`` attributes can be
passed in: ``Player``, ``Obstacle``, ``Coin`` or the ``Rect`` below.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rect:
    """Immutable box, top-left corner + size (px)."""
    x: float
    y: float
    width: float
    height: float


def overlaps(a, b) -> bool:
    """Return True if box *a* and box *b* overlap.

    Touching edges do not count.  Symmetric: ``overlaps(a, b) ==
    overlaps(b, a)`` for any pair.
    """
    return (a.x < b.x + b.width
            and a.x + a.width > b.x
            and a.y < b.y + b.height
            and a.y + a.height > b.y)


def rect_of(obj) -> Rect:
    """Freeze the current box of *obj* into a ``Rect``."""
    return Rect(obj.x, obj.y, obj.width, obj.height)
