"""logic/road.py — Road construction and stripe scrolling.

The road is purely visual: the stripes and ``offset`` scroll at the
current speed so the car appears to move, but nothing in gameplay reads
them.  Lane geometry (``lane_x``) is shared with the spawners and the
player placement.
"""

from __future__ import annotations
import math

from components import Road, Stripe
from core.tuning import get as _tun


def build_road(width: float, height: float) -> Road:
    """Create a road covering *height* px plus two spare stripes above."""
    road = Road(
        width=float(width),
        height=float(height),
        lanes=int(_tun("road", "lanes", 5)),
        stripe_height=float(_tun("road", "stripe_height", 40)),
        stripe_gap=float(_tun("road", "stripe_gap", 20)),
    )
    count = math.ceil(road.height / road.period) + 2
    road.stripes = [Stripe(y=i * road.period - road.stripe_height)
                    for i in range(count)]
    return road


def scroll_road(road: Road, speed: float) -> None:
    """Advance the texture offset and every stripe by *speed* px."""
    road.offset += speed
    if road.offset >= road.period:
        road.offset = 0.0

    for stripe in road.stripes:
        stripe.y += speed
        if stripe.y > road.height:
            stripe.y = -road.stripe_height


def lane_x(road: Road, lane: int, width: float) -> float:
    """Left edge that centres an object *width* px wide in *lane*."""
    return lane * road.lane_width + road.lane_width / 2 - width / 2
