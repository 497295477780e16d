"""components.road — Lane geometry and the scrolling lane-divider stripes."""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class Stripe:
    y: float = 0.0          # px, top edge of one dash


@dataclass
class Road:
    """The whole visible road.  Built by ``logic.road.build_road``.

    ``offset`` is a texture scroll position in ``[0, period)``; it has
    no gameplay effect.
    """
    width: float = 500.0
    height: float = 600.0
    lanes: int = 5
    stripe_height: float = 40.0
    stripe_gap: float = 20.0
    stripes: list[Stripe] = field(default_factory=list)
    offset: float = 0.0

    @property
    def lane_width(self) -> float:
        return self.width / self.lanes

    @property
    def period(self) -> float:
        """Distance between the tops of two consecutive stripes."""
        return self.stripe_height + self.stripe_gap
