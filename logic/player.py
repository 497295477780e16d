"""logic/player.py — Player placement and sideways steering."""

from __future__ import annotations

from components import Player, Road, DriveIntent
from core.tuning import get as _tun
from logic.road import lane_x


def make_player() -> Player:
    return Player(
        width=float(_tun("player", "width", 40)),
        height=float(_tun("player", "height", 70)),
        move_speed=float(_tun("player", "move_speed", 8.0)),
    )


def place_player(player: Player, road: Road) -> None:
    """Centre the car in the middle lane, a fixed margin above the bottom."""
    player.x = lane_x(road, road.lanes // 2, player.width)
    player.y = road.height - player.height - float(_tun("player", "bottom_margin", 50))


def player_system(player: Player, intent: DriveIntent, road: Road) -> None:
    """Apply one tick of steering, then clamp to the road.

    The final clamp runs even though the move guards already keep the
    car on the road; positions must come out identical either way.
    """
    max_x = road.width - player.width
    if intent.move_left and player.x > 0:
        player.x -= player.move_speed
    if intent.move_right and player.x < max_x:
        player.x += player.move_speed

    player.x = max(0.0, min(player.x, max_x))
