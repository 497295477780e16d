"""components.session — Session status, difficulty, and the render snapshot."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Status(Enum):
    IDLE = "idle"            # menu shown
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Difficulty | str) -> Difficulty:
        """Accept a member or a case-insensitive name.

        Raises ``ValueError`` for anything else rather than guessing
        speed bounds for an unknown level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        names = ", ".join(d.value for d in cls)
        raise ValueError(f"unknown difficulty {value!r} (expected one of: {names})")

    def next(self) -> Difficulty:
        members = list(Difficulty)
        return members[(members.index(self) + 1) % len(members)]

    def prev(self) -> Difficulty:
        members = list(Difficulty)
        return members[(members.index(self) - 1) % len(members)]


@dataclass(frozen=True)
class DifficultyProfile:
    """Speed bounds for one difficulty level (px/tick)."""
    base_speed: float
    max_speed: float
    speed_increment: float = 0.001


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only copy of everything the renderer needs for one frame.

    Boxes are ``(x, y, width, height)`` tuples; colours are RGB tuples.
    """
    status: Status
    score: int
    best_score: int
    speed: float
    difficulty: Difficulty
    muted: bool
    road_width: float
    road_height: float
    lanes: int
    stripe_height: float
    stripes: tuple[float, ...]
    road_offset: float
    player: tuple[float, float, float, float]
    player_color: tuple
    obstacles: tuple[tuple[float, float, float, float, tuple], ...]
    coins: tuple[tuple[float, float, float, float], ...]         # x, y, size, rotation
    particles: tuple[tuple[float, float, float, tuple, float], ...]  # x, y, size, colour, alpha

    @property
    def speed_display(self) -> int:
        """Speedometer reading shown in the HUD."""
        return int(self.speed * 10)
