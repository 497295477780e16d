"""components — Plain dataclasses for the game's state, organised by domain.

Submodules
----------
vehicles       Player, Obstacle, DriveIntent
pickups        Coin
road           Road, Stripe
session        Status, Difficulty, DifficultyProfile, SessionSnapshot
session_log    SessionLog

No behaviour lives here; the systems in ``logic/`` read and write
these objects.  All public names are re-exported so callers can do
``from components import Player``.
"""

# ── Vehicles ─────────────────────────────────────────────────────────
from components.vehicles import Player, Obstacle, DriveIntent

# ── Pickups ──────────────────────────────────────────────────────────
from components.pickups import Coin

# ── Road ─────────────────────────────────────────────────────────────
from components.road import Road, Stripe

# ── Session ──────────────────────────────────────────────────────────
from components.session import Status, Difficulty, DifficultyProfile, SessionSnapshot
from components.session_log import SessionLog

__all__ = [
    # vehicles
    "Player", "Obstacle", "DriveIntent",
    # pickups
    "Coin",
    # road
    "Road", "Stripe",
    # session
    "Status", "Difficulty", "DifficultyProfile", "SessionSnapshot",
    "SessionLog",
]
