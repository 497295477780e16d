"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.

Unit System
-----------
Everything in the simulation is measured in **pixels** and **ticks**:

    Position / size         px      (screen pixels on the virtual surface)
    Speed                   px/tick (one tick = one rendered frame)
    Particle life           ticks
    Score                   —       (points)

The simulation never looks at wall-clock time; a faster frame rate
means a faster game.  ``FPS`` caps the loop so that stays predictable.

Gameplay numbers that are meant to be tweaked (difficulty table, spawn
chances, particle burst) live in ``data/tuning.toml`` instead.
"""

# ── Window ──────────────────────────────────────────────────────────
SCREEN_W = 500
SCREEN_H = 600
FPS = 60
TITLE = "Bink Racing"

# ── Persistence ─────────────────────────────────────────────────────
STORAGE_KEY = "binkRacingBest"

# ── Colours ─────────────────────────────────────────────────────────
COLOR_BACKGROUND = (52, 73, 94)      # #34495e
COLOR_ROAD = (44, 62, 80)            # #2c3e50
COLOR_STRIPE = (149, 165, 166)       # #95a5a6
COLOR_EDGE = (243, 156, 18)          # #f39c12
COLOR_PLAYER = (255, 107, 107)       # #ff6b6b
COLOR_COCKPIT = (0, 0, 0)
COLOR_WINDOW = (77, 208, 225)        # #4dd0e1
COLOR_TAILLIGHT = (255, 68, 68)      # #ff4444
COLOR_HEADLIGHT = (255, 235, 59)     # #ffeb3b
COLOR_COIN = (255, 215, 0)           # #ffd700
COLOR_COIN_SHINE = (255, 235, 59)    # #ffeb3b
COLOR_COIN_BORDER = (255, 160, 0)    # #ffa000
COLOR_HUD = (236, 240, 241)
COLOR_ACCENT = (0, 255, 200)

OBSTACLE_PALETTE = [
    (231, 76, 60),     # #e74c3c
    (52, 152, 219),    # #3498db
    (46, 204, 113),    # #2ecc71
    (155, 89, 182),    # #9b59b6
    (243, 156, 18),    # #f39c12
]

# ── Game-over messages ──────────────────────────────────────────────
NEW_BEST_MESSAGE = "NEW BEST SCORE!"
TRY_AGAIN_MESSAGES = [
    "Nice try! Keep racing!",
    "Almost there! Try again!",
    "You can do better!",
    "Practice makes perfect!",
    "Speed demon in training!",
]
