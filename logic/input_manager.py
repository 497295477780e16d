"""logic/input_manager.py — Intent-based input layer.

Sits between raw pygame events and game commands.  The scene feeds in
raw events; the manager maps them to *intents* based on the current
**input context** (menu, race, paused, game over).

Other systems read the intents and never touch raw keycodes.

Usage (in race_scene):

    self.input = InputManager(InputContext.RACE)
    # each frame:
    self.input.begin_frame()
    for event in events:
        self.input.feed(event)

    if self.input.just("pause"):        # discrete press
        ...
    self.input.apply_drive(session.intent)   # held steering → flags

Held state is tracked from KEYDOWN / KEYUP events rather than polled,
so the manager works without a display (tests feed synthetic events).
A KEYDOWN for a key that is already down (OS key-repeat) does not fire
``just()`` again: holding P toggles pause once, not every repeat.
"""

from __future__ import annotations
from enum import Enum, auto
import pygame

from components import DriveIntent


# ── Input contexts ──────────────────────────────────────────────────

class InputContext(Enum):
    """Determines which key-bindings are active."""
    MENU      = auto()   # difficulty selection
    RACE      = auto()   # driving
    PAUSED    = auto()   # pause overlay open
    GAME_OVER = auto()   # game-over overlay open


# ── Intent names (strings for flexibility, not an enum) ─────────────
# Race:      move_left  move_right  pause  escape  quit  mute
#            toggle_debug  reload_tuning
# Overlays:  ui_up  ui_down  ui_confirm  restart  quit  mute  pause
# Menu:      ui_up  ui_down  ui_left  ui_right  ui_confirm  mute  exit


# ── Default key bindings ────────────────────────────────────────────

_RACE_BINDS: dict[str, list[int]] = {
    # Steering (held)
    "move_left":     [pygame.K_LEFT, pygame.K_a],
    "move_right":    [pygame.K_RIGHT, pygame.K_d],
    # Commands (press)
    "pause":         [pygame.K_p],
    "escape":        [pygame.K_ESCAPE],     # pauses, never unpauses
    "quit":          [pygame.K_q],
    "mute":          [pygame.K_m],
    # Debug
    "toggle_debug":  [pygame.K_TAB],
    "reload_tuning": [pygame.K_F5],
}

_PAUSED_BINDS: dict[str, list[int]] = {
    "pause":         [pygame.K_p],
    "ui_up":         [pygame.K_UP, pygame.K_w],
    "ui_down":       [pygame.K_DOWN, pygame.K_s],
    "ui_confirm":    [pygame.K_RETURN, pygame.K_SPACE],
    "quit":          [pygame.K_q],
    "mute":          [pygame.K_m],
    "toggle_debug":  [pygame.K_TAB],
}

_GAME_OVER_BINDS: dict[str, list[int]] = {
    "restart":       [pygame.K_r],
    "ui_up":         [pygame.K_UP, pygame.K_w],
    "ui_down":       [pygame.K_DOWN, pygame.K_s],
    "ui_confirm":    [pygame.K_RETURN, pygame.K_SPACE],
    "quit":          [pygame.K_q, pygame.K_ESCAPE],
    "mute":          [pygame.K_m],
    "toggle_debug":  [pygame.K_TAB],
}

_MENU_BINDS: dict[str, list[int]] = {
    "ui_up":         [pygame.K_UP, pygame.K_w],
    "ui_down":       [pygame.K_DOWN, pygame.K_s],
    "ui_left":       [pygame.K_LEFT, pygame.K_a],
    "ui_right":      [pygame.K_RIGHT, pygame.K_d],
    "ui_confirm":    [pygame.K_RETURN, pygame.K_SPACE],
    "mute":          [pygame.K_m],
    "exit":          [pygame.K_ESCAPE],
}

_BINDS_BY_CONTEXT = {
    InputContext.MENU: _MENU_BINDS,
    InputContext.RACE: _RACE_BINDS,
    InputContext.PAUSED: _PAUSED_BINDS,
    InputContext.GAME_OVER: _GAME_OVER_BINDS,
}


# ── InputManager ────────────────────────────────────────────────────

class InputManager:
    """Context-aware input mapper.

    Call ``begin_frame()`` before processing events, then
    ``feed(event)`` for each pygame event.

    Then use ``just(intent)`` for discrete presses and
    ``held(intent)`` for continuous holds.
    """

    def __init__(self, context: InputContext = InputContext.RACE):
        self.context: InputContext = context
        # Intents pressed *this frame* (rising edge)
        self._pressed: set[str] = set()
        # Raw keys currently down
        self._down: set[int] = set()

    # ── frame lifecycle ─────────────────────────────────────────

    def begin_frame(self):
        """Call at the start of each frame before feeding events."""
        self._pressed.clear()

    def feed(self, event: pygame.event.Event):
        """Map one pygame event to intents.  Non-key events other than focus loss are ignored."""
        if event.type == pygame.KEYDOWN:
            if event.key in self._down:
                return  # key-repeat: already held, no new press
            self._down.add(event.key)
            for intent, keys in self._active_binds().items():
                if event.key in keys:
                    self._pressed.add(intent)

        elif event.type == pygame.KEYUP:
            self._down.discard(event.key)

        elif event.type == pygame.WINDOWFOCUSLOST:
            # Key-ups are never delivered to an unfocused window.
            self._down.clear()

    def set_context(self, context: InputContext):
        """Switch bindings.  Keys still physically down stay held."""
        self.context = context

    # ── queries ─────────────────────────────────────────────────

    def just(self, intent: str) -> bool:
        """True if the intent was triggered this frame (rising edge)."""
        return intent in self._pressed

    def held(self, intent: str) -> bool:
        """True if any key bound to the intent is down right now."""
        keys = self._active_binds().get(intent, ())
        return any(k in self._down for k in keys)

    def any_pressed(self) -> set[str]:
        """Return all intents pressed this frame."""
        return set(self._pressed)

    def apply_drive(self, intent: DriveIntent):
        """Copy held steering into the session's drive flags."""
        intent.move_left = self.held("move_left")
        intent.move_right = self.held("move_right")

    def release_all(self):
        """Forget every held key (e.g. after a scene change)."""
        self._down.clear()
        self._pressed.clear()

    # ── internal ────────────────────────────────────────────────

    def _active_binds(self) -> dict[str, list[int]]:
        return _BINDS_BY_CONTEXT.get(self.context, {})
