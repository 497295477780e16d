"""ui.commands — Command objects emitted by modals.

Modals return these instead of directly calling into the session.
The race scene reads the list and applies each effect.

Add new command types here whenever an overlay needs to trigger a
session command or a scene change.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class ResumeRace:
    """Leave the pause overlay and continue the race."""


@dataclass(frozen=True, slots=True)
class RestartRace:
    """Start a fresh race at the current difficulty."""


@dataclass(frozen=True, slots=True)
class QuitToMenu:
    """Abandon the race and return to the difficulty menu."""


@dataclass(frozen=True, slots=True)
class ToggleMute:
    """Flip the shared sound flag."""


# Every command type a modal can return.
UICommand = Union[ResumeRace, RestartRace, QuitToMenu, ToggleMute]
