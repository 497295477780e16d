"""ui — Modal overlay framework.

Provides a ``ModalStack`` that manages layered overlays on top of the
race (pause menu, game-over panel).  Each overlay is a self-contained
``Modal`` subclass with its own input / update / draw.
"""

from ui.modal import Modal, MenuModal, ModalStack
from ui.commands import (
    ResumeRace, RestartRace, QuitToMenu, ToggleMute, UICommand,
)
from ui.pause_modal import PauseModal
from ui.game_over_modal import GameOverModal, pick_message

__all__ = [
    "Modal", "MenuModal", "ModalStack",
    "ResumeRace", "RestartRace", "QuitToMenu", "ToggleMute",
    "UICommand",
    "PauseModal", "GameOverModal", "pick_message",
]
