"""
core/scene.py — Scene interface

The game has two screens, both Scenes on the app's stack:

    MenuScene   difficulty picker (the session's Idle state)
    RaceScene   pushed on start, pops itself when the session goes Idle

Only the top scene receives events, updates and draws.  A covered
scene is told via ``on_exit`` and gets ``on_enter`` again when it is
revealed, so the menu can refresh the best score after a race.

    class MyScene(Scene):
        def update(self, dt, app):
            # dt is seconds since the last frame
            ...
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    @property
    def name(self) -> str:
        """Label used in the app's scene-change log lines."""
        return type(self).__name__

    def on_enter(self, app: App):
        """Pushed, or revealed by the scene above popping."""

    def on_exit(self, app: App):
        """Popped, or covered by a new scene."""

    def handle_event(self, event: pygame.event.Event, app: App):
        """One pygame event the app did not consume (F11, resize, quit)."""

    def update(self, dt: float, app: App):
        pass

    def draw(self, surface: pygame.Surface, app: App):
        pass
