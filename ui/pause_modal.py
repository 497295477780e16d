"""ui.pause_modal — Pause overlay: Resume / Quit to menu."""

from __future__ import annotations
import pygame

from ui.modal import MenuModal
from ui.commands import ResumeRace, QuitToMenu, ToggleMute
from ui.helpers import draw_overlay, panel_rect, draw_panel, draw_title_bar


class PauseModal(MenuModal):
    options = [("Resume", ResumeRace), ("Quit to menu", QuitToMenu)]
    hotkeys = {"pause": ResumeRace, "quit": QuitToMenu, "mute": ToggleMute}

    def draw(self, surface: pygame.Surface, app) -> None:
        draw_overlay(surface)
        rect = panel_rect(surface, 280, 170)
        draw_panel(surface, rect)
        draw_title_bar(surface, app, rect.x, rect.y, rect.w, "PAUSED")
        self.draw_options(surface, app, rect.x + 20, rect.y + 56, rect.w - 40)
        app.draw_text(surface, "P resume   Q quit   M sound",
                      rect.x + 24, rect.bottom - 24, (120, 140, 130), app.font_sm)
