"""scenes/menu_scene.py — Start menu (the session's Idle screen).

Pick a difficulty with Up/Down (or Left/Right), Enter/Space to race.
M toggles sound, Esc exits the game.
"""

from __future__ import annotations
import pygame

from core.scene import Scene
from core.app import App
from core.constants import COLOR_BACKGROUND, COLOR_ACCENT, COLOR_COIN, COLOR_HUD
from components import Difficulty
from logic.input_manager import InputManager, InputContext
from logic.session import Session, difficulty_profile
from scenes.race_scene import RaceScene
from ui.helpers import draw_option_row, cycle, ROW_H


_DIFFICULTIES = list(Difficulty)


class MenuScene(Scene):
    """Difficulty selector.  Pushes a ``RaceScene`` when a race starts."""

    def __init__(self, session: Session):
        self.session = session
        self.input = InputManager(InputContext.MENU)
        self.selected = _DIFFICULTIES.index(session.difficulty)

    def on_enter(self, app: App):
        self.input.release_all()
        self.selected = _DIFFICULTIES.index(self.session.difficulty)

    def handle_event(self, event: pygame.event.Event, app: App):
        self.input.feed(event)

    def update(self, dt: float, app: App):
        inp = self.input
        n = len(_DIFFICULTIES)
        if inp.just("ui_up") or inp.just("ui_left"):
            self.selected = cycle(self.selected, -1, n)
        if inp.just("ui_down") or inp.just("ui_right"):
            self.selected = cycle(self.selected, 1, n)
        if inp.just("mute"):
            self.session.toggle_mute()
        if inp.just("exit"):
            app.quit()
        elif inp.just("ui_confirm"):
            self.session.start(_DIFFICULTIES[self.selected])
            app.push_scene(RaceScene(self.session))
        inp.begin_frame()

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill(COLOR_BACKGROUND)
        sw, sh = surface.get_size()

        app.draw_text_centered(surface, "BINK RACING", 70, COLOR_ACCENT, app.font_xl)
        app.draw_text_centered(surface, "Dodge the traffic. Grab the coins.", 122,
                               (180, 190, 200), app.font_sm)
        app.draw_text_centered(surface, f"BEST {self.session.best_score}", 160,
                               COLOR_COIN, app.font_lg)

        x, w = sw // 2 - 150, 300
        y = 230
        app.draw_text(surface, "Difficulty", x, y - 26, COLOR_HUD, app.font)
        for i, diff in enumerate(_DIFFICULTIES):
            prof = difficulty_profile(diff)
            label = f"{diff.value.title():<8} speed {prof.base_speed:g} → {prof.max_speed:g}"
            draw_option_row(surface, app, x, y, w, label=label,
                            selected=(i == self.selected))
            y += ROW_H

        sound = "off" if self.session.muted else "on"
        help_lines = [
            "Enter / Space   start",
            "Left/Right, A/D steer",
            "P or Esc        pause",
            f"M               sound ({sound})",
            "Esc             exit",
        ]
        y = sh - 30 - len(help_lines) * 16
        for line in help_lines:
            app.draw_text_centered(surface, line, y, (120, 140, 130), app.font_sm)
            y += 16
