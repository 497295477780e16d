"""ui.game_over_modal — Final score, one message, Restart / Menu.

Exactly one message is chosen per game over: the new-best banner when
the session reported ``NewBestScore``, otherwise one of the flavour
strings picked uniformly at random.
"""

from __future__ import annotations
import random
import pygame

from core.constants import NEW_BEST_MESSAGE, TRY_AGAIN_MESSAGES, COLOR_COIN
from ui.modal import MenuModal
from ui.commands import RestartRace, QuitToMenu, ToggleMute
from ui.helpers import draw_overlay, panel_rect, draw_panel, draw_title_bar


def pick_message(new_best: bool, rng: random.Random | None = None) -> str:
    if new_best:
        return NEW_BEST_MESSAGE
    return (rng or random).choice(TRY_AGAIN_MESSAGES)


class GameOverModal(MenuModal):
    options = [("Race again", RestartRace), ("Menu", QuitToMenu)]
    hotkeys = {"restart": RestartRace, "quit": QuitToMenu, "mute": ToggleMute}

    def __init__(self, score: int, best: int, new_best: bool,
                 rng: random.Random | None = None):
        super().__init__()
        self.score = score
        self.best = best
        self.new_best = new_best
        self.message = pick_message(new_best, rng)

    def draw(self, surface: pygame.Surface, app) -> None:
        draw_overlay(surface, alpha=200)
        rect = panel_rect(surface, 340, 260)
        draw_panel(surface, rect)
        draw_title_bar(surface, app, rect.x, rect.y, rect.w, "GAME OVER")

        msg_color = COLOR_COIN if self.new_best else (200, 200, 220)
        img = app.font.render(self.message, True, msg_color)
        surface.blit(img, (rect.x + (rect.w - img.get_width()) // 2, rect.y + 50))

        score_img = app.font_xl.render(str(self.score), True, (255, 255, 255))
        surface.blit(score_img, (rect.x + (rect.w - score_img.get_width()) // 2,
                                 rect.y + 78))
        best_img = app.font_sm.render(f"BEST {self.best}", True, (150, 160, 170))
        surface.blit(best_img, (rect.x + (rect.w - best_img.get_width()) // 2,
                                rect.y + 128))

        self.draw_options(surface, app, rect.x + 40, rect.y + 160, rect.w - 80)
