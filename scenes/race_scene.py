"""
scenes/race_scene.py — The race itself

Drives one ``Session``: each frame it turns input into steering flags
and commands, ticks the session, drains the session's event bus, and
draws the snapshot.  Pause and game over are modal overlays on top of
the frozen road.

Left/Right or A/D steer.  P pauses (and resumes), Esc pauses.
Q quits to the menu, M toggles sound, Tab shows the debug overlay,
F5 reloads tuning.
"""

from __future__ import annotations
import random
import pygame

from core.scene import Scene
from core.app import App
from core import tuning as tuning_mod
from components import Status
from logic.input_manager import InputManager, InputContext
from logic.session import Session
from scenes.race_draw import render_snapshot, draw_debug_overlay
from ui import (
    ModalStack, PauseModal, GameOverModal,
    ResumeRace, RestartRace, QuitToMenu, ToggleMute,
)


_CONTEXT_FOR_STATUS = {
    Status.RUNNING: InputContext.RACE,
    Status.PAUSED: InputContext.PAUSED,
    Status.GAME_OVER: InputContext.GAME_OVER,
    Status.IDLE: InputContext.MENU,
}


class RaceScene(Scene):
    def __init__(self, session: Session, rng: random.Random | None = None):
        self.session = session
        self.input = InputManager(InputContext.RACE)
        self.modals = ModalStack()
        self.show_debug = False
        self.rng = rng or random.Random()

    # ── lifecycle ───────────────────────────────────────────────────

    def on_enter(self, app: App):
        bus = self.session.bus
        bus.subscribe("NewBestScore", self._on_new_best)
        bus.subscribe("TryAgain", self._on_try_again)
        self.input.release_all()

    def on_exit(self, app: App):
        bus = self.session.bus
        bus.unsubscribe("NewBestScore", self._on_new_best)
        bus.unsubscribe("TryAgain", self._on_try_again)
        self.modals.clear()

    # ── events ──────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event, app: App):
        self.input.feed(event)

    def _on_new_best(self, event):
        self.modals.clear()
        self.modals.push(GameOverModal(event.score, event.score, True, self.rng))

    def _on_try_again(self, event):
        self.modals.clear()
        self.modals.push(GameOverModal(event.score, event.best, False, self.rng))

    # ── frame ───────────────────────────────────────────────────────

    def update(self, dt: float, app: App):
        session = self.session
        inp = self.input

        if inp.just("toggle_debug"):
            self.show_debug = not self.show_debug
        if inp.just("reload_tuning"):
            tuning_mod.reload()

        if self.modals.is_open:
            self._apply(self.modals.handle_input(inp), app)
        else:
            if inp.just("pause") or inp.just("escape"):
                session.pause()
                self.modals.push(PauseModal())
            elif inp.just("quit"):
                self._apply([QuitToMenu()], app)
            if inp.just("mute"):
                session.toggle_mute()

        if session.status is Status.IDLE:
            app.pop_scene()
            return

        inp.apply_drive(session.intent)
        delta = session.clock.mark(pygame.time.get_ticks())
        session.tick(delta)
        session.bus.drain()

        inp.begin_frame()
        inp.set_context(_CONTEXT_FOR_STATUS[session.status])

    def _apply(self, cmds: list, app: App):
        session = self.session
        for cmd in cmds:
            if isinstance(cmd, ResumeRace):
                self.modals.pop()
                session.resume()
            elif isinstance(cmd, RestartRace):
                self.modals.clear()
                session.start()
            elif isinstance(cmd, QuitToMenu):
                self.modals.clear()
                session.quit()
            elif isinstance(cmd, ToggleMute):
                session.toggle_mute()

    def draw(self, surface: pygame.Surface, app: App):
        render_snapshot(surface, app, self.session.snapshot())
        if self.show_debug:
            draw_debug_overlay(surface, app, self.session)
        self.modals.draw(surface, app)
