"""ui.modal — Overlay base classes and the stack that layers them.

The race draws at most a couple of overlays on top of the frozen road:
the pause menu, and the game-over panel once the session crashes.
Both are ``MenuModal`` subclasses: a short list of options with a
wrapping cursor, plus a few direct hotkeys.

Modals read *intents* from the ``InputManager``, never raw keys, and
answer with a list of commands (see ``ui.commands``).  The race scene
applies the commands to the session; a modal never touches it.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

from ui.helpers import draw_option_row, cycle, ROW_H

if TYPE_CHECKING:
    from logic.input_manager import InputManager
    from ui.commands import UICommand


class Modal(ABC):
    """One overlay on the ``ModalStack``."""

    def on_open(self) -> None:
        pass

    def on_close(self) -> None:
        pass

    @abstractmethod
    def handle_input(self, inp: InputManager) -> list[UICommand]:
        """Commands triggered by this frame's intents (possibly none)."""

    @abstractmethod
    def draw(self, surface: pygame.Surface, app) -> None:
        ...


class MenuModal(Modal):
    """Overlay with selectable rows and intent hotkeys.

    Subclasses fill in ``options`` as ``(label, command type)`` pairs
    and ``hotkeys`` as ``intent → command type``.  Up/Down move the
    cursor (wrapping), confirm fires the selected row.
    """

    options: list[tuple[str, type]] = []
    hotkeys: dict[str, type] = {}

    def __init__(self):
        self.selected = 0

    def handle_input(self, inp: InputManager) -> list[UICommand]:
        cmds: list = [cmd() for intent, cmd in self.hotkeys.items()
                      if inp.just(intent)]
        n = len(self.options)
        if inp.just("ui_up"):
            self.selected = cycle(self.selected, -1, n)
        if inp.just("ui_down"):
            self.selected = cycle(self.selected, 1, n)
        if inp.just("ui_confirm") and n:
            cmds.append(self.options[self.selected][1]())
        return cmds

    def draw_options(self, surface: pygame.Surface, app,
                     x: int, y: int, w: int) -> int:
        """Draw the option rows from *y* down.  Returns the y below them."""
        for i, (label, _cmd) in enumerate(self.options):
            draw_option_row(surface, app, x, y, w, label=label,
                            selected=(i == self.selected))
            y += ROW_H
        return y


class ModalStack:
    """Ordered overlays.  Input goes to the top one; all of them draw."""

    __slots__ = ("_stack",)

    def __init__(self) -> None:
        self._stack: list[Modal] = []

    @property
    def active(self) -> Modal | None:
        return self._stack[-1] if self._stack else None

    @property
    def is_open(self) -> bool:
        return bool(self._stack)

    def __len__(self) -> int:
        return len(self._stack)

    def push(self, modal: Modal) -> None:
        self._stack.append(modal)
        modal.on_open()

    def pop(self) -> Modal | None:
        if not self._stack:
            return None
        modal = self._stack.pop()
        modal.on_close()
        return modal

    def clear(self) -> None:
        while self._stack:
            self.pop()

    def handle_input(self, inp: InputManager) -> list:
        top = self.active
        return top.handle_input(inp) if top else []

    def draw(self, surface: pygame.Surface, app) -> None:
        for modal in self._stack:
            modal.draw(surface, app)
