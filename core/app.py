"""
core/app.py — Pygame application shell

Handles the window, the frame loop, and the scene stack.
You don't edit this file to build the game.
You write Scenes and push/pop them.

    app = App(title="Bink Racing", width=500, height=600)
    app.push_scene(MenuScene(session))
    app.run()

The loop is the game's only scheduler: once per frame it routes events
to the top scene, calls ``update`` and ``draw``, then sleeps to hold
``fps``.  Scenes never schedule anything themselves.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.constants import FPS, SCREEN_W, SCREEN_H, TITLE


class App:
    def __init__(self, title: str = TITLE, width: int = SCREEN_W, height: int = SCREEN_H):
        pygame.init()
        self._windowed_size = (width, height)
        # Virtual (design) resolution; every draw targets this surface.
        self._virtual_size = (width, height)
        self._render_surface = pygame.Surface((width, height))
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fullscreen = False
        self.fps = FPS
        self.dt = 0.0

        # Scene stack, top scene active
        self._scenes: list[Scene] = []

        self.font = pygame.font.SysFont("monospace", 16)
        self.font_sm = pygame.font.SysFont("monospace", 12)
        self.font_lg = pygame.font.SysFont("monospace", 24, bold=True)
        self.font_xl = pygame.font.SysFont("monospace", 40, bold=True)

    @property
    def size(self) -> tuple[int, int]:
        return self._virtual_size

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        print(f"[APP] Scene → {scene.name}")
        scene.on_enter(self)

    def pop_scene(self):
        if self._scenes:
            self._scenes[-1].on_exit(self)
            self._scenes.pop()
        if self._scenes:
            print(f"[APP] Scene ← {self._scenes[-1].name}")
            self._scenes[-1].on_enter(self)
        else:
            self.running = False

    def quit(self):
        """Stop the loop after the current frame."""
        self.running = False

    # -- Main loop --

    def run(self):
        while self.running:
            self.dt = self.clock.tick(self.fps) / 1000.0

            # Events
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    self.toggle_fullscreen()
                elif event.type == pygame.VIDEORESIZE and not self.fullscreen:
                    self._windowed_size = (event.w, event.h)
                    self.screen = pygame.display.set_mode(
                        (event.w, event.h), pygame.RESIZABLE)
                elif self.scene:
                    self.scene.handle_event(event, self)

            # Update
            if self.scene:
                self.scene.update(self.dt, self)

            # Draw to the fixed-size virtual surface, then scale to screen
            if self.scene:
                self.scene.draw(self._render_surface, self)

            pygame.transform.scale(self._render_surface,
                                   self.screen.get_size(), self.screen)
            pygame.display.flip()

        pygame.quit()

    def toggle_fullscreen(self):
        """Switch between windowed and fullscreen (F11)."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(
                self._windowed_size, pygame.RESIZABLE)

    # -- Convenience --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None):
        """Quick text draw. Returns the rect for layout chaining."""
        f = font or self.font
        img = f.render(text, True, color)
        return surface.blit(img, (x, y))

    def draw_text_centered(self, surface: pygame.Surface, text: str, y: int,
                           color=(255, 255, 255), font=None):
        """Draw *text* horizontally centred on *surface* at row *y*."""
        f = font or self.font
        img = f.render(text, True, color)
        x = (surface.get_width() - img.get_width()) // 2
        return surface.blit(img, (x, y))

    def draw_text_bg(self, surface: pygame.Surface, text: str, x: int, y: int,
                     color=(255, 255, 255), bg=(0, 0, 0, 160), font=None,
                     pad: int = 2):
        """Draw text with a semi-transparent background box."""
        f = font or self.font
        img = f.render(text, True, color)
        w, h = img.get_size()
        bg_surf = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
        bg_surf.fill(bg)
        surface.blit(bg_surf, (x - pad, y - pad))
        return surface.blit(img, (x, y))
