"""ui.helpers — Shared drawing utilities for overlay panels."""

from __future__ import annotations
import pygame


def draw_overlay(surface: pygame.Surface, alpha: int = 170) -> None:
    """Full-screen semi-transparent dark overlay."""
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))
    surface.blit(overlay, (0, 0))


def panel_rect(surface: pygame.Surface, w: int, h: int) -> pygame.Rect:
    """A *w*×*h* rect centred on *surface*."""
    sw, sh = surface.get_size()
    return pygame.Rect((sw - w) // 2, (sh - h) // 2, w, h)


def draw_panel(surface: pygame.Surface, rect: pygame.Rect) -> None:
    pygame.draw.rect(surface, (30, 39, 52), rect, border_radius=8)
    pygame.draw.rect(surface, (243, 156, 18), rect, width=2, border_radius=8)


def draw_title_bar(
    surface: pygame.Surface, app,
    x: int, y: int, w: int, text: str,
) -> None:
    """Draw a 36 px title bar at the top of a panel."""
    pygame.draw.rect(surface, (44, 62, 80), (x + 2, y + 2, w - 4, 34),
                     border_top_left_radius=8, border_top_right_radius=8)
    img = app.font_lg.render(text, True, (255, 255, 255))
    surface.blit(img, (x + (w - img.get_width()) // 2, y + 6))


# ── option rows ────────────────────────────────────────────────────

ROW_H = 32  # pixel height of one option row


def draw_option_row(
    surface: pygame.Surface,
    app,
    x: int, y: int, w: int,
    *,
    label: str,
    selected: bool = False,
) -> pygame.Rect:
    """Draw a single selectable row.  Returns the row ``Rect``."""
    row_rect = pygame.Rect(x, y, w, ROW_H - 4)
    if selected:
        pygame.draw.rect(surface, (0, 80, 60), row_rect, border_radius=4)
    prefix = "> " if selected else "  "
    color = (255, 255, 255) if selected else (170, 170, 170)
    app.draw_text(surface, f"{prefix}{label}", x + 10, y + 5, color, font=app.font)
    return row_rect


def cycle(index: int, delta: int, count: int) -> int:
    """Move a menu cursor by *delta*, wrapping around *count* rows."""
    return (index + delta) % count if count else 0
