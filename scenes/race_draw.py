"""scenes/race_draw.py — Rendering for the race scene.

Everything here reads a ``SessionSnapshot`` (plus the live session for
the debug overlay) and draws; nothing writes game state.

Draw order: road → lane stripes → edge lines → obstacle cars → coins
→ particles → player car → HUD.
"""

from __future__ import annotations
import math
import pygame

from core.app import App
from core.constants import (
    COLOR_BACKGROUND, COLOR_ROAD, COLOR_STRIPE, COLOR_EDGE, COLOR_COCKPIT,
    COLOR_WINDOW, COLOR_TAILLIGHT, COLOR_HEADLIGHT, COLOR_COIN,
    COLOR_COIN_SHINE, COLOR_COIN_BORDER, COLOR_HUD,
)
from components import SessionSnapshot


def render_snapshot(surface: pygame.Surface, app: App, snap: SessionSnapshot):
    """Draw one full frame of the race from *snap*."""
    draw_road(surface, snap)
    for x, y, w, h, color in snap.obstacles:
        draw_car(surface, (x, y, w, h), color, is_player=False)
    for x, y, size, rotation in snap.coins:
        draw_coin(surface, x, y, size, rotation)
    draw_particles(surface, snap)
    draw_car(surface, snap.player, snap.player_color, is_player=True)
    draw_hud(surface, app, snap)


# ── Road ───────────────────────────────────────────────────────────

def draw_road(surface: pygame.Surface, snap: SessionSnapshot):
    surface.fill(COLOR_BACKGROUND)
    pygame.draw.rect(surface, COLOR_ROAD, (0, 0, snap.road_width, snap.road_height))

    lane_w = snap.road_width / snap.lanes
    for i in range(1, snap.lanes):
        x = int(i * lane_w)
        for sy in snap.stripes:
            pygame.draw.rect(surface, COLOR_STRIPE,
                             (x - 2, int(sy), 4, int(snap.stripe_height)))

    h = int(snap.road_height)
    w = int(snap.road_width)
    pygame.draw.line(surface, COLOR_EDGE, (0, 0), (0, h), 6)
    pygame.draw.line(surface, COLOR_EDGE, (w, 0), (w, h), 6)


# ── Cars ───────────────────────────────────────────────────────────

def draw_car(surface: pygame.Surface, box, color, *, is_player: bool):
    x, y, w, h = (int(v) for v in box)

    pygame.draw.rect(surface, color, (x, y, w, h))
    # Cockpit and windscreen
    pygame.draw.rect(surface, COLOR_COCKPIT, (x + 5, y + 15, w - 10, 25))
    pygame.draw.rect(surface, COLOR_WINDOW, (x + 8, y + 18, w - 16, 8))
    # Wheels
    for wx in (x - 3, x + w - 3):
        pygame.draw.rect(surface, COLOR_COCKPIT, (wx, y + 10, 6, 15))
        pygame.draw.rect(surface, COLOR_COCKPIT, (wx, y + h - 25, 6, 15))
    # Player shows tail lights at the bottom; oncoming cars show headlights on top
    if is_player:
        pygame.draw.rect(surface, COLOR_TAILLIGHT, (x + 5, y + h - 5, 10, 5))
        pygame.draw.rect(surface, COLOR_TAILLIGHT, (x + w - 15, y + h - 5, 10, 5))
    else:
        pygame.draw.rect(surface, COLOR_HEADLIGHT, (x + 5, y, 10, 5))
        pygame.draw.rect(surface, COLOR_HEADLIGHT, (x + w - 15, y, 10, 5))


# ── Coins ──────────────────────────────────────────────────────────

def draw_coin(surface: pygame.Surface, x: float, y: float, size: float,
              rotation: float):
    r = size / 2
    cx, cy = x + r, y + r
    pygame.draw.circle(surface, COLOR_COIN, (int(cx), int(cy)), int(r))

    # Shine spot sits up-left of centre and turns with the coin.
    cos_r, sin_r = math.cos(rotation), math.sin(rotation)
    sx = cx + (-3 * cos_r + 3 * sin_r)
    sy = cy + (-3 * sin_r - 3 * cos_r)
    pygame.draw.circle(surface, COLOR_COIN_SHINE, (int(sx), int(sy)), max(1, int(size / 4)))

    pygame.draw.circle(surface, COLOR_COIN_BORDER, (int(cx), int(cy)), int(r), 2)


# ── Particles ──────────────────────────────────────────────────────

def draw_particles(surface: pygame.Surface, snap: SessionSnapshot):
    for x, y, size, color, alpha in snap.particles:
        a = int(255 * max(0.0, min(1.0, alpha)))
        s = max(1, int(size))
        if a >= 250:
            pygame.draw.rect(surface, color, (int(x), int(y), s, s))
            continue
        dot = pygame.Surface((s, s), pygame.SRCALPHA)
        r, g, b = color
        dot.fill((r, g, b, a))
        surface.blit(dot, (int(x), int(y)))


# ── HUD ────────────────────────────────────────────────────────────

def draw_hud(surface: pygame.Surface, app: App, snap: SessionSnapshot):
    sw = surface.get_width()
    app.draw_text_bg(surface, f"SCORE {snap.score}", 10, 8, COLOR_HUD, font=app.font)
    app.draw_text_bg(surface, f"SPEED {snap.speed_display}", 10, 30, COLOR_HUD,
                     font=app.font_sm)
    best = f"BEST {snap.best_score}"
    app.draw_text_bg(surface, best, sw - 12 - app.font.size(best)[0], 8,
                     COLOR_COIN, font=app.font)
    if snap.muted:
        app.draw_text_bg(surface, "MUTED", sw - 60, 30, (180, 180, 180),
                         font=app.font_sm)


def draw_debug_overlay(surface: pygame.Surface, app: App, session):
    """Tab overlay: frame rate, pool sizes, clock, recent session log."""
    panel_bg = pygame.Surface((300, 230), pygame.SRCALPHA)
    panel_bg.fill((0, 0, 0, 150))
    surface.blit(panel_bg, (4, 56))

    green = (0, 255, 0)
    y = 62
    lines = [
        f"FPS: {int(app.clock.get_fps())}",
        f"Status: {session.status.value}  Difficulty: {session.difficulty.value}",
        f"Speed: {session.speed:.3f} / {session.max_speed:.1f}",
        f"Frames: {session.clock.frames}  Elapsed: {session.clock.elapsed / 1000:.1f}s",
        f"Pools: {session.pools.counts()}",
        f"Player x: {session.player.x:.1f}",
        f"Events: {session.bus.stats()}",
    ]
    for line in lines:
        app.draw_text(surface, line, 10, y, green, app.font_sm)
        y += 14

    y += 6
    for entry in session.log.recent(6):
        app.draw_text(surface, f"[{entry['frame']:>6}] {entry['cat']}: {entry['msg']}",
                      10, y, (180, 220, 180), app.font_sm)
        y += 14
