"""logic/particles.py — Coin-pickup sparkle particles

Usage:
    particles = ParticleManager(rng=session.rng)

    # Spawn a burst at a coin's centre:
    particles.emit_burst(cx, cy)

    # Once per tick:
    particles.update()

Particles live a fixed number of ticks and fade linearly:
``alpha = life / max_life``.  Drawing is handled by
``scenes/race_draw.draw_particles()``.
"""

from __future__ import annotations
import random

from core.constants import COLOR_COIN
from core.tuning import get as _tun


class Particle:
    __slots__ = ("x", "y", "vx", "vy", "life", "max_life", "alpha", "color", "size")

    def __init__(
        self,
        x: float, y: float,
        vx: float, vy: float,
        life: int,
        color: tuple[int, int, int],
        size: float = 2.0,
    ):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.life = life
        self.max_life = life
        self.alpha = 1.0
        self.color = color
        self.size = size


class ParticleManager:
    """Owns the live particle pool."""

    def __init__(self, max_particles: int | None = None,
                 rng: random.Random | None = None):
        if max_particles is None:
            max_particles = int(_tun("particles", "max_particles", 512))
        self._particles: list[Particle] = []
        self._max = max_particles
        self.rng = rng or random.Random()

    @property
    def count(self) -> int:
        return len(self._particles)

    @property
    def particles(self) -> list[Particle]:
        """Public read-only access to the live particle list."""
        return self._particles

    # ── emitters ─────────────────────────────────────────────────────

    def emit(self, p: Particle):
        """Add a single particle (low-level)."""
        if len(self._particles) < self._max:
            self._particles.append(p)

    def emit_burst(
        self,
        x: float, y: float,
        count: int | None = None,
        color: tuple[int, int, int] = COLOR_COIN,
        life: int | None = None,
        spread: float | None = None,
    ) -> int:
        """Emit a square-spread burst of particles.  Returns how many spawned.

        Args:
            x, y:     burst origin (px)
            count:    number of particles (default: tuning, 10)
            color:    RGB tuple
            life:     ticks each particle lives (default: tuning, 30)
            spread:   each velocity axis is uniform in ±spread/2 px/tick
        """
        if count is None:
            count = int(_tun("particles", "burst_count", 10))
        if life is None:
            life = int(_tun("particles", "life", 30))
        if spread is None:
            spread = float(_tun("particles", "spread", 4.0))
        min_size = float(_tun("particles", "min_size", 2.0))
        size_range = float(_tun("particles", "size_range", 4.0))

        before = len(self._particles)
        rng = self.rng
        for _ in range(count):
            self.emit(Particle(
                x=x, y=y,
                vx=(rng.random() - 0.5) * spread,
                vy=(rng.random() - 0.5) * spread,
                life=life,
                color=color,
                size=rng.random() * size_range + min_size,
            ))
        return len(self._particles) - before

    # ── tick ─────────────────────────────────────────────────────────

    def update(self):
        alive: list[Particle] = []
        for p in self._particles:
            p.x += p.vx
            p.y += p.vy
            p.life -= 1
            p.alpha = p.life / p.max_life
            if p.life > 0:
                alive.append(p)
        self._particles = alive

    def clear(self):
        """Remove all particles immediately."""
        self._particles.clear()
