"""logic/pools.py — Obstacle, coin and particle pools.

Spawning, falling, pruning and player collision for everything that
scrolls down the road.  The session calls the steps in this order each
tick::

    pools.spawn(road, player)
    crashed = pools.update_obstacles(speed, road, player)
    picked = pools.update_coins(speed, road, player)
    pools.update_particles()

Pruning never removes from the list being iterated: each update walks
the pool once and keeps survivors in a fresh list, so every entity
present at the start of the tick is moved and tested exactly once.
"""

from __future__ import annotations
import random

from components import Obstacle, Coin, Player, Road
from core.collision import overlaps
from core.constants import OBSTACLE_PALETTE
from core.tuning import get as _tun
from logic.particles import ParticleManager
from logic.road import lane_x


class EntityPools:
    """Owns every obstacle, coin and particle in the current race."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self.obstacles: list[Obstacle] = []
        self.coins: list[Coin] = []
        self.particles = ParticleManager(rng=self.rng)
        self.configure()

    def configure(self) -> None:
        """Read spawn and coin tuning.  Called once per race, not per tick."""
        self.obstacle_chance = float(_tun("spawn", "obstacle_chance", 0.02))
        self.coin_chance = float(_tun("spawn", "coin_chance", 0.015))
        self.coin_size = float(_tun("coin", "size", 20))
        self.coin_spin = float(_tun("coin", "spin", 0.1))

    # ── spawning ─────────────────────────────────────────────────────

    def spawn(self, road: Road, player: Player) -> None:
        """Roll once for an obstacle, then once for a coin."""
        if self.rng.random() < self.obstacle_chance:
            self.spawn_obstacle(road, player)
        if self.rng.random() < self.coin_chance:
            self.spawn_coin(road)

    def spawn_obstacle(self, road: Road, player: Player,
                       lane: int | None = None) -> Obstacle:
        """Add a player-sized car just above the top edge of *lane*."""
        if lane is None:
            lane = self.rng.randrange(road.lanes)
        obstacle = Obstacle(
            x=lane_x(road, lane, player.width),
            y=-player.height,
            width=player.width,
            height=player.height,
            color=self.rng.choice(OBSTACLE_PALETTE),
            lane=lane,
        )
        self.obstacles.append(obstacle)
        return obstacle

    def spawn_coin(self, road: Road, lane: int | None = None) -> Coin:
        """Add a coin just above the top edge of *lane*."""
        if lane is None:
            lane = self.rng.randrange(road.lanes)
        size = self.coin_size
        coin = Coin(x=lane_x(road, lane, size), y=-size, size=size,
                    rotation=0.0, lane=lane)
        self.coins.append(coin)
        return coin

    # ── per-tick updates ─────────────────────────────────────────────

    def update_obstacles(self, speed: float, road: Road, player: Player) -> bool:
        """Move every obstacle down; return True if any touches the player.

        A colliding obstacle stays in the pool: the crash ends the
        race, it does not clear the car.
        """
        crashed = False
        survivors: list[Obstacle] = []
        for obstacle in self.obstacles:
            obstacle.y += speed
            if overlaps(player, obstacle):
                crashed = True
            if obstacle.y <= road.height:
                survivors.append(obstacle)
        self.obstacles = survivors
        return crashed

    def update_coins(self, speed: float, road: Road, player: Player) -> list[Coin]:
        """Move and spin every coin; collect the ones the player touches.

        Each collected coin bursts into particles at its centre and is
        dropped from the pool.  Returns the collected coins in order.
        """
        spin = self.coin_spin
        collected: list[Coin] = []
        survivors: list[Coin] = []
        for coin in self.coins:
            coin.y += speed
            coin.rotation += spin
            if coin.y > road.height:
                continue
            if overlaps(player, coin):
                cx, cy = coin.center
                self.particles.emit_burst(cx, cy)
                collected.append(coin)
                continue
            survivors.append(coin)
        self.coins = survivors
        return collected

    def update_particles(self) -> None:
        self.particles.update()

    # ── housekeeping ─────────────────────────────────────────────────

    def clear(self) -> None:
        self.obstacles = []
        self.coins = []
        self.particles.clear()

    def counts(self) -> dict[str, int]:
        return {
            "obstacles": len(self.obstacles),
            "coins": len(self.coins),
            "particles": self.particles.count,
        }

    def __repr__(self) -> str:
        c = self.counts()
        return (f"EntityPools(obstacles={c['obstacles']}, coins={c['coins']}, "
                f"particles={c['particles']})")
