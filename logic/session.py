"""logic/session.py — The game session: one owned aggregate for a whole run.

The session holds the player, road, entity pools, simulation clock,
steering intent and score, and moves between four states::

    IDLE ──start──▶ RUNNING ◀──resume/pause──▶ PAUSED
                      │                           │
                   collision                     quit
                      ▼                           ▼
                  GAME_OVER ──start (restart)──▶ RUNNING
                      │
                     quit ──▶ IDLE

Scenes pass the session around explicitly; nothing here is global.
The presentation layer reads ``snapshot()``; the input layer writes
``session.intent`` and calls the commands.  Side effects that other
collaborators care about (coin pickups, crashes, new best score) go out
on ``session.bus`` and are delivered when the scene drains it.

Per-tick order (``tick``)::

    clock  → road → player → spawn → obstacles → coins → particles
                                        │
                              collision marks the tick as crashed;
                              the rest of the tick still runs, then
                              the session enters GAME_OVER.
"""

from __future__ import annotations
import random

from components import (
    Status, Difficulty, DifficultyProfile, SessionSnapshot, SessionLog,
    DriveIntent, Player, Road,
)
from core.constants import SCREEN_W, SCREEN_H
from core.events import (
    EventBus, StatusChanged, SessionStarted, CoinCollected, Crashed,
    NewBestScore, TryAgain,
)
from core.save import ScoreStore, MemoryScoreStore
from core.tuning import get as _tun
from logic.clock import SimulationClock
from logic.player import make_player, place_player, player_system
from logic.pools import EntityPools
from logic.road import build_road, scroll_road


_DEFAULT_SPEEDS = {
    Difficulty.EASY:   (2.0, 10.0),
    Difficulty.MEDIUM: (3.0, 15.0),
    Difficulty.HARD:   (4.0, 20.0),
}


def difficulty_profile(difficulty: Difficulty | str) -> DifficultyProfile:
    """Speed bounds for *difficulty* from ``[difficulty.<name>]`` tuning.

    Raises ``ValueError`` if the tuned bounds could push speed outside
    ``base_speed ≤ speed ≤ max_speed`` or make it decrease.
    """
    difficulty = Difficulty.parse(difficulty)
    base, top = _DEFAULT_SPEEDS[difficulty]
    section = f"difficulty.{difficulty.value}"
    profile = DifficultyProfile(
        base_speed=float(_tun(section, "base_speed", base)),
        max_speed=float(_tun(section, "max_speed", top)),
        speed_increment=float(_tun("speed", "increment", 0.001)),
    )
    if profile.base_speed > profile.max_speed:
        raise ValueError(f"[{section}] base_speed {profile.base_speed} is above "
                         f"max_speed {profile.max_speed}")
    if profile.speed_increment < 0:
        raise ValueError(f"[speed] increment {profile.speed_increment} is negative")
    return profile


class Session:
    """Everything that changes during play, plus the commands that change it."""

    def __init__(self, width: float = SCREEN_W, height: float = SCREEN_H,
                 store: ScoreStore | None = None,
                 rng: random.Random | None = None,
                 bus: EventBus | None = None):
        self.width = width
        self.height = height
        self.store: ScoreStore = store if store is not None else MemoryScoreStore()
        self.rng = rng or random.Random()
        self.bus = bus or EventBus()
        self.log = SessionLog()

        self.status = Status.IDLE
        self.difficulty = Difficulty.MEDIUM
        self.score = 0
        self.best_score = self.store.load_best_score()
        self.muted = False

        profile = difficulty_profile(self.difficulty)
        self.clock = SimulationClock(profile.base_speed, profile.max_speed,
                                     profile.speed_increment)
        self.intent = DriveIntent()
        self.pools = EntityPools(rng=self.rng)
        self.coin_value = int(_tun("coin", "value", 100))
        self.road: Road = build_road(width, height)
        self.player: Player = make_player()
        place_player(self.player, self.road)

    # ── clock passthroughs ──────────────────────────────────────────

    @property
    def speed(self) -> float:
        return self.clock.speed

    @property
    def base_speed(self) -> float:
        return self.clock.base_speed

    @property
    def max_speed(self) -> float:
        return self.clock.max_speed

    @property
    def speed_increment(self) -> float:
        return self.clock.speed_increment

    @property
    def running(self) -> bool:
        return self.status is Status.RUNNING

    # ── commands ────────────────────────────────────────────────────

    def start(self, difficulty: Difficulty | str | None = None) -> None:
        """Begin a fresh race (also the restart command after game over).

        Raises ``ValueError`` for an unknown difficulty, before any
        state is touched.
        """
        chosen = self.difficulty if difficulty is None else Difficulty.parse(difficulty)
        profile = difficulty_profile(chosen)

        self.difficulty = chosen
        self.clock.configure(profile.base_speed, profile.max_speed,
                             profile.speed_increment)
        self.score = 0
        self.pools.clear()
        self.pools.configure()
        self.coin_value = int(_tun("coin", "value", 100))
        self.road = build_road(self.width, self.height)
        self.player = make_player()
        place_player(self.player, self.road)
        self.intent.clear()

        print(f"[SESSION] Start {chosen.value}: speed {profile.base_speed} → "
              f"{profile.max_speed}, best {self.best_score}")
        self.bus.emit(SessionStarted(difficulty=chosen.value,
                                     base_speed=profile.base_speed,
                                     max_speed=profile.max_speed))
        self._set_status(Status.RUNNING)

    def pause(self) -> None:
        if self.status is Status.RUNNING:
            self._set_status(Status.PAUSED)

    def resume(self) -> None:
        if self.status is Status.PAUSED:
            self.clock.reset()
            self._set_status(Status.RUNNING)

    def toggle_pause(self) -> None:
        if self.status is Status.RUNNING:
            self.pause()
        elif self.status is Status.PAUSED:
            self.resume()

    def quit(self) -> None:
        """Abandon the race and return to the menu."""
        if self.status is Status.IDLE:
            return
        self.intent.clear()
        print(f"[SESSION] Quit to menu (score {self.score})")
        self._set_status(Status.IDLE)

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted

    # ── simulation ──────────────────────────────────────────────────

    def tick(self, delta_time: float = 0.0) -> bool:
        """Advance one frame.  Returns False (and changes nothing) unless running.

        *delta_time* is recorded by the clock but does not scale any
        movement; all speeds are per tick.
        """
        if self.status is not Status.RUNNING:
            return False

        self.score += self.clock.advance(delta_time)
        speed = self.clock.speed

        scroll_road(self.road, speed)
        player_system(self.player, self.intent, self.road)

        pools = self.pools
        pools.spawn(self.road, self.player)
        crashed = pools.update_obstacles(speed, self.road, self.player)
        value = self.coin_value
        for coin in pools.update_coins(speed, self.road, self.player):
            self.score += value
            cx, cy = coin.center
            self.bus.emit(CoinCollected(x=cx, y=cy, value=value))
            self.log.record("pickup", f"coin +{value}", t=self.clock.elapsed,
                            frame=self.clock.frames)
        pools.update_particles()

        if crashed:
            self._game_over()
        return True

    def _game_over(self) -> None:
        previous = self.best_score
        self._set_status(Status.GAME_OVER)
        self.intent.clear()
        self.bus.emit(Crashed(score=self.score))
        p = self.player
        self.log.record("crash", f"crash at x={p.x:.0f}, score {self.score}",
                        t=self.clock.elapsed, frame=self.clock.frames,
                        details={"speed": round(self.clock.speed, 3)})

        if self.score > previous:
            self.best_score = self.score
            self.store.save_best_score(self.best_score)
            self.bus.emit(NewBestScore(score=self.score, previous=previous))
            print(f"[SESSION] Game over: new best {self.score} (was {previous})")
        else:
            self.bus.emit(TryAgain(score=self.score, best=previous))
            print(f"[SESSION] Game over: score {self.score}, best {previous}")

    def _set_status(self, new: Status) -> None:
        old = self.status
        if old is new:
            return
        self.status = new
        self.log.record("status", f"{old.value} → {new.value}",
                        t=self.clock.elapsed, frame=self.clock.frames,
                        details={"score": self.score})
        self.bus.emit(StatusChanged(old=old.value, new=new.value))

    # ── presentation ────────────────────────────────────────────────

    def snapshot(self) -> SessionSnapshot:
        p = self.player
        road = self.road
        return SessionSnapshot(
            status=self.status,
            score=self.score,
            best_score=self.best_score,
            speed=self.clock.speed,
            difficulty=self.difficulty,
            muted=self.muted,
            road_width=road.width,
            road_height=road.height,
            lanes=road.lanes,
            stripe_height=road.stripe_height,
            stripes=tuple(s.y for s in road.stripes),
            road_offset=road.offset,
            player=(p.x, p.y, p.width, p.height),
            player_color=p.color,
            obstacles=tuple((o.x, o.y, o.width, o.height, o.color)
                            for o in self.pools.obstacles),
            coins=tuple((c.x, c.y, c.size, c.rotation) for c in self.pools.coins),
            particles=tuple((q.x, q.y, q.size, q.color, q.alpha)
                            for q in self.pools.particles.particles),
        )

    def __repr__(self) -> str:
        return (f"Session(status={self.status.value}, score={self.score}, "
                f"best={self.best_score}, speed={self.clock.speed:.3f}, "
                f"difficulty={self.difficulty.value})")
