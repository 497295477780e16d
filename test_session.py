"""test_session.py — Session state machine, scoring and game over.

Every test drives a real ``Session`` headless: a ``MemoryScoreStore``
stands in for the save file and a fixed RNG keeps random traffic off
the road unless a test places it explicitly.

Run: python test_session.py
"""
from __future__ import annotations
import os, random, sys, tempfile, traceback

from components import Status, Difficulty, Obstacle, Coin
from core import tuning
from core.events import EventBus
from core.save import MemoryScoreStore
from logic.session import Session, difficulty_profile


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    print(f"  [FAIL] {label}")
    if detail:
        for line in detail.strip().splitlines():
            print(f"         {line}")


class _QuietRng(random.Random):
    """Never passes a spawn roll."""

    def random(self):
        return 0.999


def _session(best: int = 0, difficulty: str | None = "medium") -> Session:
    s = Session(width=500, height=600, store=MemoryScoreStore(best),
                rng=_QuietRng(4))
    if difficulty is not None:
        s.start(difficulty)
    return s


def _crash_into(s: Session) -> Obstacle:
    """Put a car just above the player so the next tick hits it."""
    p = s.player
    car = Obstacle(x=p.x, y=p.y - 30.0, width=p.width, height=p.height)
    s.pools.obstacles.append(car)
    return car


# ════════════════════════════════════════════════════════════════════════
#  1 — Start
# ════════════════════════════════════════════════════════════════════════

def test_initial_state():
    print("\n=== 1: Start ===")
    s = Session(store=MemoryScoreStore(750))
    assert s.status is Status.IDLE and not s.running
    assert s.best_score == 750 and s.score == 0
    assert s.difficulty is Difficulty.MEDIUM
    assert not s.tick(16.0), "tick while idle is a no-op"
    ok("New session is idle with the stored best score")


def test_start_resets_everything():
    for diff, base, top in (("easy", 2.0, 10.0), ("medium", 3.0, 15.0),
                            ("hard", 4.0, 20.0)):
        s = _session(difficulty=diff)
        assert s.status is Status.RUNNING
        assert s.speed == base and s.base_speed == base and s.max_speed == top
        assert s.speed_increment == 0.001
        assert s.score == 0
        assert s.pools.counts() == {"obstacles": 0, "coins": 0, "particles": 0}
        assert (s.player.x, s.player.y) == (230.0, 480.0)
    ok("start(): speed == base speed, score 0, empty pools, player centred")

    s = _session(difficulty="easy")
    s.start(Difficulty.HARD)
    assert s.difficulty is Difficulty.HARD and s.speed == 4.0
    s.start()
    assert s.difficulty is Difficulty.HARD, "restart keeps the difficulty"
    ok("start() with no argument reuses the last difficulty")


def test_invalid_difficulty():
    s = _session(difficulty=None)
    try:
        s.start("insane")
    except ValueError:
        pass
    else:
        raise AssertionError("unknown difficulty must raise")
    assert s.status is Status.IDLE and s.difficulty is Difficulty.MEDIUM
    ok("Unknown difficulty raises ValueError and leaves the session idle")

    try:
        difficulty_profile("nightmare")
    except ValueError:
        ok("difficulty_profile rejects unknown names too")
    else:
        raise AssertionError("difficulty_profile accepted a bad name")


# ════════════════════════════════════════════════════════════════════════
#  2 — Running
# ════════════════════════════════════════════════════════════════════════

def test_speed_and_score_ramp():
    print("\n=== 2: Running ===")
    s = _session(difficulty="hard")
    assert s.tick(16.0)
    assert abs(s.speed - 4.001) < 1e-9
    assert s.score == 0, "floor(4.001 / 10) is 0"
    ok("First tick ramps speed by 0.001, no points below speed 10")

    s.clock.speed = 15.0
    s.clock.max_speed = 15.0
    s.tick()
    assert s.score == 1 and s.speed == 15.0
    s.tick()
    assert s.score == 2
    ok("At speed 15 each tick is worth 1 point; speed stays at the cap")

    last = s.speed
    s.clock.max_speed = 20.0
    for _ in range(500):
        s.tick()
        assert last <= s.speed <= s.max_speed
        last = s.speed
    ok("Speed never decreases and never passes max_speed")


def test_coin_pickup():
    s = _session()
    p = s.player
    s.pools.coins.append(Coin(x=p.x + 10.0, y=p.y - 10.0))
    s.tick()
    assert s.score == 100, s.score
    assert s.pools.coins == []
    assert s.pools.particles.count == 10
    assert all(q.life == 29 for q in s.pools.particles.particles)
    assert [e.value for e in s.bus.pending() if type(e).__name__ == "CoinCollected"] == [100]
    assert s.log.for_cat("pickup")
    ok("Coin pickup: +100, burst of 10 particles, CoinCollected queued")


def test_pause_freezes_world():
    s = _session()
    s.pools.obstacles.append(Obstacle(x=30.0, y=100.0))
    s.pools.coins.append(Coin(x=440.0, y=50.0))
    s.pools.particles.emit_burst(200.0, 200.0)
    s.tick()

    s.pause()
    assert s.status is Status.PAUSED
    before = s.snapshot()
    assert not s.tick(16.0)
    assert not s.tick(16.0)
    assert s.snapshot() == before
    ok("Two ticks while paused change nothing")

    s.resume()
    assert s.status is Status.RUNNING
    y0 = s.pools.obstacles[0].y
    assert s.tick(16.0)
    assert s.pools.obstacles[0].y > y0
    assert s.clock.mark(5000.0) == 0.0, "resume resets the frame timer"
    ok("Resume continues from where it stopped")

    s.toggle_pause()
    assert s.status is Status.PAUSED
    s.toggle_pause()
    assert s.status is Status.RUNNING
    ok("toggle_pause flips between running and paused")


def test_commands_in_wrong_state():
    s = _session(difficulty=None)
    s.pause()
    s.resume()
    s.quit()
    assert s.status is Status.IDLE
    s.start()
    s.resume()
    assert s.status is Status.RUNNING
    _crash_into(s)
    s.tick()
    s.pause()
    s.resume()
    assert s.status is Status.GAME_OVER
    ok("pause/resume/quit outside their states are no-ops")


def test_quit_to_menu():
    s = _session()
    s.intent.move_left = True
    s.pause()
    s.quit()
    assert s.status is Status.IDLE and not s.intent.move_left
    assert not s.tick()
    ok("Quit from paused returns to idle")

    s.start()
    _crash_into(s)
    s.tick()
    s.quit()
    assert s.status is Status.IDLE
    ok("Quit from game over returns to idle")


# ════════════════════════════════════════════════════════════════════════
#  3 — Game over
# ════════════════════════════════════════════════════════════════════════

def test_new_best_score():
    print("\n=== 3: Game over ===")
    s = _session(best=300)
    s.score = 500
    _crash_into(s)
    s.tick()
    assert s.status is Status.GAME_OVER
    assert s.best_score == 500 and s.store.best == 500 and s.store.saves == 1
    names = [type(e).__name__ for e in s.bus.pending()]
    assert "Crashed" in names and "NewBestScore" in names and "TryAgain" not in names
    ok("500 over a best of 300: saved, NewBestScore emitted")


def test_no_new_best_score():
    s = _session(best=300)
    s.score = 200
    _crash_into(s)
    s.tick()
    assert s.status is Status.GAME_OVER
    assert s.best_score == 300 and s.store.saves == 0
    names = [type(e).__name__ for e in s.bus.pending()]
    assert "TryAgain" in names and "NewBestScore" not in names
    ok("200 under a best of 300: nothing saved, TryAgain emitted")

    s = _session(best=300)
    s.score = 300
    _crash_into(s)
    s.tick()
    assert s.store.saves == 0
    ok("Equalling the best is not a new best")


def test_crash_tick_finishes():
    s = _session()
    p = s.player
    car = _crash_into(s)
    later = Obstacle(x=440.0, y=10.0)
    s.pools.obstacles.append(later)
    s.pools.coins.append(Coin(x=p.x + 10.0, y=p.y - 10.0))
    s.tick()

    assert s.status is Status.GAME_OVER
    assert car in s.pools.obstacles, "the car that was hit stays on the road"
    assert later.y > 10.0, "cars after the hit still moved"
    assert s.score == 100 and s.best_score == 100
    crashes = s.log.for_cat("crash")
    assert len(crashes) == 1 and "score 100" in crashes[0]["msg"]
    ok("Crash tick still updates the rest of the road and counts the coin")

    frozen = s.snapshot()
    assert not s.tick()
    assert s.snapshot() == frozen
    ok("Nothing moves after game over")


def test_tuning_reload_waits_for_next_race():
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "tuning.toml")
        try:
            with open(path, "w") as f:
                f.write("[coin]\nvalue = 100\n\n[spawn]\ncoin_chance = 0.015\n")
            tuning.load(path)
            s = _session()

            with open(path, "w") as f:
                f.write("[coin]\nvalue = 5\nspin = 0.5\n\n[spawn]\ncoin_chance = 1.0\n")
            tuning.reload()

            p = s.player
            coin = Coin(x=p.x + 10.0, y=p.y - 10.0)
            s.pools.coins.append(coin)
            s.tick()
            assert s.score == 100, s.score
            assert abs(coin.rotation - 0.1) < 1e-9
            assert s.pools.coin_chance == 0.015 and not s.pools.coins
            ok("Reloading tuning mid-race leaves coin value, spin and spawn rates alone")

            s.start()
            assert s.coin_value == 5 and s.pools.coin_spin == 0.5
            assert s.pools.coin_chance == 1.0
            ok("The next race picks up the reloaded values")
        finally:
            tuning.reset()


def test_restart_after_game_over():
    s = _session(best=0)
    s.pools.coins.append(Coin(x=10.0, y=10.0))
    s.score = 50
    _crash_into(s)
    s.tick()
    assert s.status is Status.GAME_OVER

    s.start()
    assert s.status is Status.RUNNING
    assert s.score == 0 and s.best_score == 50
    assert not s.pools.obstacles and not s.pools.coins
    assert s.speed == s.base_speed
    ok("Restart clears the road and score but keeps the best")


def test_status_event_sequence():
    bus = EventBus()
    s = Session(store=MemoryScoreStore(), rng=_QuietRng(1), bus=bus)
    seen = []
    bus.subscribe("StatusChanged", lambda e: seen.append((e.old, e.new)))

    s.start("easy")
    s.pause()
    s.resume()
    _crash_into(s)
    s.tick()
    s.start()
    s.quit()
    bus.drain()
    assert seen == [
        ("idle", "running"),
        ("running", "paused"),
        ("paused", "running"),
        ("running", "game_over"),
        ("game_over", "running"),
        ("running", "idle"),
    ], seen
    assert len(s.log.for_cat("status")) == 6
    ok("StatusChanged follows every transition, mirrored in the session log")


def test_snapshot_contents():
    s = _session(best=12)
    s.pools.obstacles.append(Obstacle(x=30.0, y=100.0, color=(1, 2, 3)))
    s.tick()
    snap = s.snapshot()
    assert snap.status is Status.RUNNING and snap.best_score == 12
    assert snap.speed_display == 30
    assert snap.road_width == 500 and snap.lanes == 5
    assert snap.player == (230.0, 480.0, 40.0, 70.0)
    assert snap.obstacles[0][4] == (1, 2, 3)
    assert len(snap.stripes) == len(s.road.stripes)
    ok("Snapshot carries status, scores, speedometer, road and entities")

    assert s.toggle_mute() is True and s.snapshot().muted
    assert s.toggle_mute() is False
    ok("Mute flag shows up in the snapshot")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Initial state", test_initial_state),
        ("Start", test_start_resets_everything),
        ("Invalid difficulty", test_invalid_difficulty),
        ("Speed/score ramp", test_speed_and_score_ramp),
        ("Coin pickup", test_coin_pickup),
        ("Pause", test_pause_freezes_world),
        ("Wrong-state commands", test_commands_in_wrong_state),
        ("Quit", test_quit_to_menu),
        ("New best", test_new_best_score),
        ("No new best", test_no_new_best_score),
        ("Crash tick", test_crash_tick_finishes),
        ("Restart", test_restart_after_game_over),
        ("Tuning reload", test_tuning_reload_waits_for_next_race),
        ("Status events", test_status_event_sequence),
        ("Snapshot", test_snapshot_contents),
    ]

    for name, fn in sections:
        try:
            fn()
        except Exception:
            fail(name, traceback.format_exc())

    total = _passed + _failed
    print(f"\n{'=' * 60}")
    print(f"  Session Tests: {_passed} passed, {_failed} failed  (total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
