"""test_input.py — Input intents, overlay commands and sound cues.

Feeds synthetic pygame events, so no window is needed.

Run: python test_input.py
"""
from __future__ import annotations
import os, random, sys, traceback

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame

from components import DriveIntent
from core.constants import NEW_BEST_MESSAGE, TRY_AGAIN_MESSAGES
from core.events import EventBus, CoinCollected, Crashed
from logic.audio import AudioCues, CUES, FIRED_HISTORY, synth_samples
from logic.input_manager import InputManager, InputContext
from ui import (
    ModalStack, PauseModal, GameOverModal, pick_message,
    ResumeRace, RestartRace, QuitToMenu, ToggleMute,
)


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


def _down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)

def _up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


# ════════════════════════════════════════════════════════════════════════
#  1 — Input manager
# ════════════════════════════════════════════════════════════════════════

def test_pause_debounce():
    print("\n=== 1: Input manager ===")
    inp = InputManager(InputContext.RACE)
    inp.feed(_down(pygame.K_p))
    assert inp.just("pause")
    inp.begin_frame()
    inp.feed(_down(pygame.K_p))            # OS key-repeat, no KEYUP between
    assert not inp.just("pause")
    ok("Holding P fires pause once")

    inp.feed(_up(pygame.K_p))
    inp.begin_frame()
    inp.feed(_down(pygame.K_p))
    assert inp.just("pause")
    ok("Release and press again fires pause again")


def test_drive_intent():
    inp = InputManager(InputContext.RACE)
    intent = DriveIntent()
    inp.feed(_down(pygame.K_LEFT))
    inp.feed(_down(pygame.K_d))
    inp.apply_drive(intent)
    assert intent.move_left and intent.move_right
    ok("Left arrow and D held together set both flags")

    inp.begin_frame()
    inp.feed(_up(pygame.K_LEFT))
    inp.apply_drive(intent)
    assert not intent.move_left and intent.move_right
    ok("KEYUP releases the flag; begin_frame() keeps held keys")

    inp.feed(pygame.event.Event(pygame.WINDOWFOCUSLOST))
    inp.apply_drive(intent)
    assert not intent.move_right
    ok("Losing focus releases everything")


def test_contexts():
    inp = InputManager(InputContext.RACE)
    inp.feed(_down(pygame.K_ESCAPE))
    assert inp.just("escape") and not inp.just("exit")
    inp.release_all()

    inp.set_context(InputContext.MENU)
    inp.feed(_down(pygame.K_ESCAPE))
    assert inp.just("exit") and not inp.just("escape")
    inp.release_all()

    inp.set_context(InputContext.GAME_OVER)
    inp.feed(_down(pygame.K_r))
    inp.feed(_down(pygame.K_RETURN))
    assert inp.any_pressed() == {"restart", "ui_confirm"}
    ok("Esc pauses in a race, exits from the menu; R restarts after a crash")

    inp = InputManager(InputContext.RACE)
    inp.feed(_down(pygame.K_a))
    inp.set_context(InputContext.PAUSED)
    assert not inp.held("move_left"), "no steering bound while paused"
    inp.set_context(InputContext.RACE)
    assert inp.held("move_left"), "the key is still physically down"
    ok("Switching context keeps keys held")

    inp.begin_frame()
    inp.feed(pygame.event.Event(pygame.QUIT))
    inp.feed(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(5, 5), button=1))
    assert inp.any_pressed() == set() and inp.held("move_left")
    ok("Non-key events map to no intent and leave held keys alone")


# ════════════════════════════════════════════════════════════════════════
#  2 — Overlays
# ════════════════════════════════════════════════════════════════════════

def test_pause_modal_commands():
    print("\n=== 2: Overlays ===")
    inp = InputManager(InputContext.PAUSED)
    modal = PauseModal()
    stack = ModalStack()
    stack.push(modal)

    inp.feed(_down(pygame.K_p))
    assert stack.handle_input(inp) == [ResumeRace()]
    inp.release_all()

    inp.feed(_down(pygame.K_DOWN))
    inp.feed(_down(pygame.K_RETURN))
    assert stack.handle_input(inp) == [QuitToMenu()]
    assert modal.selected == 1
    inp.release_all()

    inp.feed(_down(pygame.K_m))
    assert stack.handle_input(inp) == [ToggleMute()]
    ok("Pause overlay: P resumes, menu row quits, M mutes")

    assert stack.pop() is modal and not stack.is_open
    assert stack.pop() is None
    assert stack.handle_input(inp) == []
    ok("Empty stack ignores input")


def test_game_over_modal():
    inp = InputManager(InputContext.GAME_OVER)
    modal = GameOverModal(score=420, best=900, new_best=False,
                          rng=random.Random(3))
    assert modal.message in TRY_AGAIN_MESSAGES

    inp.feed(_down(pygame.K_r))
    assert modal.handle_input(inp) == [RestartRace()]
    inp.release_all()
    inp.feed(_down(pygame.K_UP))
    inp.feed(_down(pygame.K_SPACE))
    assert modal.handle_input(inp) == [QuitToMenu()]
    ok("Game-over overlay: R restarts, wrapping cursor picks Menu")


def test_pick_message():
    assert pick_message(True) == NEW_BEST_MESSAGE
    rng = random.Random(8)
    seen = {pick_message(False, rng) for _ in range(300)}
    assert seen == set(TRY_AGAIN_MESSAGES)
    assert NEW_BEST_MESSAGE not in seen
    ok("New best shows the banner; otherwise one of the five flavour lines")


# ════════════════════════════════════════════════════════════════════════
#  3 — Sound cues
# ════════════════════════════════════════════════════════════════════════

def test_audio_cues_follow_events():
    print("\n=== 3: Sound cues ===")
    bus = EventBus()
    muted = [False]
    cues = AudioCues(bus, is_muted=lambda: muted[0], enabled=False)
    assert not cues.enabled

    bus.emit(CoinCollected(value=100))
    bus.emit(Crashed(score=5))
    bus.drain()
    assert list(cues.fired) == ["coin", "crash"]
    ok("CoinCollected → coin, Crashed → crash")

    muted[0] = True
    bus.emit(CoinCollected(value=100))
    bus.drain()
    assert list(cues.fired) == ["coin", "crash"]
    assert cues.play("coin") is False
    ok("Muted cues are dropped")

    muted[0] = False
    for _ in range(FIRED_HISTORY * 3):
        cues.play("coin")
    cues.play("crash")
    assert len(cues.fired) == FIRED_HISTORY
    assert cues.fired[-1] == "crash"
    ok("Cue history keeps only the most recent cues")


def test_synth_samples():
    freq, wave, gain, duration = CUES["coin"]
    samples = synth_samples(freq, wave, gain, duration, rate=8000)
    assert abs(len(samples) - 800) <= 1
    peak = max(abs(s) for s in samples[:40])
    tail = max(abs(s) for s in samples[-40:])
    assert peak > 0.2 * 32767 and tail < 0.02 * 32767, (peak, tail)
    ok("Coin tone: 0.1 s and fades from 0.3 to ~0.01")

    saw = synth_samples(*CUES["crash"], rate=8000)
    assert abs(len(saw) - 2400) <= 1
    try:
        synth_samples(440.0, "square", 0.5, 0.1)
    except ValueError:
        ok("Sawtooth crash tone; unknown waveforms raise ValueError")
    else:
        raise AssertionError("square wave should be rejected")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Pause debounce", test_pause_debounce),
        ("Drive intent", test_drive_intent),
        ("Contexts", test_contexts),
        ("Pause modal", test_pause_modal_commands),
        ("Game-over modal", test_game_over_modal),
        ("Messages", test_pick_message),
        ("Audio cues", test_audio_cues_follow_events),
        ("Synth", test_synth_samples),
    ]

    for name, fn in sections:
        try:
            fn()
        except Exception:
            fail(name, traceback.format_exc())

    total = _passed + _failed
    print(f"\n{'=' * 60}")
    print(f"  Input Tests: {_passed} passed, {_failed} failed  (total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
