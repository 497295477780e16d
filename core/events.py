"""core/events.py — Lightweight event bus.

Decouples the simulation, which *signals* that something happened,
from the collaborators that *react* to it (audio cues, the game-over
overlay, the debug log).  The bus is owned by the ``Session``::

    bus = session.bus
    bus.emit(CoinCollected(x=120.0, y=80.0, value=100))

Consumers subscribe with a callable::

    bus.subscribe("CoinCollected", my_handler)

And the race scene drains once per frame, after ``session.tick()``::

    bus.drain()          # calls all handlers for pending events

Design rules:
  - Events are plain dataclasses with no behaviour.
  - ``emit()`` is O(1) (just appends).
  - ``drain()`` processes all queued events in FIFO order.
  - Handlers may emit new events; those are processed in the same drain.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable
from collections import defaultdict
import traceback


# ═══════════════════════════════════════════════════════════════════
#  Event definitions
# ═══════════════════════════════════════════════════════════════════

@dataclass
class StatusChanged:
    """The session moved between Idle / Running / Paused / GameOver."""
    old: str
    new: str


@dataclass
class SessionStarted:
    """A race began (or restarted) at the given difficulty."""
    difficulty: str
    base_speed: float
    max_speed: float


@dataclass
class CoinCollected:
    """The player picked up a coin.  Drives the ``coin`` sound cue."""
    x: float = 0.0          # coin centre, px
    y: float = 0.0
    value: int = 0


@dataclass
class Crashed:
    """The player hit an obstacle car.  Drives the ``crash`` sound cue."""
    score: int = 0


@dataclass
class NewBestScore:
    """Game over with a score above the stored best."""
    score: int = 0
    previous: int = 0


@dataclass
class TryAgain:
    """Game over without beating the stored best."""
    score: int = 0
    best: int = 0


# ═══════════════════════════════════════════════════════════════════
#  Event Bus
# ═══════════════════════════════════════════════════════════════════

class EventBus:
    """Fire-and-forget event bus owned by the session."""

    def __init__(self):
        self._queue: list[Any] = []
        self._subs: dict[str, list[Callable]] = defaultdict(list)
        self._stats: dict[str, int] = defaultdict(int)

    # ── Public API ───────────────────────────────────────────────────

    def emit(self, event) -> None:
        """Queue an event for processing on next ``drain()``."""
        self._queue.append(event)

    def subscribe(self, event_type: str, handler: Callable) -> None:
        """Register *handler* to receive events of *event_type*.

        *event_type* is the class name, e.g. ``"CoinCollected"``.
        """
        self._subs[event_type].append(handler)

    def unsubscribe(self, event_type: str, handler: Callable) -> None:
        """Remove *handler*; unknown handlers are ignored."""
        handlers = self._subs.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def drain(self) -> int:
        """Process all queued events.  Returns number processed.

        Handlers may emit new events; those are processed in the
        same drain pass (breadth-first).  A handler that raises is
        reported and skipped; the remaining handlers still run.
        """
        processed = 0
        safety = 1000  # prevent infinite loops
        while self._queue and safety > 0:
            batch = self._queue[:]
            self._queue.clear()
            for event in batch:
                name = type(event).__name__
                self._stats[name] += 1
                for handler in list(self._subs.get(name, [])):
                    try:
                        handler(event)
                    except Exception as exc:
                        print(f"[EVENT] handler error for {name}: {exc}")
                        traceback.print_exc()
            processed += len(batch)
            safety -= 1
        return processed

    def clear(self) -> None:
        """Discard all pending events."""
        self._queue.clear()

    def stats(self) -> dict[str, int]:
        """Return cumulative event counts by type."""
        return dict(self._stats)

    def pending(self) -> list[Any]:
        """Copy of the events waiting to be drained."""
        return list(self._queue)

    def pending_count(self) -> int:
        """Number of events waiting to be drained."""
        return len(self._queue)

    def __repr__(self) -> str:
        return f"EventBus(pending={len(self._queue)}, subs={len(self._subs)})"
