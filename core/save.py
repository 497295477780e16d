"""core/save.py — Best-score persistence.

The only thing the game ever persists is one integer: the best score.
The session talks to a *score store* rather than to the filesystem, so
tests and headless runs can swap in ``MemoryScoreStore``::

    store = JsonScoreStore()            # saves/best_score.json
    best = store.load_best_score()      # 0 if missing / unreadable
    store.save_best_score(1200)

Storage is best-effort: a missing file, a corrupt file, or a read-only
disk all degrade to "best score 0" / "not saved" with a log line, never
an exception.

File format::

    {"binkRacingBest": 1200}
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Protocol

from core.constants import STORAGE_KEY


SAVES_DIR = Path("saves")
BEST_SCORE_FILE = "best_score.json"


class ScoreStore(Protocol):
    """Capability the session needs for persistence."""

    def load_best_score(self) -> int: ...

    def save_best_score(self, score: int) -> None: ...


class JsonScoreStore:
    """Best score kept under ``STORAGE_KEY`` in a small JSON file."""

    def __init__(self, path: str | Path | None = None, key: str = STORAGE_KEY):
        self.path = Path(path) if path is not None else SAVES_DIR / BEST_SCORE_FILE
        self.key = key

    def load_best_score(self) -> int:
        if not self.path.exists():
            return 0
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
            value = int(data.get(self.key, 0))
        except (OSError, ValueError, TypeError, AttributeError, OverflowError) as ex:
            print(f"[SAVE] Error loading best score from {self.path}: {ex}")
            return 0
        return max(0, value)

    def save_best_score(self, score: int) -> None:
        data: dict = {}
        # Keep any other keys someone put in the file.
        if self.path.exists():
            try:
                with open(self.path, "r") as f:
                    loaded = json.load(f)
                if isinstance(loaded, dict):
                    data = loaded
            except (OSError, ValueError):
                data = {}
        data[self.key] = int(score)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(data, f, indent=2)
        except OSError as ex:
            print(f"[SAVE] Could not write best score to {self.path}: {ex}")
            return
        print(f"[SAVE] Best score {score} written to {self.path}")

    def __repr__(self) -> str:
        return f"JsonScoreStore({str(self.path)!r})"


class MemoryScoreStore:
    """In-memory store.  ``saves`` counts writes for tests."""

    def __init__(self, best: int = 0):
        self.best = best
        self.saves = 0

    def load_best_score(self) -> int:
        return self.best

    def save_best_score(self, score: int) -> None:
        self.best = int(score)
        self.saves += 1
