"""components.session_log — Ring buffer of session events for the debug overlay.

Records timestamped status transitions, pickups and crashes so the Tab
overlay can show what the session has been doing.

Usage:
    log = session.log
    log.record("status", "running → paused", t=session.clock.elapsed)

Each entry is a dict:
    {"t": float, "frame": int, "cat": str, "msg": str, "details": dict | None}
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class SessionLog:
    """Ring-buffer of session events."""

    entries: list[dict] = field(default_factory=list)
    max_entries: int = 200

    def record(self, cat: str, msg: str, *,
               t: float = 0.0, frame: int = 0,
               details: dict | None = None) -> None:
        self.entries.append({
            "t": t,
            "frame": frame,
            "cat": cat,
            "msg": msg,
            "details": details,
        })
        if len(self.entries) > self.max_entries:
            self.entries = self.entries[-self.max_entries:]

    def recent(self, n: int = 10) -> list[dict]:
        """Return the *n* most recent entries (newest last)."""
        return self.entries[-n:]

    def for_cat(self, cat: str, n: int = 50) -> list[dict]:
        """Return last *n* entries in a category."""
        return [e for e in self.entries if e["cat"] == cat][-n:]
