"""logic/audio.py — Sound cues for coin pickups and crashes.

Listens on the session's event bus and plays a short synthesised tone
per cue::

    cues = AudioCues(session.bus, is_muted=lambda: session.muted)

    CoinCollected  →  "coin"   800 Hz sine,      0.1 s
    Crashed        →  "crash"  100 Hz sawtooth,  0.3 s

The tones are generated once into ``pygame.mixer.Sound`` buffers (no
asset files).  If the mixer cannot start (no audio device, CI box) the
cues are still recorded in ``fired`` (the most recent
``FIRED_HISTORY`` names) but nothing is played.
"""

from __future__ import annotations
from array import array
from collections import deque
import math
from typing import Callable

import pygame

from core.events import EventBus


# name → (frequency Hz, waveform, start gain, duration s)
CUES: dict[str, tuple[float, str, float, float]] = {
    "coin":  (800.0, "sine", 0.3, 0.1),
    "crash": (100.0, "sawtooth", 0.5, 0.3),
}

_END_GAIN = 0.01
FIRED_HISTORY = 32          # recent cue names kept in ``fired``


def synth_samples(freq: float, wave: str, gain: float, duration: float,
                  rate: int = 44100) -> array:
    """Mono signed 16-bit samples with an exponential fade to ``_END_GAIN``."""
    n = max(1, int(rate * duration))
    decay = math.log(_END_GAIN / gain) / n
    out = array("h")
    for i in range(n):
        phase = (freq * i / rate) % 1.0
        if wave == "sine":
            v = math.sin(2 * math.pi * phase)
        elif wave == "sawtooth":
            v = 2.0 * phase - 1.0
        else:
            raise ValueError(f"unknown waveform {wave!r}")
        amp = gain * math.exp(decay * i)
        out.append(int(v * amp * 32767))
    return out


class AudioCues:
    """Event-driven sound player with a shared mute flag."""

    def __init__(self, bus: EventBus | None = None,
                 is_muted: Callable[[], bool] = lambda: False,
                 enabled: bool = True):
        self.is_muted = is_muted
        self.fired: deque[str] = deque(maxlen=FIRED_HISTORY)
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self.enabled = enabled and self._init_mixer()
        if bus is not None:
            self.attach(bus)

    def attach(self, bus: EventBus) -> None:
        bus.subscribe("CoinCollected", lambda _e: self.play("coin"))
        bus.subscribe("Crashed", lambda _e: self.play("crash"))

    def play(self, name: str) -> bool:
        """Fire cue *name*.  Returns True if a sound was actually started."""
        if self.is_muted():
            return False
        self.fired.append(name)
        if not self.enabled:
            return False
        sound = self._sounds.get(name)
        if sound is None:
            sound = self._build(name)
            self._sounds[name] = sound
        sound.play()
        return True

    # ── internal ────────────────────────────────────────────────────

    @staticmethod
    def _init_mixer() -> bool:
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init()
        except pygame.error as ex:
            print(f"[AUDIO] Mixer unavailable, sound cues disabled: {ex}")
            return False
        return True

    def _build(self, name: str) -> pygame.mixer.Sound:
        freq, wave, gain, duration = CUES[name]
        rate, _fmt, channels = pygame.mixer.get_init()
        mono = synth_samples(freq, wave, gain, duration, rate)
        if channels > 1:
            frames = array("h")
            for s in mono:
                frames.extend([s] * channels)
        else:
            frames = mono
        return pygame.mixer.Sound(buffer=frames.tobytes())
