"""logic — Game systems package.

Modules
-------
session         — the Session aggregate and its state machine (start / pause /
                  resume / quit / tick / snapshot)
clock           — speed ramp, per-tick score, frame timer
pools           — obstacle / coin / particle spawn, fall, prune, collide
particles       — coin-pickup particle bursts
road            — lane geometry and stripe scrolling
player          — player placement and steering
input_manager   — raw input → intent mapping
audio           — event-driven sound cues
"""
