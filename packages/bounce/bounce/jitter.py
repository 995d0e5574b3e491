"""Jitter model: a smoothed, randomly retargeted speed multiplier."""
from __future__ import annotations

import random
from dataclasses import dataclass

MIN_INTERVAL = 1.0
MAX_INTERVAL = 2.0
MIN_TARGET = 0.5
MAX_TARGET = 1.5
RATE = 1.0  # per second


@dataclass
class JitterState:
    """Current and target multiplier plus the retarget phase accumulator.

    ``interval`` is drawn lazily on the first enabled step.
    """

    multiplier: float = 1.0
    target: float = 1.0
    phase: float = 0.0
    interval: float | None = None


def _draw(rng: random.Random, low: float, high: float) -> float:
    # Half-open [low, high); Random.uniform may return ``high``.
    return low + rng.random() * (high - low)


def step_jitter(
    state: JitterState, dt: float, enabled: bool, rng: random.Random
) -> float:
    """Advance the jitter state by ``dt`` seconds and return the multiplier.

    Disabled jitter snaps straight back to a neutral 1.0 with no smoothing.
    Large ``dt`` may overshoot the target; the next step pulls it back.
    """
    if not enabled:
        state.multiplier = 1.0
        state.target = 1.0
        state.phase = 0.0
        return state.multiplier

    if state.interval is None:
        state.interval = _draw(rng, MIN_INTERVAL, MAX_INTERVAL)

    state.phase += dt
    if state.phase >= state.interval:
        state.phase = 0.0
        state.interval = _draw(rng, MIN_INTERVAL, MAX_INTERVAL)
        state.target = _draw(rng, MIN_TARGET, MAX_TARGET)

    state.multiplier += (state.target - state.multiplier) * dt * RATE
    return state.multiplier
