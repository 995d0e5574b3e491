"""Horizontal motion integration with wall bounces."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MotionState:
    """Horizontal offset of the object's center and its heading (+1 / -1)."""

    position: float
    direction: int = 1
    current_speed: float = 0.0


def bounds(radius: float, width: float) -> tuple[float, float]:
    return radius, width - radius


def is_degenerate(radius: float, width: float) -> bool:
    """True when the object has no room to move on a surface this wide."""
    return width <= 2 * radius


def clamp_position(position: float, radius: float, width: float) -> float:
    """Clamp ``position`` into the drawable range.

    Degenerate geometry pins the object to the horizontal center.
    """
    if is_degenerate(radius, width):
        return width / 2
    low, high = bounds(radius, width)
    return max(low, min(high, position))


def integrate(
    state: MotionState,
    dt: float,
    speed: float,
    radius: float,
    width: float,
    multiplier: float = 1.0,
) -> bool:
    """Move the object by one frame. Returns True if it bounced off a wall."""
    actual_speed = speed * multiplier
    state.current_speed = actual_speed

    if is_degenerate(radius, width):
        # No room to move; hold still and stay silent rather than flip every frame.
        state.position = width / 2
        return False

    state.position += state.direction * actual_speed * dt
    low, high = bounds(radius, width)
    if state.position > high:
        state.position = high
        bounced = state.direction > 0
        state.direction = -1
        return bounced
    if state.position < low:
        state.position = low
        bounced = state.direction < 0
        state.direction = 1
        return bounced
    return False
