"""Session configuration, input bounds, and clamping helpers."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from bounce.types import Color

# Speed slider (px/s)
SPEED_MIN = 10.0
SPEED_MAX = 2000.0
SPEED_DEFAULT = 100.0

# Size slider (radius, px)
RADIUS_MIN = 5.0
RADIUS_MAX = 200.0
RADIUS_DEFAULT = 20.0

# Timer (s)
DURATION_MIN = 1.0
DURATION_DEFAULT = 30.0

OBJECT_COLOR_DEFAULT: Color = (0x4A, 0x90, 0xE2)
BACKGROUND_COLOR_DEFAULT: Color = (0xFF, 0xFF, 0xFF)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_speed(value: float) -> float:
    return _clamp(float(value), SPEED_MIN, SPEED_MAX)


def clamp_radius(value: float) -> float:
    return _clamp(float(value), RADIUS_MIN, RADIUS_MAX)


def clamp_duration(value: float) -> float:
    return max(DURATION_MIN, float(value))


def parse_color(value: str | tuple[int, ...]) -> Color:
    """Parse ``#RRGGBB``, ``RRGGBB``, ``#RGB`` or an RGB tuple.

    Raises ValueError for anything else.
    """
    if isinstance(value, tuple):
        if len(value) != 3 or not all(0 <= int(c) <= 255 for c in value):
            raise ValueError(f"Color tuple must hold three 0-255 values, got {value!r}")
        r, g, b = (int(c) for c in value)
        return (r, g, b)

    text = value.strip().lstrip("#")
    if len(text) == 3:
        text = "".join(ch * 2 for ch in text)
    if len(text) != 6:
        raise ValueError(f"Invalid color {value!r}")
    try:
        raw = int(text, 16)
    except ValueError:
        raise ValueError(f"Invalid color {value!r}") from None
    return ((raw >> 16) & 0xFF, (raw >> 8) & 0xFF, raw & 0xFF)


def format_color(color: Color) -> str:
    return "#{:02X}{:02X}{:02X}".format(*color)


@dataclass
class Configuration:
    """User-adjustable settings. Mutated by input handlers, read every frame."""

    speed: float = SPEED_DEFAULT
    radius: float = RADIUS_DEFAULT
    jitter_enabled: bool = False
    sound_enabled: bool = True
    object_color: Color = OBJECT_COLOR_DEFAULT
    background_color: Color = BACKGROUND_COLOR_DEFAULT
    duration: float = DURATION_DEFAULT

    def clamped(self) -> Configuration:
        return dataclasses.replace(
            self,
            speed=clamp_speed(self.speed),
            radius=clamp_radius(self.radius),
            duration=clamp_duration(self.duration),
        )
