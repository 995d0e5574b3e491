"""Named input actions mapped onto session operations."""
from __future__ import annotations

import logging
from typing import Callable

from bounce.config import format_color
from bounce.session import Session
from bounce.types import Color

logger = logging.getLogger(__name__)

SPEED_STEP = 50.0
RADIUS_STEP = 5.0
DURATION_STEP = 5.0

OBJECT_PALETTE: list[Color] = [
    (0x4A, 0x90, 0xE2),  # blue
    (0xE2, 0x4A, 0x4A),  # red
    (0x4A, 0xE2, 0x7C),  # green
    (0xF5, 0xA6, 0x23),  # orange
    (0x33, 0x33, 0x33),  # charcoal
]

BACKGROUND_PALETTE: list[Color] = [
    (0xFF, 0xFF, 0xFF),  # white
    (0xF0, 0xF4, 0xF8),  # mist
    (0x1A, 0x1A, 0x2E),  # night
    (0x00, 0x00, 0x00),  # black
]


def _next_color(palette: list[Color], current: Color) -> Color:
    try:
        index = palette.index(current)
    except ValueError:
        return palette[0]
    return palette[(index + 1) % len(palette)]


class Controls:
    """Dispatches discrete input actions (keys, buttons) to a session.

    Slider-like actions nudge a value by a fixed step; the session clamps.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._actions: dict[str, Callable[[], None]] = {
            "toggle": self._toggle,
            "reset": session.reset,
            "faster": lambda: session.set_speed(session.config.speed + SPEED_STEP),
            "slower": lambda: session.set_speed(session.config.speed - SPEED_STEP),
            "bigger": lambda: session.set_radius(session.config.radius + RADIUS_STEP),
            "smaller": lambda: session.set_radius(session.config.radius - RADIUS_STEP),
            "longer": lambda: self._nudge_duration(DURATION_STEP),
            "shorter": lambda: self._nudge_duration(-DURATION_STEP),
            "jitter": lambda: session.set_jitter_enabled(
                not session.config.jitter_enabled
            ),
            "sound": lambda: session.set_sound_enabled(
                not session.config.sound_enabled
            ),
            "object_color": self._cycle_object_color,
            "background_color": self._cycle_background_color,
        }

    @property
    def actions(self) -> list[str]:
        return list(self._actions)

    def dispatch(self, action: str) -> bool:
        """Run ``action``. Returns False for unknown actions."""
        handler = self._actions.get(action)
        if handler is None:
            return False
        handler()
        return True

    def _toggle(self) -> None:
        self._session.toggle_playback()

    def _nudge_duration(self, delta: float) -> None:
        # The duration field is locked while the timer runs.
        self._session.set_duration(self._session.config.duration + delta)

    def _cycle_object_color(self) -> None:
        color = _next_color(OBJECT_PALETTE, self._session.config.object_color)
        self._session.set_object_color(color)
        logger.debug("Object color %s", format_color(color))

    def _cycle_background_color(self) -> None:
        color = _next_color(BACKGROUND_PALETTE, self._session.config.background_color)
        self._session.set_background_color(color)
        logger.debug("Background color %s", format_color(color))
