"""Session - all simulation state for one running visualization."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from bounce import bus as signals
from bounce.bus import SignalBus
from bounce.config import (
    Configuration,
    clamp_duration,
    clamp_radius,
    clamp_speed,
    parse_color,
)
from bounce.feedback import CollisionFeedback
from bounce.jitter import JitterState
from bounce.motion import MotionState, clamp_position
from bounce.surface import Surface, has_area
from bounce.timer import CountdownTimer
from bounce.types import Color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of the session for status displays."""

    position: float
    direction: int
    current_speed: float
    jitter_multiplier: float
    remaining: float
    duration: float
    timer_state: str
    playing: bool


class Session:
    """Owns configuration, motion, jitter, timer and playback state.

    Input handlers and the frame loop share one session on one thread;
    every setter clamps its input so nothing invalid reaches a frame.
    """

    def __init__(
        self,
        config: Configuration | None = None,
        feedback: CollisionFeedback | None = None,
    ) -> None:
        self.config = (config or Configuration()).clamped()
        self.motion = MotionState(position=self.config.radius)
        self.jitter = JitterState()
        self.timer = CountdownTimer(self.config.duration)
        self.bus = SignalBus()
        self.feedback = feedback
        self.surface: Surface | None = None
        self._playing = False
        self.timer.on_expire(self._on_timer_expired)

    # --- Playback ---

    @property
    def playing(self) -> bool:
        return self._playing

    def set_playing(self, playing: bool) -> None:
        if playing == self._playing:
            return
        self._playing = playing
        if playing:
            self.timer.start()
        else:
            self.timer.pause()
        logger.debug("Playback %s", "started" if playing else "paused")
        self.bus.publish(signals.PLAYBACK, playing=playing)

    def toggle_playback(self) -> bool:
        self.set_playing(not self._playing)
        return self._playing

    def reset(self) -> None:
        """Stop playback and rewind the timer, whatever state it was in."""
        self.set_playing(False)
        self.timer.reset()
        logger.info("Timer reset to %.0fs", self.timer.duration)
        self.bus.publish(signals.TIMER_RESET, remaining=self.timer.remaining)

    def _on_timer_expired(self) -> None:
        self.set_playing(False)
        self.bus.publish(signals.TIMER_EXPIRED, duration=self.timer.duration)

    # --- Configuration ---

    def set_speed(self, speed: float) -> None:
        self.config.speed = clamp_speed(speed)
        logger.debug("Speed set to %.0f px/s", self.config.speed)

    def set_radius(self, radius: float) -> None:
        self.config.radius = clamp_radius(radius)
        self._clamp_to_surface()
        logger.debug("Radius set to %.0f px", self.config.radius)

    def set_duration(self, duration: float) -> bool:
        """Change the timer duration. Returns False (no change) while running."""
        accepted = self.timer.set_duration(clamp_duration(duration))
        if accepted:
            self.config.duration = self.timer.duration
        return accepted

    def set_jitter_enabled(self, enabled: bool) -> None:
        self.config.jitter_enabled = enabled

    def set_sound_enabled(self, enabled: bool) -> None:
        self.config.sound_enabled = enabled

    def set_object_color(self, color: str | Color) -> None:
        self.config.object_color = parse_color(color)

    def set_background_color(self, color: str | Color) -> None:
        self.config.background_color = parse_color(color)

    # --- Surface ---

    def attach_surface(self, surface: Surface) -> None:
        """Mount a surface; the object starts against the left wall."""
        self.surface = surface
        self.motion.position = self.config.radius
        self._clamp_to_surface()

    def detach_surface(self) -> None:
        self.surface = None

    def resize(self) -> None:
        """Re-clamp after the surface changed size, before the next draw."""
        self._clamp_to_surface()
        if self.surface is not None:
            self.bus.publish(
                signals.RESIZED, width=self.surface.width, height=self.surface.height
            )

    def _clamp_to_surface(self) -> None:
        if not has_area(self.surface):
            return
        self.motion.position = clamp_position(
            self.motion.position, self.config.radius, self.surface.width
        )

    # --- Feedback ---

    def on_bounce(self) -> None:
        if self.feedback is not None:
            self.feedback(self.config.sound_enabled)
        self.bus.publish(
            signals.BOUNCE,
            position=self.motion.position,
            direction=self.motion.direction,
            speed=self.motion.current_speed,
        )

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            position=self.motion.position,
            direction=self.motion.direction,
            current_speed=self.motion.current_speed,
            jitter_multiplier=self.jitter.multiplier,
            remaining=self.timer.remaining,
            duration=self.timer.duration,
            timer_state=self.timer.state,
            playing=self._playing,
        )
