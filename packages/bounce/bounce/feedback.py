"""Audible feedback for wall bounces."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tone:
    frequency: float = 600.0  # Hz
    duration: float = 0.05  # s
    gain: float = 0.2


class AudioOutput(Protocol):
    """Anything that can synthesize and play a short tone."""

    def play_tone(self, tone: Tone) -> None: ...


class CollisionFeedback:
    """Plays a click on every bounce while sound is enabled.

    Fire-and-forget: errors from the audio output are logged and dropped
    so a broken device never stalls the render loop. After
    ``max_failures`` consecutive failures the output is abandoned for
    the rest of the session.
    """

    def __init__(
        self,
        audio: AudioOutput | None,
        tone: Tone = Tone(),
        max_failures: int = 3,
    ) -> None:
        if max_failures < 1:
            raise ValueError("max_failures must be at least 1")
        self._audio = audio
        self._tone = tone
        self._max_failures = max_failures
        self._failures = 0
        self._played = 0

    @property
    def available(self) -> bool:
        return self._audio is not None

    @property
    def played(self) -> int:
        return self._played

    @property
    def tone(self) -> Tone:
        return self._tone

    def __call__(self, sound_enabled: bool) -> None:
        if not sound_enabled or self._audio is None:
            return
        try:
            self._audio.play_tone(self._tone)
        except Exception:
            self._failures += 1
            logger.warning("Bounce tone failed", exc_info=True)
            if self._failures >= self._max_failures:
                logger.warning(
                    "Disabling bounce audio after %d consecutive failures",
                    self._failures,
                )
                self._audio = None
            return
        self._failures = 0
        self._played += 1
