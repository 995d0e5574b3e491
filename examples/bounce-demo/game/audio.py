"""Bounce tone playback through pygame.mixer."""
from __future__ import annotations

import logging
import math
from array import array

import pygame

from bounce.feedback import Tone

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
FADE_S = 0.004
AMPLITUDE = 32767


def render_tone_pcm(tone: Tone, sample_rate: int = SAMPLE_RATE) -> array:
    """Mono 16-bit sine samples with short linear fades against clicks."""
    sample_count = max(1, int(sample_rate * tone.duration))
    fade_n = max(1, int(sample_rate * FADE_S))
    out = array("h")
    for idx in range(sample_count):
        envelope = 1.0
        if idx < fade_n:
            envelope = idx / fade_n
        tail = sample_count - idx - 1
        if tail < fade_n:
            envelope = min(envelope, tail / fade_n)
        phase = 2.0 * math.pi * tone.frequency * idx / sample_rate
        sample = math.sin(phase) * tone.gain * envelope
        out.append(int(max(-1.0, min(1.0, sample)) * AMPLITUDE))
    return out


class MixerOutput:
    """``AudioOutput`` backed by an initialized pygame mixer."""

    def __init__(self) -> None:
        self._cache: dict[Tone, pygame.mixer.Sound] = {}

    def play_tone(self, tone: Tone) -> None:
        sound = self._cache.get(tone)
        if sound is None:
            sound = pygame.mixer.Sound(buffer=render_tone_pcm(tone).tobytes())
            self._cache[tone] = sound
        sound.play()


def open_mixer() -> MixerOutput | None:
    """Initialize the mixer once per session. None when no device is usable."""
    try:
        if pygame.mixer.get_init() is None:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
    except pygame.error as exc:
        logger.warning("Audio disabled: %s", exc)
        return None
    return MixerOutput()


def close_mixer() -> None:
    if pygame.mixer.get_init() is not None:
        pygame.mixer.quit()
