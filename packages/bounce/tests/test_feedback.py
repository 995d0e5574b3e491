"""Tests for CollisionFeedback."""
from __future__ import annotations

import logging

import pytest
from bounce.feedback import CollisionFeedback, Tone


class RecordingAudio:
    def __init__(self) -> None:
        self.tones: list[Tone] = []

    def play_tone(self, tone: Tone) -> None:
        self.tones.append(tone)


class BrokenAudio:
    def __init__(self, fail_times: int = 10**9) -> None:
        self.calls = 0
        self.fail_times = fail_times

    def play_tone(self, tone: Tone) -> None:
        self.calls += 1
        if self.calls <= self.fail_times:
            raise OSError("device unplugged")


def test_default_tone():
    tone = Tone()
    assert tone.frequency == 600.0
    assert tone.duration == 0.05
    assert tone.gain == 0.2


def test_plays_when_sound_enabled():
    audio = RecordingAudio()
    feedback = CollisionFeedback(audio)
    feedback(True)
    assert audio.tones == [Tone()]
    assert feedback.played == 1


def test_silent_when_sound_disabled():
    audio = RecordingAudio()
    feedback = CollisionFeedback(audio)
    feedback(False)
    assert audio.tones == []
    assert feedback.played == 0


def test_missing_output_is_skipped():
    feedback = CollisionFeedback(None)
    assert not feedback.available
    feedback(True)  # Should not raise
    assert feedback.played == 0


def test_custom_tone():
    audio = RecordingAudio()
    tone = Tone(frequency=880.0, duration=0.02, gain=0.1)
    CollisionFeedback(audio, tone=tone)(True)
    assert audio.tones == [tone]


def test_failure_is_logged_not_raised(caplog):
    feedback = CollisionFeedback(BrokenAudio())
    with caplog.at_level(logging.WARNING, logger="bounce.feedback"):
        feedback(True)
    assert "Bounce tone failed" in caplog.text
    assert feedback.available


def test_output_dropped_after_consecutive_failures(caplog):
    audio = BrokenAudio()
    feedback = CollisionFeedback(audio, max_failures=3)
    with caplog.at_level(logging.WARNING, logger="bounce.feedback"):
        for _ in range(5):
            feedback(True)
    assert audio.calls == 3
    assert not feedback.available
    assert "Disabling bounce audio" in caplog.text


def test_success_resets_failure_count():
    audio = BrokenAudio(fail_times=2)
    feedback = CollisionFeedback(audio, max_failures=3)
    for _ in range(2):
        feedback(True)
    feedback(True)  # succeeds, resets the streak
    assert feedback.available
    assert feedback.played == 1


def test_invalid_max_failures():
    with pytest.raises(ValueError):
        CollisionFeedback(RecordingAudio(), max_failures=0)
