"""Tests for FrameClock elapsed-time measurement and context generation."""

import random

import pytest
from bounce.clock import FrameClock
from bounce.types import FrameContext

_test_rng = random.Random(0)


def scripted(*times: float):
    """Time source returning the given timestamps in order."""
    it = iter(times)
    return lambda: next(it)


def test_clock_initialization():
    clock = FrameClock(scripted())
    assert clock.frame_number == 0
    assert clock.dt == 0.0
    assert clock.elapsed == 0.0


def test_first_frame_has_zero_dt():
    """No previous timestamp: the first frame must not move anything."""
    clock = FrameClock(scripted(1234.5))
    assert clock.advance() == 0.0
    assert clock.frame_number == 1


def test_dt_is_real_elapsed_time():
    clock = FrameClock(scripted(10.0, 10.25, 10.75, 11.0))
    assert clock.advance() == 0.0
    assert clock.advance() == 0.25
    assert clock.advance() == 0.5
    assert clock.advance() == 0.25
    assert clock.elapsed == 1.0


def test_explicit_now_overrides_time_source():
    clock = FrameClock(scripted())
    clock.advance(now=2.0)
    assert clock.advance(now=2.5) == 0.5


def test_backwards_time_is_clamped_to_zero():
    clock = FrameClock(scripted(5.0, 4.0, 4.5))
    clock.advance()
    assert clock.advance() == 0.0
    # The later timestamp is still the new reference point.
    assert clock.advance() == 0.5


def test_large_gap_is_reported_unchanged():
    """A suspended frame yields a large dt; the clock does not cap it."""
    clock = FrameClock(scripted(0.0, 30.0))
    clock.advance()
    assert clock.advance() == 30.0


def test_reset_makes_next_frame_zero_dt():
    clock = FrameClock(scripted(0.0, 0.5, 100.0, 100.5))
    clock.advance()
    clock.advance()
    clock.reset()
    assert clock.dt == 0.0
    assert clock.advance() == 0.0
    assert clock.advance() == 0.5


def test_reset_keeps_frame_count_and_elapsed():
    clock = FrameClock(scripted(0.0, 1.0, 9.0))
    clock.advance()
    clock.advance()
    clock.reset()
    clock.advance()
    assert clock.frame_number == 3
    assert clock.elapsed == 1.0


def test_context_returns_correct_values():
    clock = FrameClock(scripted(0.0, 0.5))
    clock.advance()
    clock.advance()

    stop_called = []
    rng = random.Random(0)
    ctx = clock.context(lambda: stop_called.append(True), rng)

    assert isinstance(ctx, FrameContext)
    assert ctx.frame_number == 2
    assert ctx.dt == 0.5
    assert ctx.elapsed == 0.5
    assert ctx.random is rng
    ctx.request_stop()
    assert stop_called == [True]


def test_context_is_frozen():
    clock = FrameClock(scripted(0.0))
    clock.advance()
    ctx = clock.context(lambda: None, _test_rng)
    with pytest.raises(AttributeError):
        ctx.dt = 1.0  # type: ignore[misc]
