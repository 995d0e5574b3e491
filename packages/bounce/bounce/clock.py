"""FrameClock - real elapsed time between display frames."""

import random
import time
from typing import Callable

from bounce.types import FrameContext


class FrameClock:
    """Measures the time between consecutive frames.

    Unlike a fixed-timestep clock, ``dt`` is whatever actually passed
    since the previous frame. The first frame after construction or
    :meth:`reset` has no previous timestamp and reports ``dt == 0``.
    """

    def __init__(self, time_source: Callable[[], float] = time.monotonic) -> None:
        self._time_source = time_source
        self._last: float | None = None
        self._dt = 0.0
        self._elapsed = 0.0
        self._frame_number = 0

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def frame_number(self) -> int:
        return self._frame_number

    def advance(self, now: float | None = None) -> float:
        if now is None:
            now = self._time_source()
        if self._last is None:
            dt = 0.0
        else:
            # Non-monotonic sources must not run the simulation backwards.
            dt = max(0.0, now - self._last)
        self._last = now
        self._dt = dt
        self._elapsed += dt
        self._frame_number += 1
        return dt

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
            random=rng,
        )

    def reset(self) -> None:
        """Forget the previous timestamp; the next frame reports ``dt == 0``."""
        self._last = None
        self._dt = 0.0
