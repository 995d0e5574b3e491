"""FrameLoop - the render loop driver, its pacing, and lifecycle hooks."""
from __future__ import annotations

import logging
import os
import random
import time
from typing import Callable

from bounce.clock import FrameClock
from bounce.session import Session
from bounce.systems import (
    make_draw_system,
    make_motion_system,
    make_signal_system,
    make_timer_system,
)
from bounce.types import FrameContext, System

logger = logging.getLogger(__name__)

Hook = Callable[[Session, FrameContext], None]

FPS_DEFAULT = 60


class FrameLoop:
    """Runs every registered system once per frame, in order.

    ``dt`` comes from a :class:`FrameClock`, so the loop makes no
    assumption about the frame rate. ``fps`` only caps it by sleeping
    off the rest of each frame in :meth:`run_forever`. ``fps=None``
    removes the cap; that is only for hosts that pace themselves
    (vsync, a GUI event loop), otherwise :meth:`run_forever` spins.
    """

    def __init__(
        self,
        session: Session,
        fps: int | None = FPS_DEFAULT,
        seed: int | None = None,
        clock: FrameClock | None = None,
    ) -> None:
        if fps is not None and fps <= 0:
            raise ValueError("fps must be positive")
        self._session = session
        self._fps = fps
        self._clock = clock or FrameClock()
        self._systems: list[System] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested = False
        self._running = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def session(self) -> Session:
        return self._session

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def fps(self) -> int | None:
        return self._fps

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def running(self) -> bool:
        return self._running

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def stop(self) -> None:
        """Ask the loop to end after the current frame."""
        self._stop_requested = True

    def _frame(self, now: float | None = None) -> None:
        self._clock.advance(now)
        ctx = self._clock.context(self.stop, self._rng)
        for system in self._systems:
            system(self._session, ctx)
            if self._stop_requested:
                break

    def step(self, now: float | None = None) -> None:
        """Run a single frame. ``now`` overrides the clock's time source."""
        self._stop_requested = False
        self._frame(now)

    def _begin(self) -> None:
        self._stop_requested = False
        self._running = True
        self._clock.reset()
        ctx = self._clock.context(self.stop, self._rng)
        logger.info("Frame loop started (seed=%d)", self._seed)
        for hook in self._start_hooks:
            hook(self._session, ctx)

    def _end(self) -> None:
        ctx = self._clock.context(self.stop, self._rng)
        for hook in self._stop_hooks:
            hook(self._session, ctx)
        self._running = False
        logger.info("Frame loop stopped after %d frames", self._clock.frame_number)

    def run(self, n: int) -> None:
        """Run ``n`` frames back to back, without pacing."""
        self._begin()
        try:
            for _ in range(n):
                self._frame()
                if self._stop_requested:
                    break
        finally:
            self._end()

    def run_forever(self) -> None:
        """Run frames until a system or input handler calls :meth:`stop`."""
        self._begin()
        budget = 1.0 / self._fps if self._fps else 0.0
        try:
            while not self._stop_requested:
                start = time.monotonic()
                self._frame()
                if self._stop_requested:
                    break
                sleep_time = budget - (time.monotonic() - start)
                if sleep_time > 0:
                    time.sleep(sleep_time)
        finally:
            self._end()


def build_loop(
    session: Session,
    fps: int | None = FPS_DEFAULT,
    seed: int | None = None,
    clock: FrameClock | None = None,
    timer_step: float | None = None,
) -> FrameLoop:
    """Create a loop with the standard frame: motion, timer, draw, signals."""
    loop = FrameLoop(session, fps=fps, seed=seed, clock=clock)
    loop.add_system(make_motion_system())
    loop.add_system(make_timer_system(step=timer_step))
    loop.add_system(make_draw_system())
    loop.add_system(make_signal_system())
    return loop
