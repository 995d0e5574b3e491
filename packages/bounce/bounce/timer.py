"""Countdown timer state machine."""
from __future__ import annotations

import logging
from typing import Callable

from bounce.config import clamp_duration

logger = logging.getLogger(__name__)

IDLE = "idle"
RUNNING = "running"
EXPIRED = "expired"


class CountdownTimer:
    """Countdown that runs while playback is active.

    States: ``idle`` -> ``running`` on :meth:`start`, back to ``idle`` on
    :meth:`pause`, :meth:`reset`, or expiry. ``expired`` is transient: it is
    only observable from inside an expiry callback, after which the timer
    settles in ``idle`` with ``remaining == 0``.
    """

    def __init__(self, duration: float) -> None:
        self._duration = clamp_duration(duration)
        self._remaining = self._duration
        self._state = IDLE
        self._carry = 0.0
        self._expire_hooks: list[Callable[[], None]] = []

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def remaining(self) -> float:
        return self._remaining

    @property
    def state(self) -> str:
        return self._state

    @property
    def running(self) -> bool:
        return self._state == RUNNING

    def on_expire(self, hook: Callable[[], None]) -> None:
        self._expire_hooks.append(hook)

    def start(self) -> bool:
        """Start counting down. Returns False if already running.

        A timer that ran out is re-armed to the full duration first.
        """
        if self._state == RUNNING:
            return False
        if self._remaining <= 0:
            self._remaining = self._duration
        self._carry = 0.0
        self._state = RUNNING
        return True

    def pause(self) -> None:
        self._carry = 0.0
        if self._state == RUNNING:
            self._state = IDLE

    def tick(self, dt: float) -> bool:
        """Count down by ``dt`` seconds. Returns True on the expiry tick only."""
        if self._state != RUNNING:
            return False
        self._remaining = max(0.0, self._remaining - dt)
        if self._remaining > 0:
            return False

        self._state = EXPIRED
        self._carry = 0.0
        logger.info("Timer expired after %.1fs", self._duration)
        for hook in self._expire_hooks:
            hook()
        self._state = IDLE
        return True

    def tick_step(self, dt: float, step: float) -> bool:
        """Accumulate ``dt`` and count down in whole ``step`` increments.

        The partial step belongs to the current run: start, pause, reset,
        expiry and duration changes all discard it.
        """
        if self._state != RUNNING:
            return False
        self._carry += dt
        while self._carry >= step and self._state == RUNNING:
            self._carry -= step
            if self.tick(step):
                return True
        return False

    def set_duration(self, duration: float) -> bool:
        """Change the duration and re-arm ``remaining``. Ignored while running."""
        if self._state == RUNNING:
            logger.debug("Ignoring duration change to %s while running", duration)
            return False
        self._duration = clamp_duration(duration)
        self._remaining = self._duration
        self._carry = 0.0
        return True

    def reset(self) -> None:
        self._state = IDLE
        self._remaining = self._duration
        self._carry = 0.0
