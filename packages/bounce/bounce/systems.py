"""System factories run by the frame loop, one call per frame each."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from bounce.jitter import step_jitter
from bounce.motion import integrate
from bounce.surface import draw_frame, has_area

if TYPE_CHECKING:
    from bounce.session import Session
    from bounce.types import FrameContext, System


def make_motion_system(
    on_bounce: Callable[[Session, FrameContext], None] | None = None,
) -> System:
    """Jitter then integrate, only while playback is active.

    ``on_bounce`` defaults to :meth:`Session.on_bounce` (tone + signal).
    Frames without a mounted surface are skipped entirely.
    """

    def motion_system(session: Session, ctx: FrameContext) -> None:
        if not session.playing or not has_area(session.surface):
            return
        config = session.config
        multiplier = step_jitter(
            session.jitter, ctx.dt, config.jitter_enabled, ctx.random
        )
        bounced = integrate(
            session.motion,
            ctx.dt,
            config.speed,
            config.radius,
            session.surface.width,
            multiplier,
        )
        if bounced:
            if on_bounce is None:
                session.on_bounce()
            else:
                on_bounce(session, ctx)

    return motion_system


def make_timer_system(step: float | None = None) -> System:
    """Count the session timer down while it runs.

    With ``step=None`` the timer follows every frame's ``dt`` (sub-second
    precision). With a fixed ``step`` it only moves in whole steps once
    that much running time has accumulated, e.g. ``step=1.0`` for a
    one-second ticker. The partial step lives on the timer, so a pause,
    reset or restart between two frames discards it.
    """
    if step is not None and step <= 0:
        raise ValueError("step must be positive")

    def timer_system(session: Session, ctx: FrameContext) -> None:
        if step is None:
            session.timer.tick(ctx.dt)
        else:
            session.timer.tick_step(ctx.dt, step)

    return timer_system


def make_draw_system() -> System:
    """Redraw every frame, playing or not."""

    def draw_system(session: Session, ctx: FrameContext) -> None:
        if session.surface is None:
            return
        config = session.config
        draw_frame(
            session.surface,
            session.motion.position,
            config.radius,
            config.object_color,
            config.background_color,
        )

    return draw_system


def make_signal_system() -> System:
    """Deliver the frame's queued notifications."""

    def signal_system(session: Session, ctx: FrameContext) -> None:
        session.bus.flush()

    return signal_system
