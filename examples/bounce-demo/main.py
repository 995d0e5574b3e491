"""Bounce Demo: a single ball bouncing across a resizable window.

Exercises the bounce core: frame loop, jitter model, countdown timer,
and collision feedback.

Controls:
  Space   Play / pause
  R       Reset timer (stops playback)
  ←/→     Speed -/+
  ↑/↓     Size +/-
  +/-     Timer duration (only while paused)
  J       Toggle inconsistent motion
  S       Toggle sound
  C / B   Cycle object / background color
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from bounce import Configuration, Controls, FrameLoop, Session
from bounce.bus import BOUNCE, TIMER_EXPIRED
from bounce.config import (
    BACKGROUND_COLOR_DEFAULT,
    DURATION_DEFAULT,
    OBJECT_COLOR_DEFAULT,
    RADIUS_DEFAULT,
    SPEED_DEFAULT,
    format_color,
    parse_color,
)
from bounce.feedback import CollisionFeedback
from bounce.systems import (
    make_draw_system,
    make_motion_system,
    make_signal_system,
    make_timer_system,
)

from game.audio import close_mixer, open_mixer
from game.input import make_input_system
from ui.canvas import Canvas
from ui.constants import FPS, MIN_H, MIN_W, SCREEN_H, SCREEN_W
from ui.status import draw_status_bar

logger = logging.getLogger("bounce-demo")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Bounce: single-ball motion demo")
    p.add_argument("--speed", type=float, default=SPEED_DEFAULT,
                   help=f"Speed in px/s (10-2000, default: {SPEED_DEFAULT:.0f})")
    p.add_argument("--size", type=float, default=RADIUS_DEFAULT,
                   help=f"Ball radius in px (5-200, default: {RADIUS_DEFAULT:.0f})")
    p.add_argument("--duration", type=float, default=DURATION_DEFAULT,
                   help=f"Timer duration in seconds (>=1, default: {DURATION_DEFAULT:.0f})")
    p.add_argument("--jitter", action="store_true", help="Start with inconsistent motion on")
    p.add_argument("--mute", action="store_true", help="Start with sound off")
    p.add_argument("--color", type=parse_color, default=OBJECT_COLOR_DEFAULT,
                   help=f"Ball color (default: {format_color(OBJECT_COLOR_DEFAULT)})")
    p.add_argument("--background", type=parse_color, default=BACKGROUND_COLOR_DEFAULT,
                   help=f"Background color (default: {format_color(BACKGROUND_COLOR_DEFAULT)})")
    p.add_argument("--timer-step", type=float, default=None, metavar="SECONDS",
                   help="Count the timer down in fixed steps (e.g. 1) instead of per frame")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frame rate cap (default: {FPS})")
    p.add_argument("--seed", type=int, default=None, help="Jitter random seed")
    p.add_argument("--width", type=int, default=SCREEN_W, help="Window width")
    p.add_argument("--height", type=int, default=SCREEN_H, help="Window height")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args()
    args.fps = max(1, args.fps)
    args.width = max(MIN_W, args.width)
    args.height = max(MIN_H, args.height)
    if args.timer_step is not None and args.timer_step <= 0:
        args.timer_step = None
    return args


def build_config(args: argparse.Namespace) -> Configuration:
    return Configuration(
        speed=args.speed,
        radius=args.size,
        jitter_enabled=args.jitter,
        sound_enabled=not args.mute,
        object_color=args.color,
        background_color=args.background,
        duration=args.duration,
    ).clamped()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    window = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption("Bounce")
    font = pygame.font.SysFont("segoeui,arial,sans", 15)

    session = Session(build_config(args), feedback=CollisionFeedback(open_mixer()))
    canvas = Canvas(window)
    session.attach_surface(canvas)
    controls = Controls(session)

    bounces = 0

    def count_bounce(signal: str, data: dict) -> None:
        nonlocal bounces
        bounces += 1

    session.bus.subscribe(BOUNCE, count_bounce)
    session.bus.subscribe(
        TIMER_EXPIRED, lambda s, d: logger.info("Time is up (%.0fs)", d["duration"])
    )

    def present_system(session, ctx) -> None:
        draw_status_bar(
            pygame.display.get_surface(), font, session.snapshot(), session.config, bounces
        )
        pygame.display.flip()

    # Wire systems (order matters): input first, notifications last
    loop = FrameLoop(session, fps=args.fps, seed=args.seed)
    loop.add_system(make_input_system(controls, canvas))
    loop.add_system(make_motion_system())
    loop.add_system(make_timer_system(step=args.timer_step))
    loop.add_system(make_draw_system())
    loop.add_system(present_system)
    loop.add_system(make_signal_system())

    def teardown(session, ctx) -> None:
        session.set_playing(False)
        session.detach_surface()
        close_mixer()

    loop.on_stop(teardown)
    loop.run_forever()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
