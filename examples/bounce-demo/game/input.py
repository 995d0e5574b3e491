"""Keyboard and window events mapped onto session controls."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from bounce.controls import Controls
from ui.canvas import Canvas
from ui.constants import MIN_H, MIN_W

if TYPE_CHECKING:
    from bounce import FrameContext, Session

KEY_ACTIONS: dict[int, str] = {
    pygame.K_SPACE: "toggle",
    pygame.K_r: "reset",
    pygame.K_RIGHT: "faster",
    pygame.K_LEFT: "slower",
    pygame.K_UP: "bigger",
    pygame.K_DOWN: "smaller",
    pygame.K_PLUS: "longer",
    pygame.K_EQUALS: "longer",
    pygame.K_KP_PLUS: "longer",
    pygame.K_MINUS: "shorter",
    pygame.K_KP_MINUS: "shorter",
    pygame.K_j: "jitter",
    pygame.K_s: "sound",
    pygame.K_c: "object_color",
    pygame.K_b: "background_color",
}


def make_input_system(controls: Controls, canvas: Canvas):
    """Drain pygame's event queue at the start of every frame.

    Resizes re-attach the canvas and clamp the object before anything
    is drawn at the new size.
    """

    def input_system(session: Session, ctx: FrameContext) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                ctx.request_stop()
            elif event.type == pygame.VIDEORESIZE:
                w, h = max(MIN_W, event.w), max(MIN_H, event.h)
                window = pygame.display.get_surface()
                if window.get_size() != (w, h):
                    window = pygame.display.set_mode((w, h), pygame.RESIZABLE)
                canvas.attach(window)
                session.resize()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    ctx.request_stop()
                    continue
                action = KEY_ACTIONS.get(event.key)
                if action is not None:
                    controls.dispatch(action)

    return input_system
