"""Bottom status bar: timer, settings, and key help."""
from __future__ import annotations

import math

import pygame

from bounce.config import Configuration
from bounce.session import SessionSnapshot
from ui.constants import (
    ACTIVE_COLOR,
    EXPIRED_COLOR,
    HELP_TEXT,
    LABEL_COLOR,
    STATUS_BG,
    STATUS_BORDER,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def _on_off(flag: bool) -> str:
    return "ON" if flag else "OFF"


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    snapshot: SessionSnapshot,
    config: Configuration,
    bounces: int,
) -> None:
    """Draw the status bar along the bottom edge of the window."""
    w = surface.get_width()
    y = surface.get_height() - STATUS_H

    pygame.draw.rect(surface, STATUS_BG, (0, y, w, STATUS_H))
    pygame.draw.line(surface, STATUS_BORDER, (0, y), (w, y))

    pad = 12
    line_h = 20
    cx = pad
    cy = y + 8

    if snapshot.playing:
        state_label, state_color = "PLAYING", ACTIVE_COLOR
    elif snapshot.remaining <= 0:
        state_label, state_color = "TIME UP", EXPIRED_COLOR
    else:
        state_label, state_color = "PAUSED", LABEL_COLOR

    # Whole seconds, rounded up so "1s" shows until the very end
    remaining = math.ceil(snapshot.remaining)
    fields = [
        (state_label, state_color),
        (f"Remaining: {remaining}s", TEXT_COLOR),
        (f"Duration: {snapshot.duration:.0f}s", TEXT_DIM if snapshot.playing else TEXT_COLOR),
        (f"Speed: {config.speed:.0f} ({snapshot.current_speed:.1f} live)", TEXT_COLOR),
        (f"Size: {config.radius:.0f}", TEXT_COLOR),
        (f"Jitter: {_on_off(config.jitter_enabled)}", TEXT_COLOR),
        (f"Sound: {_on_off(config.sound_enabled)}", TEXT_COLOR),
        (f"Bounces: {bounces}", TEXT_COLOR),
    ]
    for text, color in fields:
        label = font.render(text, True, color)
        surface.blit(label, (cx, cy))
        cx += label.get_width() + 18

    help_label = font.render(HELP_TEXT, True, TEXT_DIM)
    surface.blit(help_label, (pad, cy + line_h))
