"""Drawing area above the status bar, backed by the pygame window."""
from __future__ import annotations

import pygame

from bounce.types import Color
from ui.constants import STATUS_H


class Canvas:
    """Implements the bounce ``Surface`` protocol on the top of the window.

    Width and height are read from the window on every call, so a resize
    is visible as soon as pygame hands back the new display surface.
    """

    def __init__(self, window: pygame.Surface) -> None:
        self._window = window

    def attach(self, window: pygame.Surface) -> None:
        self._window = window

    @property
    def width(self) -> float:
        return self._window.get_width()

    @property
    def height(self) -> float:
        return max(0, self._window.get_height() - STATUS_H)

    def clear(self, color: Color) -> None:
        pygame.draw.rect(self._window, color, (0, 0, self.width, self.height))

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        pygame.draw.circle(self._window, color, (round(x), round(y)), round(radius))
