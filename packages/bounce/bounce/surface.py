"""Drawing surface protocol and the per-frame scene."""
from __future__ import annotations

from typing import Protocol

from bounce.types import Color


class Surface(Protocol):
    """A resizable 2D drawing area owned by the host window."""

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...

    def clear(self, color: Color) -> None: ...

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None: ...


def has_area(surface: Surface | None) -> bool:
    return surface is not None and surface.width > 0 and surface.height > 0


def draw_frame(
    surface: Surface,
    position: float,
    radius: float,
    object_color: Color,
    background_color: Color,
) -> bool:
    """Clear to the background and draw the object. False if nothing was drawn."""
    if not has_area(surface):
        return False
    surface.clear(background_color)
    surface.fill_circle(position, surface.height / 2, radius, object_color)
    return True
