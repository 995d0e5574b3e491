"""Frame context, system signature, and color type used across the bounce core."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

Color = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


if TYPE_CHECKING:
    from bounce.session import Session

System = Callable[["Session", FrameContext], None]
