"""bounce - a single bouncing object driven by a variable-rate frame loop."""

from bounce.bus import SignalBus
from bounce.clock import FrameClock
from bounce.config import Configuration
from bounce.controls import Controls
from bounce.feedback import AudioOutput, CollisionFeedback, Tone
from bounce.jitter import JitterState, step_jitter
from bounce.loop import FrameLoop, build_loop
from bounce.motion import MotionState, clamp_position, integrate
from bounce.session import Session, SessionSnapshot
from bounce.surface import Surface, draw_frame
from bounce.timer import CountdownTimer
from bounce.types import Color, FrameContext

__all__ = [
    "AudioOutput",
    "CollisionFeedback",
    "Color",
    "Configuration",
    "Controls",
    "CountdownTimer",
    "FrameClock",
    "FrameContext",
    "FrameLoop",
    "JitterState",
    "MotionState",
    "Session",
    "SessionSnapshot",
    "SignalBus",
    "Surface",
    "Tone",
    "build_loop",
    "clamp_position",
    "draw_frame",
    "integrate",
    "step_jitter",
]
