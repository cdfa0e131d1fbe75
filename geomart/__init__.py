"""geomart - A grid of circles travelling a fixed zig-zag in lockstep."""

from geomart.clock import FrameClock
from geomart.components import Mover
from geomart.config import Settings
from geomart.directions import advance, initial_direction, next_direction
from geomart.display import Display, RecordingDisplay, make_quit_system, make_render_system
from geomart.engine import Engine
from geomart.formation import Formation, make_arrival_system
from geomart.motion import make_motion_system, next_step_delta, step_position, step_toward
from geomart.types import Direction, FrameContext, UnknownDirectionError

__all__ = [
    "Engine",
    "Formation",
    "FrameClock",
    "FrameContext",
    "Mover",
    "Settings",
    "Direction",
    "Display",
    "RecordingDisplay",
    "UnknownDirectionError",
    "advance",
    "initial_direction",
    "next_direction",
    "next_step_delta",
    "step_toward",
    "step_position",
    "make_arrival_system",
    "make_motion_system",
    "make_quit_system",
    "make_render_system",
]
