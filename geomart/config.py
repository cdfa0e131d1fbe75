"""Window, circle and timing constants plus the Settings bundle."""
from __future__ import annotations

import math
from dataclasses import dataclass

from geomart.types import Color

# All sizes are in pixels
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
CIRCLE_RADIUS = 10
CIRCLE_MARGIN = 30

# Seconds needed to travel one step of MOVE pixels
MOVE_TIME = 0.25

FPS = 30
TITLE = "Geomart 1"

CIRCLE_COLOR: Color = (255, 255, 255)
BG_COLOR: Color = (0, 0, 0)


@dataclass(frozen=True)
class Settings:
    window_width: int = WINDOW_WIDTH
    window_height: int = WINDOW_HEIGHT
    circle_radius: int = CIRCLE_RADIUS
    circle_margin: int = CIRCLE_MARGIN
    move_time: float = MOVE_TIME
    fps: int = FPS
    title: str = TITLE
    circle_color: Color = CIRCLE_COLOR
    bg_color: Color = BG_COLOR

    def __post_init__(self) -> None:
        for name in ("window_width", "window_height", "circle_radius", "fps"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.circle_margin < 0:
            raise ValueError("circle_margin must not be negative")
        if not (math.isfinite(self.move_time) and self.move_time > 0):
            raise ValueError("move_time must be a positive finite number")

    @property
    def move(self) -> float:
        """Length of one cardinal step: a full circle diameter."""
        return float(self.circle_radius * 2)

    @property
    def move_speed(self) -> float:
        """Linear speed in pixels per millisecond."""
        return self.move / self.move_time / 1000.0

    @property
    def pitch(self) -> int:
        return self.circle_radius + self.circle_margin

    @property
    def per_row(self) -> int:
        return self.window_width // self.pitch + 1

    @property
    def per_col(self) -> int:
        return self.window_height // self.pitch + 1
