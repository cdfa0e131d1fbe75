"""Shared type aliases, the direction enum and the per-frame context."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

Vec2 = tuple[float, float]
Color = tuple[int, int, int]


class Direction(Enum):
    """Leg of the zig-zag a mover is currently travelling."""

    LEFT = "left"
    RIGHT = "right"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    elapsed_ms: float
    step: float
    move: float
    request_stop: Callable[[], None]


class UnknownDirectionError(KeyError):
    """Raised when a mover carries a direction outside the Direction enum."""

    def __init__(self, direction: object) -> None:
        self.direction = direction
        super().__init__(f"No transition for direction {direction!r}")


if TYPE_CHECKING:
    from geomart.formation import Formation

System = Callable[["Formation", FrameContext], None]
