"""Per-axis motion planning and the motion system."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from geomart.types import Vec2

if TYPE_CHECKING:
    from geomart.formation import Formation
    from geomart.types import FrameContext


def next_step_delta(current: float, destination: float, max_step: float) -> float:
    """Signed displacement toward ``destination`` of at most ``max_step``.

    When the remaining distance is shorter than the step, the remaining
    distance itself is returned so the mover lands on the destination.
    """
    distance = destination - current

    if distance < 0:
        return distance if current - max_step < destination else -max_step
    if distance > 0:
        return distance if current + max_step > destination else max_step
    return 0.0


def step_toward(current: float, destination: float, max_step: float) -> float:
    """Return the new axis value after one step, exact on the final step."""
    delta = next_step_delta(current, destination, max_step)
    # current + (destination - current) can round away from destination.
    if delta == destination - current:
        return destination
    return current + delta


def step_position(position: Vec2, destination: Vec2, max_step: float) -> Vec2:
    return (
        step_toward(position[0], destination[0], max_step),
        step_toward(position[1], destination[1], max_step),
    )


def make_motion_system() -> Callable[[Formation, FrameContext], None]:
    """Return a system that moves every mover by the frame's shared step."""

    def motion_system(formation: Formation, ctx: FrameContext) -> None:
        for mover in formation:
            mover.position = step_position(mover.position, mover.destination, ctx.step)

    return motion_system
