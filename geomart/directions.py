"""Direction cycle: LEFT -> TOP_RIGHT -> RIGHT -> BOTTOM_LEFT -> LEFT."""
from __future__ import annotations

from geomart.components import Mover
from geomart.types import Direction, UnknownDirectionError, Vec2

# direction -> (dx in moves, dy in moves, next direction)
TRANSITIONS: dict[Direction, tuple[int, int, Direction]] = {
    Direction.LEFT: (2, -2, Direction.TOP_RIGHT),
    Direction.RIGHT: (-2, 2, Direction.BOTTOM_LEFT),
    Direction.TOP_RIGHT: (1, 0, Direction.RIGHT),
    Direction.BOTTOM_LEFT: (-1, 0, Direction.LEFT),
}


def _transition(direction: Direction) -> tuple[int, int, Direction]:
    try:
        return TRANSITIONS[direction]
    except (KeyError, TypeError):
        raise UnknownDirectionError(direction) from None


def next_direction(direction: Direction) -> Direction:
    return _transition(direction)[2]


def advance(mover: Mover, move: float) -> None:
    """Pick the mover's next destination relative to where it stands now."""
    dx, dy, following = _transition(mover.direction)
    x, y = mover.position
    mover.destination = (x + dx * move, y + dy * move)
    mover.direction = following


def initial_direction(position: Vec2, destination: Vec2) -> Direction:
    """Starting legs are only ever horizontal."""
    return Direction.LEFT if position[0] > destination[0] else Direction.RIGHT
