"""Formation - the grid of movers and the arrival system."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, Iterator

from geomart.components import Mover
from geomart.directions import advance, initial_direction

if TYPE_CHECKING:
    from geomart.config import Settings
    from geomart.types import FrameContext


class Formation:
    """Ordered collection of movers that travel in lockstep.

    Every mover shares the same speed and the same place in the direction
    cycle, so checking the first mover for arrival stands in for the whole
    formation. Movers given independent speeds or timings would need
    ``all_arrived`` instead.
    """

    def __init__(self, movers: Iterable[Mover] = ()) -> None:
        self._movers: list[Mover] = list(movers)

    @classmethod
    def build(cls, settings: Settings) -> Formation:
        """Lay out one mover per grid cell, alternate rows heading opposite ways."""
        per_row = settings.per_row
        count = per_row * settings.per_col
        pitch = settings.pitch
        move = settings.move
        vertical_margin = settings.circle_margin // 2

        movers: list[Mover] = []
        for i in range(count):
            row, col = divmod(i, per_row)
            odd_row = row % 2 == 1
            x_offset = move / 2 if odd_row else -move / 2

            position = (float(pitch * col) - x_offset, float(pitch * row + vertical_margin))
            heading = -move if odd_row else move
            destination = (position[0] + heading, position[1])

            movers.append(
                Mover(
                    position=position,
                    destination=destination,
                    direction=initial_direction(position, destination),
                )
            )
        return cls(movers)

    def __iter__(self) -> Iterator[Mover]:
        return iter(self._movers)

    def __len__(self) -> int:
        return len(self._movers)

    def __getitem__(self, index: int) -> Mover:
        return self._movers[index]

    @property
    def representative(self) -> Mover | None:
        return self._movers[0] if self._movers else None

    def arrived(self) -> bool:
        first = self.representative
        return first is not None and first.arrived

    def all_arrived(self) -> bool:
        return bool(self._movers) and all(m.arrived for m in self._movers)


def make_arrival_system(
    on_arrival: Callable[[Formation, FrameContext], None] | None = None,
    strict: bool = False,
) -> Callable[[Formation, FrameContext], None]:
    """Return a system that hands every mover its next leg once the formation arrives.

    With ``strict`` the system waits for every mover instead of the
    representative one.
    """

    def arrival_system(formation: Formation, ctx: FrameContext) -> None:
        done = formation.all_arrived() if strict else formation.arrived()
        if not done:
            return
        for mover in formation:
            advance(mover, ctx.move)
        if on_arrival is not None:
            on_arrival(formation, ctx)

    return arrival_system
