"""Mover component."""
from __future__ import annotations

from dataclasses import dataclass

from geomart.types import Direction, Vec2


@dataclass
class Mover:
    """One circle of the formation.

    ``position`` is advanced every frame by the motion system.
    ``destination`` and ``direction`` change only when the formation arrives.
    """

    position: Vec2
    destination: Vec2
    direction: Direction

    @property
    def arrived(self) -> bool:
        return self.position == self.destination
