"""Display protocol, in-memory display and the display-facing systems."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

from geomart.types import Color, Vec2

if TYPE_CHECKING:
    from geomart.formation import Formation
    from geomart.types import FrameContext


@runtime_checkable
class Display(Protocol):
    """Surface the engine draws on and reads quit requests from.

    Circle positions are the top-left corner of the circle's bounding
    square; the centre sits ``radius`` pixels right of and below it.
    """

    def clear(self) -> None:
        ...

    def draw_circle(self, position: Vec2, radius: float, color: Color) -> None:
        ...

    def present(self) -> None:
        ...

    def quit_requested(self) -> bool:
        ...


@dataclass(frozen=True)
class DrawnCircle:
    position: Vec2
    radius: float
    color: Color


@dataclass
class RecordingDisplay:
    """Display that keeps every presented frame in memory.

    Conforms to the Display protocol. Set ``quit_after`` to request quit
    once that many frames have been presented.
    """

    quit_after: int | None = None
    frames: list[list[DrawnCircle]] = field(default_factory=list)
    _pending: list[DrawnCircle] = field(default_factory=list, init=False, repr=False)
    _quit: bool = field(default=False, init=False, repr=False)

    def clear(self) -> None:
        self._pending = []

    def draw_circle(self, position: Vec2, radius: float, color: Color) -> None:
        self._pending.append(DrawnCircle(position, radius, color))

    def present(self) -> None:
        self.frames.append(self._pending)
        self._pending = []

    def request_quit(self) -> None:
        self._quit = True

    def quit_requested(self) -> bool:
        if self.quit_after is not None and len(self.frames) >= self.quit_after:
            return True
        return self._quit

    @property
    def last_frame(self) -> list[DrawnCircle]:
        return self.frames[-1] if self.frames else []


def make_render_system(
    display: Display, radius: float, color: Color,
) -> Callable[[Formation, FrameContext], None]:
    def render_system(formation: Formation, ctx: FrameContext) -> None:
        display.clear()
        for mover in formation:
            display.draw_circle(mover.position, radius, color)
        display.present()

    return render_system


def make_quit_system(display: Display) -> Callable[[Formation, FrameContext], None]:
    """Return a system that stops the engine when the display asks to close."""

    def quit_system(formation: Formation, ctx: FrameContext) -> None:
        if display.quit_requested():
            ctx.request_stop()

    return quit_system
