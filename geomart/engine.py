"""Engine - frame loop, systems and lifecycle hooks."""

from __future__ import annotations

import logging
from typing import Callable

from geomart.clock import FrameClock
from geomart.config import Settings
from geomart.display import Display, make_quit_system, make_render_system
from geomart.formation import Formation, make_arrival_system
from geomart.motion import make_motion_system
from geomart.types import FrameContext, System

log = logging.getLogger(__name__)

Hook = Callable[[Formation, FrameContext], None]


class Engine:
    def __init__(
        self,
        settings: Settings | None = None,
        clock: FrameClock | None = None,
        formation: Formation | None = None,
    ) -> None:
        self._settings = settings if settings is not None else Settings()
        self._clock = clock if clock is not None else FrameClock()
        self._formation = (
            formation if formation is not None else Formation.build(self._settings)
        )
        self._systems: list[System] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._frame_number = 0
        self._arrivals = 0
        self._stop_requested = False

    @classmethod
    def with_display(
        cls,
        display: Display,
        settings: Settings | None = None,
        clock: FrameClock | None = None,
    ) -> Engine:
        """Engine wired with quit, arrival, motion and render systems, in that order."""
        engine = cls(settings=settings, clock=clock)
        s = engine.settings
        engine.add_system(make_quit_system(display))
        engine.add_system(make_arrival_system(on_arrival=engine._log_arrival))
        engine.add_system(make_motion_system())
        engine.add_system(make_render_system(display, s.circle_radius, s.circle_color))
        return engine

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def formation(self) -> Formation:
        return self._formation

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def arrivals(self) -> int:
        return self._arrivals

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _log_arrival(self, formation: Formation, ctx: FrameContext) -> None:
        self._arrivals += 1
        log.debug("Formation arrived on frame %d, leg %d", ctx.frame_number, self._arrivals)

    def _context(self, elapsed_ms: float) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            elapsed_ms=elapsed_ms,
            step=self._settings.move_speed * elapsed_ms,
            move=self._settings.move,
            request_stop=self._request_stop,
        )

    def _frame(self, elapsed_ms: float) -> None:
        self._frame_number += 1
        ctx = self._context(elapsed_ms)
        for system in self._systems:
            system(self._formation, ctx)
            if self._stop_requested:
                break

    def _start(self) -> None:
        self._stop_requested = False
        log.info("Starting with %d movers", len(self._formation))
        ctx = self._context(0.0)
        for hook in self._start_hooks:
            hook(self._formation, ctx)
        self._clock.restart()

    def _stop(self) -> None:
        log.info("Stopped after %d frames, %d arrivals", self._frame_number, self._arrivals)
        ctx = self._context(0.0)
        for hook in self._stop_hooks:
            hook(self._formation, ctx)

    def step(self, elapsed_ms: float) -> None:
        """Run one frame as if ``elapsed_ms`` had passed since the previous one."""
        self._stop_requested = False
        self._frame(elapsed_ms)

    def run(self, n: int) -> None:
        self._start()
        for _ in range(n):
            self._frame(self._clock.restart())
            if self._stop_requested:
                break
        self._stop()

    def run_forever(self) -> None:
        self._start()
        while not self._stop_requested:
            self._frame(self._clock.restart())
        self._stop()
