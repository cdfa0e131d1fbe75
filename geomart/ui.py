"""pygame window implementing the Display protocol."""
from __future__ import annotations

import pygame

from geomart.config import Settings
from geomart.types import Color, Vec2


class PygameDisplay:
    """Window of the configured size; ``present`` also caps the frame rate."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._quit = False

    def open(self) -> None:
        pygame.init()
        s = self._settings
        self._screen = pygame.display.set_mode((s.window_width, s.window_height))
        pygame.display.set_caption(s.title)
        self._clock = pygame.time.Clock()

    def close(self) -> None:
        self._screen = None
        self._clock = None
        pygame.quit()

    def __enter__(self) -> PygameDisplay:
        self.open()
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @property
    def screen(self) -> pygame.Surface:
        if self._screen is None:
            raise RuntimeError("display is not open")
        return self._screen

    def clear(self) -> None:
        self.screen.fill(self._settings.bg_color)

    def draw_circle(self, position: Vec2, radius: float, color: Color) -> None:
        x, y = position
        pygame.draw.circle(self.screen, color, (x + radius, y + radius), radius)

    def present(self) -> None:
        pygame.display.flip()
        if self._clock is not None:
            self._clock.tick(self._settings.fps)

    def quit_requested(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self._quit = True
        return self._quit
