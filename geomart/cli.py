"""Geomart - a grid of circles zig-zagging in lockstep.

Controls:
  Esc / close window   Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from geomart.config import (
    CIRCLE_MARGIN,
    CIRCLE_RADIUS,
    FPS,
    MOVE_TIME,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Settings,
)
from geomart.engine import Engine
from geomart.ui import PygameDisplay

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Geomart - circles moving in a zig-zag formation")
    p.add_argument("--width", type=int, default=WINDOW_WIDTH, help=f"Window width (default: {WINDOW_WIDTH})")
    p.add_argument("--height", type=int, default=WINDOW_HEIGHT, help=f"Window height (default: {WINDOW_HEIGHT})")
    p.add_argument("--radius", type=int, default=CIRCLE_RADIUS, help=f"Circle radius (default: {CIRCLE_RADIUS})")
    p.add_argument("--margin", type=int, default=CIRCLE_MARGIN, help=f"Gap between circles (default: {CIRCLE_MARGIN})")
    p.add_argument("--move-time", type=float, default=MOVE_TIME,
                   help=f"Seconds per one-diameter step (default: {MOVE_TIME})")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frame rate cap (default: {FPS})")
    p.add_argument("--frames", type=int, default=None, metavar="N",
                   help="Quit after N frames (default: run until closed)")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging verbosity (default: WARNING)")
    return p


def parse_args(argv: list[str] | None = None) -> tuple[argparse.Namespace, Settings]:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = Settings(
            window_width=args.width,
            window_height=args.height,
            circle_radius=args.radius,
            circle_margin=args.margin,
            move_time=args.move_time,
            fps=args.fps,
        )
    except ValueError as exc:
        parser.error(str(exc))
    return args, settings


def main(argv: list[str] | None = None) -> int:
    args, settings = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    display = PygameDisplay(settings)
    try:
        display.open()
    except pygame.error as exc:
        log.error("Could not open display: %s", exc)
        display.close()
        return 1

    try:
        engine = Engine.with_display(display, settings=settings)
        if args.frames is None:
            engine.run_forever()
        else:
            engine.run(args.frames)
    finally:
        display.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
