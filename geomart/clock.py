"""Frame clock measuring wall time between frames."""

import time
from typing import Callable


class FrameClock:
    def __init__(self, time_fn: Callable[[], float] = time.monotonic) -> None:
        self._time_fn = time_fn
        self._last = time_fn()

    def restart(self) -> float:
        """Return milliseconds since the last restart and start counting again."""
        now = self._time_fn()
        elapsed = (now - self._last) * 1000.0
        self._last = now
        return elapsed
