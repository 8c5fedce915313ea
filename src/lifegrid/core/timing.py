"""Wall-clock helpers for driving a simulation from a render loop."""

from typing import Callable
import time


class Ticker:
    """Gates simulation steps to a fixed wall-clock cadence.

    The cadence is independent of how often ``due`` is polled, so a render
    loop can call it every frame and still advance at a steady rate.
    """

    def __init__(self, interval: float, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize the ticker.

        Args:
            interval: Seconds between ticks
            clock: Function returning the current time in seconds
        """
        self.interval = interval
        self._clock = clock
        self._last_tick = clock()

    def due(self) -> bool:
        """Return True once more than ``interval`` seconds passed since the last tick."""
        now = self._clock()
        if now - self._last_tick > self.interval:
            self._last_tick = now
            return True
        return False

    def reset(self) -> None:
        """Restart the interval from now."""
        self._last_tick = self._clock()


class FrameCounter:
    """Average frames per second since the counter was created."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._start = clock()
        self.total_frames = 0

    def frame(self) -> None:
        """Record one rendered frame."""
        self.total_frames += 1

    @property
    def fps(self) -> float:
        elapsed = self._clock() - self._start
        if elapsed <= 0:
            return 0.0
        return self.total_frames / elapsed
