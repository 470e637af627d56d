"""
scheduler.py

Fixed-cadence frame loop:

    render → wait for input (≤ what is left of the window) → tick if the
    window has elapsed

Rendering runs every iteration; virtual time only advances on ticks.
"""

from __future__ import annotations

import time
from typing import Callable

import config
from timing import VirtualClock, local_now


class FrameScheduler:
    def __init__(self,
                 clock: VirtualClock,
                 render: Callable[[], None],
                 poll: Callable[[float], bool],
                 cadence: float = config.TICK_SECONDS,
                 monotonic: Callable[[], float] = time.monotonic,
                 wall=local_now) -> None:
        """
        *poll(timeout)* waits at most *timeout* seconds for input, handles
        whatever arrived, and returns False once the loop should stop.
        """
        self.clock     = clock
        self.render    = render
        self.poll      = poll
        self.cadence   = cadence
        self.monotonic = monotonic
        self.wall      = wall

        self.frames = 0
        self.ticks  = 0
        self._last_tick = monotonic()

    def remaining(self) -> float:
        """Seconds left in the current cadence window (never negative)."""
        return max(0.0, self.cadence - (self.monotonic() - self._last_tick))

    def step(self) -> bool:
        self.render()
        self.frames += 1

        running = self.poll(self.remaining())

        if self.monotonic() - self._last_tick >= self.cadence:
            self.clock.advance(self.wall())
            self._last_tick = self.monotonic()
            self.ticks += 1
        return running

    def run(self) -> None:
        while self.step():
            pass
