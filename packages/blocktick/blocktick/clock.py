"""Game clock for the fixed-timestep engine.

Game time is derived from the tick counter, never from the wall clock, so a
replay with the same seed sees the same ``now_millis()`` on every tick.
"""

import random
from typing import Callable

from blocktick.types import TickContext


class Clock:
    """Counts ticks and converts them to game milliseconds.

    ``start_ms`` offsets game time, so a host resuming a saved world keeps
    the absolute timestamps its sequence timers were stored with.
    """

    def __init__(self, tps: int, start_ms: int = 0) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        if start_ms < 0:
            raise ValueError("start_ms must be >= 0")
        self._tps = tps
        self._dt = 1.0 / tps
        self._start_ms = start_ms
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def start_ms(self) -> int:
        return self._start_ms

    def now_millis(self) -> int:
        return self._start_ms + self._tick_number * 1000 // self._tps

    def ticks_until(self, ms: int) -> int:
        """Ticks still to run before ``now_millis()`` reaches ``ms`` (0 if already there)."""
        remaining = ms - self.now_millis()
        if remaining <= 0:
            return 0
        # Smallest n with (tick + n) * 1000 // tps >= target offset.
        target = ms - self._start_ms
        return -(-target * self._tps // 1000) - self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            now_ms=self.now_millis(),
            request_stop=stop_fn,
            random=rng,
        )
