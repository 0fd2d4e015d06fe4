"""Engine - the external scheduler that drives world sweeps.

The engine owns the session: the entity world, the game clock and the single
seeded random stream every probabilistic rule draws from. Start hooks run
when a session begins, stop hooks when it ends.
"""

import logging
import os
import random
from typing import Callable

from blocktick.clock import Clock
from blocktick.types import System, TickContext
from blocktick.world import World

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, tps: int = 20, seed: int | None = None, start_ms: int = 0) -> None:
        self._clock = Clock(tps, start_ms)
        self._world = World()
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[World, TickContext], None]] = []
        self._stop_hooks: list[Callable[[World, TickContext], None]] = []
        self._stop_requested: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[World, TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[World, TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop, self._rng)
        for system in self._systems:
            system(self._world, ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def start(self) -> None:
        """Run start hooks without advancing the clock."""
        logger.debug("session start seed=%d", self._seed)
        ctx = self._clock.context(self._request_stop, self._rng)
        for hook in self._start_hooks:
            hook(self._world, ctx)

    def stop(self) -> None:
        """Run stop hooks. Systems tear down session state here."""
        ctx = self._clock.context(self._request_stop, self._rng)
        for hook in self._stop_hooks:
            hook(self._world, ctx)
        logger.debug("session stop at tick %d", self._clock.tick_number)

    def run(self, n: int) -> None:
        self._stop_requested = False
        self.start()
        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break
        self.stop()

    def run_until(self, ms: int) -> None:
        """Run a session until game time reaches ``ms`` or a system requests stop."""
        self.run(self._clock.ticks_until(ms))
