# src/tetris_classic/runtime/timer.py
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Tick:
    generation: int


class AsyncGravityTimer:
    """
    Periodic gravity ticks on the running asyncio loop.

    Ticks are posted to `ticks` (capacity 1: a tick nobody consumed yet is not
    duplicated). Every start()/stop() bumps `generation`; consumers must drop
    ticks for which is_current() is False, so a tick produced before a pause or
    a speed change is never applied after it.
    """

    def __init__(self) -> None:
        self.ticks: asyncio.Queue[Tick] = asyncio.Queue(maxsize=1)
        self.generation = 0
        self.interval_ms: Optional[int] = None
        self._task: Optional[asyncio.Task[None]] = None

    @property
    def running(self) -> bool:
        return self._task is not None

    def start(self, interval_ms: int) -> None:
        self.stop()
        self.interval_ms = max(1, int(interval_ms))
        self._task = asyncio.get_running_loop().create_task(
            self._run(self.generation, self.interval_ms / 1000.0),
            name="gravity-timer",
        )

    def stop(self) -> None:
        self.generation += 1
        self.interval_ms = None
        if self._task is not None:
            self._task.cancel()
            self._task = None
        while not self.ticks.empty():
            self.ticks.get_nowait()

    def is_current(self, tick: Tick) -> bool:
        return tick.generation == self.generation

    async def _run(self, generation: int, interval_s: float) -> None:
        while True:
            await asyncio.sleep(interval_s)
            if not self.ticks.full():
                self.ticks.put_nowait(Tick(generation))


__all__ = ["AsyncGravityTimer", "Tick"]
