# src/tetris_classic/runtime/producer.py
from __future__ import annotations

import asyncio
import concurrent.futures
import inspect
import logging
import threading
from typing import Optional

from tetris_classic.game.core.types import Event, normalize_event
from tetris_classic.runtime.interfaces import InputSource

logger = logging.getLogger(__name__)


class InputProducer:
    """
    Forwards commands from an InputSource into the loop's bounded event queue.

    - coroutine sources are pumped by an asyncio task
    - blocking sources are pumped by a daemon thread; a full queue blocks the
      thread (events are never dropped)
    - commands are normalized to Event before queueing
    - a source that raises ends the session with QUIT
    - quit_requested is set as soon as QUIT is produced, before it is queued
    - stop() abandons a thread that is still blocked inside the source
    """

    def __init__(self, source: InputSource, queue: asyncio.Queue[Event]) -> None:
        self.source = source
        self.queue = queue
        self._stopped = threading.Event()
        self.quit_requested = threading.Event()
        self._task: Optional[asyncio.Task[None]] = None
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        loop = asyncio.get_running_loop()
        if inspect.iscoroutinefunction(self.source.next_command):
            self._task = loop.create_task(self._pump_async(), name="input-producer")
        else:
            self._thread = threading.Thread(
                target=self._pump_blocking,
                args=(loop,),
                name="input-producer",
                daemon=True,
            )
            self._thread.start()

    def stop(self) -> None:
        self._stopped.set()
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _pump_async(self) -> None:
        while not self._stopped.is_set():
            try:
                event = normalize_event(await self.source.next_command())
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception("[input] source failed; quitting")
                event = Event.QUIT
            if event is Event.QUIT:
                self.quit_requested.set()
            await self.queue.put(event)
            if event is Event.QUIT:
                return

    def _pump_blocking(self, loop: asyncio.AbstractEventLoop) -> None:
        while not self._stopped.is_set():
            try:
                event = normalize_event(self.source.next_command())
            except Exception:
                logger.exception("[input] source failed; quitting")
                event = Event.QUIT
            if self._stopped.is_set():
                return
            if event is Event.QUIT:
                self.quit_requested.set()
            try:
                asyncio.run_coroutine_threadsafe(self.queue.put(event), loop).result()
            except (RuntimeError, concurrent.futures.CancelledError):
                # loop closed or shutting down
                return
            if event is Event.QUIT:
                return


__all__ = ["InputProducer"]
