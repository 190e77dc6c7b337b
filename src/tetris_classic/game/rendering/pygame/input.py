# src/tetris_classic/game/rendering/pygame/input.py
from __future__ import annotations

import asyncio
from collections import deque
from typing import Deque, Dict, Optional

import pygame

from tetris_classic.game.core.types import Event

KEYMAP: Dict[int, Event] = {
    pygame.K_LEFT: Event.MOVE_LEFT,
    pygame.K_h: Event.MOVE_LEFT,
    pygame.K_RIGHT: Event.MOVE_RIGHT,
    pygame.K_l: Event.MOVE_RIGHT,
    pygame.K_DOWN: Event.MOVE_DOWN,
    pygame.K_j: Event.MOVE_DOWN,
    pygame.K_UP: Event.ROTATE,
    pygame.K_k: Event.ROTATE,
    pygame.K_SPACE: Event.QUICK_DROP,
    pygame.K_p: Event.PAUSE,
    pygame.K_q: Event.QUIT,
    pygame.K_ESCAPE: Event.QUIT,
}

_REDRAW_EVENTS = frozenset(
    t for t in (getattr(pygame, "VIDEOEXPOSE", None), getattr(pygame, "WINDOWEXPOSED", None)) if t is not None
)


class PygameInputSource:
    """
    Async input source polling the pygame event queue on the loop thread.

    pygame wants its event queue serviced from the thread that owns the
    window, so this source is awaited on the event loop instead of being
    pumped from a worker thread. A quit in a polled batch drops the keys
    still pending.
    """

    def __init__(self, *, poll_hz: int = 120, key_repeat: Optional[tuple[int, int]] = (170, 50)) -> None:
        self.poll_s = 1.0 / float(max(1, int(poll_hz)))
        self._pending: Deque[Event] = deque()
        if key_repeat is not None:
            pygame.key.set_repeat(int(key_repeat[0]), int(key_repeat[1]))

    @staticmethod
    def translate(event: pygame.event.Event) -> Optional[Event]:
        if event.type == pygame.QUIT:
            return Event.QUIT
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_c and (event.mod & pygame.KMOD_CTRL):
                return Event.QUIT
            return KEYMAP.get(event.key)
        if event.type in _REDRAW_EVENTS:
            return Event.REDRAW
        return None

    async def next_command(self) -> Event:
        while True:
            for raw in pygame.event.get():
                ev = self.translate(raw)
                if ev is Event.QUIT:
                    self._pending.clear()
                    return ev
                if ev is not None:
                    self._pending.append(ev)
            if self._pending:
                return self._pending.popleft()
            await asyncio.sleep(self.poll_s)


__all__ = ["KEYMAP", "PygameInputSource"]
