# src/tetris_classic/game/core/timer.py
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class GravityTimer(Protocol):
    """Periodic MOVE_DOWN source the game can pause and re-arm."""

    def start(self, interval_ms: int) -> None: ...

    def stop(self) -> None: ...


class NullTimer:
    """Timer used when the game is driven step by step (tests, headless use)."""

    def __init__(self) -> None:
        self.interval_ms: int | None = None

    @property
    def running(self) -> bool:
        return self.interval_ms is not None

    def start(self, interval_ms: int) -> None:
        self.interval_ms = int(interval_ms)

    def stop(self) -> None:
        self.interval_ms = None


__all__ = ["GravityTimer", "NullTimer"]
