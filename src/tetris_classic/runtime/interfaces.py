# src/tetris_classic/runtime/interfaces.py
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from tetris_classic.game.core.game import TetrisGame


@runtime_checkable
class InputSource(Protocol):
    """
    Where user commands come from.

    next_command() may be a plain blocking function (pumped from a worker
    thread) or a coroutine function (pumped on the event loop). It returns an
    Event, an event name, or anything else (treated as a redraw).
    """

    def next_command(self) -> Any: ...


@runtime_checkable
class RenderSink(Protocol):
    def render(self, game: "TetrisGame") -> None: ...

    def announce_game_over(self, game: "TetrisGame") -> None: ...

    def flash_rows(self, game: "TetrisGame", rows: Sequence[int]) -> None: ...


class NullRenderSink:
    def render(self, game: "TetrisGame") -> None:
        _ = game

    def announce_game_over(self, game: "TetrisGame") -> None:
        _ = game

    def flash_rows(self, game: "TetrisGame", rows: Sequence[int]) -> None:
        _ = game
        _ = rows


__all__ = ["InputSource", "RenderSink", "NullRenderSink"]
