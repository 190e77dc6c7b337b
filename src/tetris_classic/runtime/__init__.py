from __future__ import annotations

from tetris_classic.runtime.interfaces import InputSource, NullRenderSink, RenderSink
from tetris_classic.runtime.loop import run_game
from tetris_classic.runtime.producer import InputProducer
from tetris_classic.runtime.timer import AsyncGravityTimer, Tick

__all__ = [
    "InputSource",
    "RenderSink",
    "NullRenderSink",
    "InputProducer",
    "AsyncGravityTimer",
    "Tick",
    "run_game",
]
