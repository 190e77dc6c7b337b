"""Classic falling-block puzzle engine with an asyncio gravity/input loop."""

from __future__ import annotations

from tetris_classic.config.game import GameConfig
from tetris_classic.game.core.game import TetrisGame
from tetris_classic.game.core.types import Color, Event, GameStatus

__version__ = "0.1.0"

__all__ = ["GameConfig", "TetrisGame", "Color", "Event", "GameStatus", "__version__"]
