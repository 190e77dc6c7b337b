from __future__ import annotations

from tetris_classic.game.core.board import Board
from tetris_classic.game.core.game import ClearAnimation, TetrisGame
from tetris_classic.game.core.geometry import DOWN, LEFT, RIGHT, Vector, VectorSet
from tetris_classic.game.core.pieces import ActivePiece, PieceShape, all_shapes
from tetris_classic.game.core.rules import drop_delay_ms, points_for_rows
from tetris_classic.game.core.timer import GravityTimer, NullTimer
from tetris_classic.game.core.types import Color, Event, GameStatus, normalize_event

__all__ = [
    "Board",
    "TetrisGame",
    "ClearAnimation",
    "Vector",
    "VectorSet",
    "LEFT",
    "RIGHT",
    "DOWN",
    "ActivePiece",
    "PieceShape",
    "all_shapes",
    "points_for_rows",
    "drop_delay_ms",
    "GravityTimer",
    "NullTimer",
    "Color",
    "Event",
    "GameStatus",
    "normalize_event",
]
