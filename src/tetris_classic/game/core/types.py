# src/tetris_classic/game/core/types.py
from __future__ import annotations

import logging
from enum import Enum, auto

logger = logging.getLogger(__name__)


class Color(str, Enum):
    """
    Color tags for settled cells and pieces.

    EMPTY is the background sentinel returned for unoccupied cells; the
    renderer decides what it looks like.
    """

    EMPTY = "empty"
    YELLOW = "yellow"
    RED = "red"
    GREEN = "green"
    MAGENTA = "magenta"
    WHITE = "white"
    BLUE = "blue"
    CYAN = "cyan"


class Event(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_DOWN = auto()
    ROTATE = auto()
    QUICK_DROP = auto()
    QUIT = auto()
    REDRAW = auto()
    PAUSE = auto()


class GameStatus(Enum):
    RUNNING = auto()
    GAME_OVER = auto()


_EVENT_NAMES: dict[str, Event] = {
    "move_left": Event.MOVE_LEFT,
    "left": Event.MOVE_LEFT,
    "move_right": Event.MOVE_RIGHT,
    "right": Event.MOVE_RIGHT,
    "move_down": Event.MOVE_DOWN,
    "down": Event.MOVE_DOWN,
    "soft_drop": Event.MOVE_DOWN,
    "rotate": Event.ROTATE,
    "rot": Event.ROTATE,
    "quick_drop": Event.QUICK_DROP,
    "drop": Event.QUICK_DROP,
    "hard_drop": Event.QUICK_DROP,
    "quit": Event.QUIT,
    "exit": Event.QUIT,
    "redraw": Event.REDRAW,
    "pause": Event.PAUSE,
    "resume": Event.PAUSE,
}


def normalize_event(command: object) -> Event:
    """
    Map an input-source command onto an Event.

    Accepts Event members or their names (case-insensitive, a few aliases).
    Anything else is treated as REDRAW so malformed input never stops the loop.
    """
    if isinstance(command, Event):
        return command
    if isinstance(command, str):
        key = command.strip().lower().replace("-", "_").replace(" ", "_")
        ev = _EVENT_NAMES.get(key)
        if ev is not None:
            return ev
    logger.debug("[input] unrecognized command=%r (treated as redraw)", command)
    return Event.REDRAW


__all__ = ["Color", "Event", "GameStatus", "normalize_event"]
