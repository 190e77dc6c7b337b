# src/tetris_classic/game/core/game.py
from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Sequence

from tetris_classic.config.game import GameConfig
from tetris_classic.game.core.board import Board
from tetris_classic.game.core.geometry import DOWN, LEFT, RIGHT
from tetris_classic.game.core.pieces import ActivePiece, PieceShape, all_shapes
from tetris_classic.game.core.rules import drop_delay_ms, points_for_rows
from tetris_classic.game.core.timer import GravityTimer, NullTimer
from tetris_classic.game.core.types import Event, GameStatus, normalize_event

logger = logging.getLogger(__name__)

ClearAnimation = Callable[[Sequence[int]], None]


class TetrisGame:
    """
    Classic single-player engine: one board, one preview slot, one score.

    Contracts:

      - handle() applies exactly one event and returns False only for QUIT.
      - the only way a piece is committed is anchor(), reached from a failed
        downward move (MOVE_DOWN or the end of QUICK_DROP).
      - anchor() scores complete rows BEFORE they are removed and BEFORE the
        next piece spawns; the spawn collision check runs AFTER placement.
      - GAME_OVER is terminal: afterwards only QUIT has an effect.
      - the gravity timer is owned by the caller's loop; the game only stops
        and re-arms it (row clears, pause, game over).
    """

    def __init__(
            self,
            config: Optional[GameConfig] = None,
            *,
            rng: Optional[random.Random] = None,
            shapes: Optional[Sequence[PieceShape]] = None,
            timer: Optional[GravityTimer] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.shapes: tuple[PieceShape, ...] = tuple(shapes) if shapes is not None else all_shapes()
        if not self.shapes:
            raise ValueError("shape catalog is empty")

        self._rng = rng or random.Random(self.config.seed)
        self.timer: GravityTimer = timer or NullTimer()

        # Optional line-clear animation hook; runs while gravity is stopped and
        # the complete rows are still on the board.
        self.clear_animation: Optional[ClearAnimation] = None

        self._sessions = 0
        self.reset()

    # ---- lifecycle -----------------------------------------------------------------

    def reset(self) -> None:
        """
        Start a new session on an empty board.

        Outside the constructor the gravity timer is restarted at the initial
        delay.
        """
        self.board = Board(width=self.config.board.width, height=self.config.board.height)
        self.score = 0
        self.lines = 0
        self.drop_delay_ms = drop_delay_ms(0, self.config.gravity)
        self.status = GameStatus.RUNNING
        self.paused = False

        self._spawn(self._generate())
        self.next_shape: PieceShape = self._generate()
        logger.info(
            "[game] new game board=%sx%s delay_ms=%s",
            self.board.width,
            self.board.height,
            self.drop_delay_ms,
        )
        if self._sessions > 0:
            self.timer.stop()
            self.timer.start(self.drop_delay_ms)
        self._sessions += 1

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    @property
    def current(self) -> Optional[ActivePiece]:
        return self.board.current

    # ---- event dispatch ------------------------------------------------------------

    def handle(self, event: object) -> bool:
        """Apply one event. Returns False when the loop should stop."""
        ev = normalize_event(event)

        if ev is Event.QUIT:
            return False
        if self.game_over:
            return True
        if ev is Event.PAUSE:
            self.toggle_pause()
            return True
        if self.paused:
            return True

        if ev is Event.MOVE_LEFT:
            self.board.move_if_possible(LEFT)
        elif ev is Event.MOVE_RIGHT:
            self.board.move_if_possible(RIGHT)
        elif ev is Event.MOVE_DOWN:
            self.move_down()
        elif ev is Event.ROTATE:
            self.board.rotate_if_possible()
        elif ev is Event.QUICK_DROP:
            self.quick_drop()
        return True

    def move_down(self) -> bool:
        """One gravity step. Returns True if the piece moved, False if it was anchored."""
        if self.board.move_if_possible(DOWN):
            return True
        self.anchor()
        return False

    def quick_drop(self) -> List[int]:
        while self.board.move_if_possible(DOWN):
            pass
        return self.anchor()

    def toggle_pause(self) -> None:
        if self.game_over:
            return
        self.paused = not self.paused
        if self.paused:
            self.timer.stop()
        else:
            self.timer.start(self.drop_delay_ms)
        logger.info("[game] paused=%s", self.paused)

    # ---- commit --------------------------------------------------------------------

    def anchor(self) -> List[int]:
        """
        Commit the active piece and bring in the next one.

        Returns the rows (top to bottom) that were complete after the merge.
        """
        self.board.merge_current_piece()

        rows = self.board.cleared_rows()
        if rows:
            self.score += points_for_rows(len(rows), self.config.scoring)
            self.lines += len(rows)

            self.timer.stop()
            if self.clear_animation is not None:
                self.clear_animation(rows)
            self.board.clear_rows()

            delay = drop_delay_ms(self.score, self.config.gravity)
            if delay != self.drop_delay_ms:
                logger.info("[game] speed up delay_ms=%s score=%s", delay, self.score)
            self.drop_delay_ms = delay
            self.timer.start(self.drop_delay_ms)
            logger.debug("[game] cleared rows=%s score=%s lines=%s", rows, self.score, self.lines)

        self._spawn(self.next_shape)
        self.next_shape = self._generate()

        if self.board.current_piece_in_collision():
            self.status = GameStatus.GAME_OVER
            self.timer.stop()
            logger.info("[game] game over score=%s lines=%s", self.score, self.lines)
            logger.debug("[game] final board:\n%s", self.board.dump())
        return rows

    # ---- internals -----------------------------------------------------------------

    def _generate(self) -> PieceShape:
        return self._rng.choice(self.shapes)

    def _spawn(self, shape: PieceShape) -> None:
        self.board.spawn(ActivePiece.spawn(shape, board_width=self.board.width))


__all__ = ["TetrisGame", "ClearAnimation"]
