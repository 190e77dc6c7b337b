# src/tetris_classic/game/core/board.py
from __future__ import annotations

from typing import Dict, List, Optional

from tetris_classic.game.core.geometry import Vector
from tetris_classic.game.core.pieces import ActivePiece
from tetris_classic.game.core.types import Color


class Board:
    """
    Settled cells plus the single active piece.

    Contracts:

      - cells maps an occupied (x, y) inside [0,width) x [0,height) to its color.
        Absent keys are empty.
      - while a piece is live, none of its cells leaves the grid or overlaps a
        settled cell. Moves and rotations are applied speculatively and reverted
        before returning when they would break this.
      - the active piece is NOT part of cells until merge_current_piece().
    """

    def __init__(self, *, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be positive, got {self.height}")

        self.cells: Dict[Vector, Color] = {}
        self.current: Optional[ActivePiece] = None

    def _active(self) -> ActivePiece:
        if self.current is None:
            raise RuntimeError("board has no active piece")
        return self.current

    def in_bounds(self, point: Vector) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def spawn(self, piece: ActivePiece) -> None:
        self.current = piece

    # ---- legality ------------------------------------------------------------------

    def current_piece_in_collision(self) -> bool:
        for point in self._active().board_cells():
            if not self.in_bounds(point) or point in self.cells:
                return True
        return False

    def move_if_possible(self, translation: Vector) -> bool:
        piece = self._active()
        position = piece.position
        piece.position = position + translation
        if self.current_piece_in_collision():
            piece.position = position
            return False
        return True

    def rotate_if_possible(self) -> bool:
        piece = self._active()
        piece.rotate()
        if self.current_piece_in_collision():
            piece.unrotate()
            return False
        return True

    # ---- locking / rows ------------------------------------------------------------

    def merge_current_piece(self) -> None:
        piece = self._active()
        for point in piece.board_cells():
            self.cells[point] = piece.color
        self.current = None

    def row_complete(self, y: int) -> bool:
        return all(Vector(x, y) in self.cells for x in range(self.width))

    def cleared_rows(self) -> List[int]:
        """Complete rows, top to bottom. Does not modify the board."""
        return [y for y in range(self.height) if self.row_complete(y)]

    def collapse_row(self, row_y: int) -> None:
        """Remove row_y: every row above it moves down by one and row 0 becomes empty."""
        cells = self.cells
        for y in range(int(row_y) - 1, -1, -1):
            for x in range(self.width):
                color = cells.get(Vector(x, y))
                if color is None:
                    cells.pop(Vector(x, y + 1), None)
                else:
                    cells[Vector(x, y + 1)] = color
        for x in range(self.width):
            cells.pop(Vector(x, 0), None)

    def clear_rows(self) -> int:
        """
        Remove every complete row, scanning bottom-to-top.

        A collapse shifts a new row into the same index, so that index is
        re-checked until it is no longer complete before moving up.
        """
        cleared = 0
        y = self.height - 1
        while y >= 0:
            while self.row_complete(y):
                self.collapse_row(y)
                cleared += 1
            y -= 1
        return cleared

    # ---- queries -------------------------------------------------------------------

    def cell_color(self, position: Vector) -> Color:
        color = self.cells.get(position)
        if color is not None:
            return color
        piece = self.current
        if piece is not None and position - piece.position in piece.cells():
            return piece.color
        return Color.EMPTY

    def dump(self) -> str:
        """Text view of the board: '#' settled, '@' active, '.' empty."""
        active = set(self.current.board_cells()) if self.current is not None else set()
        lines = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                p = Vector(x, y)
                if p in self.cells:
                    row.append("#")
                elif p in active:
                    row.append("@")
                else:
                    row.append(".")
            lines.append("".join(row))
        return "\n".join(lines)


__all__ = ["Board"]
