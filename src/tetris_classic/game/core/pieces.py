# src/tetris_classic/game/core/pieces.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple

from tetris_classic.game.core.geometry import ORIGIN, Vector, VectorSet, vector_set
from tetris_classic.game.core.types import Color

CELLS_PER_PIECE: int = 4


@dataclass(frozen=True)
class PieceShape:
    """
    A fixed piece kind: its authored rotation variants and its color.

    Variants are listed in rotation order and are NOT derived from one another;
    the engine cycles only through what is stored here.
    """

    name: str
    rotations: Tuple[VectorSet, ...]
    color: Color

    def __post_init__(self) -> None:
        if not self.rotations:
            raise ValueError(f"{self.name!r}: shape needs at least one rotation variant")
        counts = [len(r) for r in self.rotations]
        if len(set(counts)) != 1:
            raise ValueError(f"{self.name!r}: rotations must have same cell count, got {counts}")

    def num_rotations(self) -> int:
        return len(self.rotations)

    def cells(self, rotation: int) -> VectorSet:
        return self.rotations[int(rotation) % len(self.rotations)]

    def cell_count(self) -> int:
        return len(self.rotations[0])

    def bbox(self, rotation: int = 0) -> Tuple[int, int, int, int]:
        """(min_x, min_y, max_x, max_y) of the variant's cells in local coordinates."""
        pts = self.cells(rotation)
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return min(xs), min(ys), max(xs), max(ys)

    def spawn_anchor(self, board_width: int) -> Vector:
        """
        Board position for a freshly spawned piece of this shape.

        The first variant is centred horizontally (rounding left) with its top
        cell on row 0.
        """
        min_x, min_y, max_x, _ = self.bbox(0)
        bbox_w = max_x - min_x + 1
        return Vector((int(board_width) - bbox_w) // 2 - min_x, -min_y)


@dataclass
class ActivePiece:
    shape: PieceShape
    rotation: int = 0
    position: Vector = field(default=ORIGIN)

    @classmethod
    def spawn(cls, shape: PieceShape, *, board_width: int) -> "ActivePiece":
        return cls(shape=shape, rotation=0, position=shape.spawn_anchor(board_width))

    @property
    def color(self) -> Color:
        return self.shape.color

    def cells(self) -> VectorSet:
        return self.shape.cells(self.rotation)

    def board_cells(self) -> Iterator[Vector]:
        pos = self.position
        for point in self.cells():
            yield point + pos

    def rotate(self) -> None:
        self.rotation = (self.rotation + 1) % self.shape.num_rotations()

    def unrotate(self) -> None:
        self.rotation = (self.rotation - 1) % self.shape.num_rotations()


# ---------------------------------------------------------------------------
# Classic catalog
# ---------------------------------------------------------------------------

# ##
# ##
SQUARE = PieceShape(
    name="O",
    rotations=(vector_set((0, 0), (1, 0), (0, 1), (1, 1)),),
    color=Color.YELLOW,
)

# ##
#  ##
Z_PIECE = PieceShape(
    name="Z",
    rotations=(
        vector_set((0, 0), (1, 0), (1, 1), (2, 1)),
        vector_set((1, 0), (0, 1), (1, 1), (0, 2)),
    ),
    color=Color.RED,
)

#  ##
# ##
S_PIECE = PieceShape(
    name="S",
    rotations=(
        vector_set((1, 0), (2, 0), (0, 1), (1, 1)),
        vector_set((0, 0), (0, 1), (1, 1), (1, 2)),
    ),
    color=Color.GREEN,
)

# ###
#  #
T_PIECE = PieceShape(
    name="T",
    rotations=(
        vector_set((0, 0), (1, 0), (2, 0), (1, 1)),
        vector_set((1, 0), (0, 1), (1, 1), (1, 2)),
        vector_set((1, 0), (0, 1), (1, 1), (2, 1)),
        vector_set((0, 0), (0, 1), (1, 1), (0, 2)),
    ),
    color=Color.MAGENTA,
)

# ###
# #
L_PIECE = PieceShape(
    name="L",
    rotations=(
        vector_set((0, 1), (1, 1), (2, 1), (0, 2)),
        vector_set((0, 0), (1, 0), (1, 1), (1, 2)),
        vector_set((2, 0), (0, 1), (1, 1), (2, 1)),
        vector_set((1, 0), (1, 1), (1, 2), (2, 2)),
    ),
    color=Color.WHITE,
)

# ###
#   #
J_PIECE = PieceShape(
    name="J",
    rotations=(
        vector_set((0, 1), (1, 1), (2, 1), (2, 2)),
        vector_set((1, 0), (1, 1), (1, 2), (0, 2)),
        vector_set((0, 1), (1, 1), (2, 1), (0, 0)),
        vector_set((1, 0), (2, 0), (1, 1), (1, 2)),
    ),
    color=Color.BLUE,
)

# ####
I_PIECE = PieceShape(
    name="I",
    rotations=(
        vector_set((0, 1), (1, 1), (2, 1), (3, 1)),
        vector_set((1, 0), (1, 1), (1, 2), (1, 3)),
    ),
    color=Color.CYAN,
)

CLASSIC_SHAPES: Tuple[PieceShape, ...] = (SQUARE, Z_PIECE, S_PIECE, T_PIECE, L_PIECE, J_PIECE, I_PIECE)


def all_shapes() -> Tuple[PieceShape, ...]:
    return CLASSIC_SHAPES


__all__ = [
    "CELLS_PER_PIECE",
    "PieceShape",
    "ActivePiece",
    "SQUARE",
    "Z_PIECE",
    "S_PIECE",
    "T_PIECE",
    "L_PIECE",
    "J_PIECE",
    "I_PIECE",
    "CLASSIC_SHAPES",
    "all_shapes",
]
