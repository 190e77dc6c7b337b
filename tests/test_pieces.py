# tests/test_pieces.py
from __future__ import annotations

import pytest

from tetris_classic.game.core.board import Board
from tetris_classic.game.core.geometry import Vector, vector_set
from tetris_classic.game.core.pieces import (
    CELLS_PER_PIECE,
    I_PIECE,
    J_PIECE,
    L_PIECE,
    S_PIECE,
    SQUARE,
    T_PIECE,
    Z_PIECE,
    ActivePiece,
    PieceShape,
    all_shapes,
)
from tetris_classic.game.core.types import Color


def test_catalog_has_seven_shapes_of_four_cells() -> None:
    shapes = all_shapes()
    assert len(shapes) == 7
    assert len({s.name for s in shapes}) == 7
    for shape in shapes:
        assert 1 <= shape.num_rotations() <= 4
        for rot in range(shape.num_rotations()):
            assert len(shape.cells(rot)) == CELLS_PER_PIECE


def test_rotation_counts_follow_symmetry() -> None:
    assert SQUARE.num_rotations() == 1
    assert Z_PIECE.num_rotations() == 2
    assert S_PIECE.num_rotations() == 2
    assert I_PIECE.num_rotations() == 2
    assert T_PIECE.num_rotations() == 4
    assert L_PIECE.num_rotations() == 4
    assert J_PIECE.num_rotations() == 4


def test_rotate_wraps_and_unrotate_reverses() -> None:
    for shape in all_shapes():
        piece = ActivePiece(shape=shape)
        for _ in range(shape.num_rotations()):
            before = piece.rotation
            piece.rotate()
            piece.unrotate()
            assert piece.rotation == before
            piece.rotate()
        assert piece.rotation == 0


def test_unrotate_wraps_on_underflow() -> None:
    piece = ActivePiece(shape=T_PIECE)
    piece.unrotate()
    assert piece.rotation == 3


@pytest.mark.parametrize(
    "shape, anchor",
    [
        (SQUARE, Vector(4, 0)),
        (Z_PIECE, Vector(3, 0)),
        (S_PIECE, Vector(3, 0)),
        (T_PIECE, Vector(3, 0)),
        (L_PIECE, Vector(3, -1)),
        (J_PIECE, Vector(3, -1)),
        (I_PIECE, Vector(3, -1)),
    ],
)
def test_spawn_anchor_on_classic_board(shape: PieceShape, anchor: Vector) -> None:
    assert shape.spawn_anchor(10) == anchor


def test_spawn_on_empty_board_never_collides() -> None:
    for width in (4, 7, 10, 13):
        for shape in all_shapes():
            board = Board(width=width, height=18)
            board.spawn(ActivePiece.spawn(shape, board_width=width))
            assert not board.current_piece_in_collision(), (shape.name, width)
            assert min(p.y for p in board.current.board_cells()) == 0


def test_board_cells_translate_by_position() -> None:
    piece = ActivePiece(shape=SQUARE, position=Vector(2, 5))
    assert set(piece.board_cells()) == {Vector(2, 5), Vector(3, 5), Vector(2, 6), Vector(3, 6)}
    assert piece.color is Color.YELLOW


def test_shape_rejects_mismatched_cell_counts() -> None:
    with pytest.raises(ValueError, match="same cell count"):
        PieceShape(
            name="bad",
            rotations=(vector_set((0, 0), (1, 0)), vector_set((0, 0), (1, 0), (2, 0))),
            color=Color.RED,
        )
    with pytest.raises(ValueError, match="at least one"):
        PieceShape(name="empty", rotations=(), color=Color.RED)
