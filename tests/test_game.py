# tests/test_game.py
from __future__ import annotations

import random
from typing import List, Sequence

import pytest

from tetris_classic.config.game import BoardConfig, GameConfig, GravityConfig
from tetris_classic.game.core.game import TetrisGame
from tetris_classic.game.core.geometry import Vector
from tetris_classic.game.core.pieces import I_PIECE, SQUARE, T_PIECE, PieceShape, all_shapes
from tetris_classic.game.core.timer import GravityTimer, NullTimer
from tetris_classic.game.core.types import Color, Event, GameStatus

W, H = 10, 18


def make_game(shapes: Sequence[PieceShape], **cfg_kwargs: object) -> TetrisGame:
    cfg = GameConfig(board=BoardConfig(width=W, height=H), seed=0, **cfg_kwargs)
    return TetrisGame(cfg, shapes=shapes, timer=NullTimer())


def fill_row(game: TetrisGame, y: int, *, skip: Sequence[int] = ()) -> None:
    for x in range(W):
        if x not in skip:
            game.board.cells[Vector(x, y)] = Color.RED


def test_new_game_has_active_and_next_piece() -> None:
    game = TetrisGame(GameConfig(seed=3))
    assert game.status is GameStatus.RUNNING
    assert game.current is not None
    assert game.next_shape in all_shapes()
    assert game.score == 0
    assert game.drop_delay_ms == 800
    assert not game.board.current_piece_in_collision()


def test_seeded_games_draw_the_same_pieces() -> None:
    a = TetrisGame(GameConfig(seed=42))
    b = TetrisGame(GameConfig(seed=42))
    for _ in range(5):
        assert a.current.shape is b.current.shape
        assert a.next_shape is b.next_shape
        a.quick_drop()
        b.quick_drop()


def test_injected_rng_is_used() -> None:
    game = TetrisGame(GameConfig(), rng=random.Random(5), shapes=[T_PIECE])
    assert game.current.shape is T_PIECE
    assert game.next_shape is T_PIECE


def test_left_right_stop_at_walls_without_anchoring() -> None:
    game = make_game([SQUARE])
    for _ in range(W):
        assert game.handle(Event.MOVE_LEFT)
    assert game.current.position == Vector(0, 0)
    for _ in range(W):
        game.handle("right")
    assert game.current.position == Vector(W - 2, 0)
    assert game.board.cells == {}


def test_move_down_anchors_only_when_blocked() -> None:
    game = make_game([SQUARE])
    for _ in range(H - 2):
        game.handle(Event.MOVE_DOWN)
    assert game.board.cells == {}
    assert game.current.position == Vector(4, H - 2)

    game.handle(Event.MOVE_DOWN)
    assert set(game.board.cells) == {Vector(4, H - 2), Vector(5, H - 2), Vector(4, H - 1), Vector(5, H - 1)}
    assert game.current.position == Vector(4, 0)


def test_quick_drop_lands_on_floor_in_one_call() -> None:
    game = make_game([SQUARE])
    game.handle(Event.QUICK_DROP)
    # square is two rows tall: it lands with its anchor at height - 2
    assert set(game.board.cells) == {Vector(4, H - 2), Vector(5, H - 2), Vector(4, H - 1), Vector(5, H - 1)}
    assert game.current.position == SQUARE.spawn_anchor(W)


def test_quick_drop_of_line_piece() -> None:
    game = make_game([I_PIECE])
    game.quick_drop()
    assert set(game.board.cells) == {Vector(x, H - 1) for x in range(3, 7)}


def test_rotate_event_is_rejected_in_place() -> None:
    game = make_game([I_PIECE])
    game.handle(Event.ROTATE)
    assert game.current.rotation == 0
    game.handle(Event.MOVE_DOWN)
    game.handle(Event.ROTATE)
    assert game.current.rotation == 1
    assert set(game.current.board_cells()) == {Vector(4, y) for y in range(4)}


@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_clearing_k_rows_scores_doubling_points(k: int) -> None:
    game = make_game([I_PIECE])
    for y in range(H - k, H):
        fill_row(game, y, skip=[4])

    game.handle(Event.MOVE_DOWN)
    game.handle(Event.ROTATE)
    rows = game.quick_drop()

    assert rows == list(range(H - k, H))
    assert game.score == 100 * 2 ** (k - 1)
    assert game.lines == k
    assert game.board.cleared_rows() == []
    # the part of the vertical piece above the cleared rows remains
    assert set(game.board.cells) == {Vector(4, y) for y in range(H - 4 + k, H)}


def test_anchor_without_complete_rows_scores_nothing() -> None:
    game = make_game([SQUARE])
    fill_row(game, H - 1, skip=[0])
    assert game.quick_drop() == []
    assert game.score == 0
    assert game.lines == 0


def test_anchor_scores_before_clear_and_restarts_gravity() -> None:
    game = make_game([SQUARE], gravity=GravityConfig(initial_ms=800, min_ms=100, step_ms=50, points_per_step=100))
    timer = game.timer
    assert isinstance(timer, NullTimer)
    timer.start(game.drop_delay_ms)

    fill_row(game, H - 1, skip=[4, 5])
    fill_row(game, H - 2, skip=[4, 5])

    seen: List[tuple[int, List[int], bool, bool]] = []

    def on_clear(rows: Sequence[int]) -> None:
        seen.append(
            (
                game.score,
                list(rows),
                all(game.board.row_complete(y) for y in rows),
                timer.running,
            )
        )

    game.clear_animation = on_clear
    game.quick_drop()

    assert seen == [(200, [H - 2, H - 1], True, False)]
    assert game.board.cells == {}
    assert game.drop_delay_ms == 700
    assert timer.interval_ms == 700


def test_spawn_collision_sets_game_over() -> None:
    game = make_game([SQUARE])
    for y in range(2, H):
        game.board.cells[Vector(4, y)] = Color.BLUE
        game.board.cells[Vector(5, y)] = Color.BLUE

    assert not game.game_over
    game.handle(Event.MOVE_DOWN)
    assert game.game_over
    assert game.status is GameStatus.GAME_OVER
    assert game.board.current_piece_in_collision()


def test_no_game_over_while_spawn_area_is_free() -> None:
    game = make_game([SQUARE])
    for y in range(4, H):
        game.board.cells[Vector(4, y)] = Color.BLUE
        game.board.cells[Vector(5, y)] = Color.BLUE

    game.quick_drop()
    assert not game.game_over
    assert Vector(4, 2) in game.board.cells

    game.quick_drop()
    assert game.game_over


def test_game_over_is_terminal() -> None:
    game = make_game([SQUARE])
    for y in range(2, H):
        game.board.cells[Vector(4, y)] = Color.BLUE
    game.quick_drop()
    assert game.game_over

    cells = dict(game.board.cells)
    position = game.current.position
    for ev in (Event.MOVE_LEFT, Event.MOVE_DOWN, Event.QUICK_DROP, Event.ROTATE, Event.PAUSE, Event.REDRAW):
        assert game.handle(ev) is True
    assert game.board.cells == cells
    assert game.current.position == position
    assert game.handle(Event.QUIT) is False


def test_quit_is_honoured_in_any_state() -> None:
    game = make_game([SQUARE])
    assert game.handle("quit") is False
    game.handle(Event.PAUSE)
    assert game.handle(Event.QUIT) is False


def test_pause_freezes_moves_and_gravity() -> None:
    game = make_game([SQUARE])
    timer = game.timer
    assert isinstance(timer, NullTimer)
    timer.start(game.drop_delay_ms)

    game.handle(Event.PAUSE)
    assert game.paused
    assert not timer.running
    game.handle(Event.MOVE_LEFT)
    game.handle(Event.QUICK_DROP)
    assert game.current.position == Vector(4, 0)
    assert game.board.cells == {}

    game.handle("pause")
    assert not game.paused
    assert timer.interval_ms == game.drop_delay_ms
    game.handle(Event.MOVE_LEFT)
    assert game.current.position == Vector(3, 0)


def test_unknown_commands_are_ignored() -> None:
    game = make_game([SQUARE])
    for cmd in ("jump", 42, None, b"left", object()):
        assert game.handle(cmd) is True
    assert game.current.position == Vector(4, 0)
    assert game.board.cells == {}


def test_reset_starts_a_fresh_session() -> None:
    game = make_game([SQUARE])
    fill_row(game, H - 1, skip=[4, 5])
    fill_row(game, H - 2, skip=[4, 5])
    game.quick_drop()
    game.quick_drop()
    assert game.score > 0

    game.reset()
    assert game.score == 0
    assert game.lines == 0
    assert game.board.cells == {}
    assert game.status is GameStatus.RUNNING
    assert game.current.position == Vector(4, 0)


def test_reset_after_game_over_restarts_gravity() -> None:
    game = make_game([SQUARE])
    timer = game.timer
    assert isinstance(timer, NullTimer)
    assert not timer.running

    timer.start(game.drop_delay_ms)
    for y in range(2, H):
        game.board.cells[Vector(4, y)] = Color.BLUE
    game.quick_drop()
    assert game.game_over
    assert not timer.running

    game.reset()
    assert timer.running
    assert timer.interval_ms == game.drop_delay_ms == 800


def test_reset_while_paused_restarts_gravity() -> None:
    game = make_game([SQUARE])
    timer = game.timer
    assert isinstance(timer, NullTimer)
    timer.start(game.drop_delay_ms)
    game.handle(Event.PAUSE)
    assert not timer.running

    game.reset()
    assert not game.paused
    assert timer.interval_ms == 800


def test_reset_after_speed_up_restores_initial_interval() -> None:
    game = make_game([SQUARE], gravity=GravityConfig(initial_ms=800, min_ms=100, step_ms=50, points_per_step=100))
    timer = game.timer
    assert isinstance(timer, NullTimer)
    timer.start(game.drop_delay_ms)
    fill_row(game, H - 1, skip=[4, 5])
    fill_row(game, H - 2, skip=[4, 5])
    game.quick_drop()
    assert timer.interval_ms == 700

    game.reset()
    assert game.drop_delay_ms == 800
    assert timer.interval_ms == game.drop_delay_ms


def test_empty_catalog_is_rejected() -> None:
    with pytest.raises(ValueError, match="empty"):
        TetrisGame(GameConfig(), shapes=[])


def test_null_timer_satisfies_gravity_timer_protocol() -> None:
    assert isinstance(NullTimer(), GravityTimer)
    assert not isinstance(object(), GravityTimer)
