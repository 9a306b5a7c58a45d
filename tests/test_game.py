"""Unit tests for GridXO game logic."""

import pytest

from gridxo.game import (
    EMPTY,
    Mode,
    MoveRejected,
    Outcome,
    apply_move,
    evaluate_outcome,
    move_rejection,
    new_game,
    replay,
    reset,
    winning_lines,
)


@pytest.mark.parametrize("size", [3, 4])
def test_empty_board_is_in_progress(size):
    game = new_game(size)
    assert len(game.board) == size * size
    assert game.current_player == "X"
    assert evaluate_outcome(game.board, size) is Outcome.IN_PROGRESS


def test_unsupported_size_raises():
    with pytest.raises(ValueError):
        new_game(5)


@pytest.mark.parametrize("size", [3, 4])
def test_line_enumeration(size):
    lines = winning_lines(size)
    assert len(lines) == 2 * size + 2
    assert lines[0] == tuple(range(size))
    assert lines[size] == tuple(r * size for r in range(size))
    assert lines[-2] == tuple(i * (size + 1) for i in range(size))


@pytest.mark.parametrize("size", [3, 4])
def test_anti_diagonal_runs_from_top_right_to_bottom_left(size):
    anti = winning_lines(size)[-1]
    assert anti == tuple(r * size + (size - 1 - r) for r in range(size))
    assert set(anti) == {size * size - 1 - i * (size - 1) for i in range(1, size + 1)}


def test_row_of_x_wins():
    board = ("X", "X", "X", "O", "O", EMPTY, EMPTY, EMPTY, EMPTY)
    assert evaluate_outcome(board, 3) is Outcome.X_WINS


def test_main_diagonal_of_o_wins_on_4x4():
    board = [EMPTY] * 16
    for i in range(4):
        board[i * 5] = "O"
    board[1] = board[2] = board[3] = "X"
    assert evaluate_outcome(board, 4) is Outcome.O_WINS


def test_anti_diagonal_wins_on_4x4():
    board = [EMPTY] * 16
    for i in (3, 6, 9, 12):
        board[i] = "X"
    assert evaluate_outcome(board, 4) is Outcome.X_WINS


def test_full_board_without_line_is_draw():
    board = ("X", "O", "X", "X", "O", "O", "O", "X", "X")
    assert evaluate_outcome(board, 3) is Outcome.DRAW

    board4 = tuple("XXOOOOXXXXOOOOXX")
    assert evaluate_outcome(board4, 4) is Outcome.DRAW


def test_apply_move_places_mark_and_flips_turn():
    game = new_game(3)
    after = apply_move(game, 4)
    assert after.board[4] == "X"
    assert after.current_player == "O"
    assert after.moves == (4,)
    # Original snapshot is untouched
    assert game.board[4] == EMPTY


def test_occupied_cell_is_ignored():
    game = apply_move(new_game(3), 0)
    assert move_rejection(game, 0) is MoveRejected.OCCUPIED
    assert apply_move(game, 0) is game


def test_out_of_range_is_ignored():
    game = new_game(3)
    assert move_rejection(game, 9) is MoveRejected.OUT_OF_RANGE
    assert move_rejection(game, -1) is MoveRejected.OUT_OF_RANGE
    assert apply_move(game, 9) is game


def test_no_moves_after_game_over():
    game = replay(3, Mode.PVP, [0, 3, 1, 4, 2])
    assert game.outcome is Outcome.X_WINS
    assert game.winner == "X"
    assert game.available_moves() == []
    assert move_rejection(game, 8) is MoveRejected.GAME_OVER
    after = apply_move(game, 8)
    assert after.board == game.board
    assert after.current_player == game.current_player


def test_reset_keeps_size_and_mode():
    game = replay(4, Mode.PVC, [0, 5, 10])
    fresh = reset(game)
    assert fresh.size == 4
    assert fresh.mode is Mode.PVC
    assert fresh.board == (EMPTY,) * 16
    assert fresh.current_player == "X"
    assert fresh.outcome is Outcome.IN_PROGRESS
    assert fresh.moves == ()


def test_rows_split_board():
    game = replay(3, Mode.PVP, [0, 8])
    rows = game.rows()
    assert rows[0] == ("X", EMPTY, EMPTY)
    assert rows[2] == (EMPTY, EMPTY, "O")
