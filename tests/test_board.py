# tests/test_board.py
from __future__ import annotations

import pytest

from tetris_board import empty_board, ghost_y, is_valid_position, merge, sweep
from tetris_piece import SHAPES, Piece

I = SHAPES["I"]
O = SHAPES["O"]
T = SHAPES["T"]


def test_empty_board_size() -> None:
    board = empty_board(10, 20)
    assert len(board) == 20
    assert all(len(row) == 10 and not any(row) for row in board)


def test_empty_board_rejects_bad_size() -> None:
    with pytest.raises(ValueError):
        empty_board(0, 20)


def test_horizontal_bounds() -> None:
    board = empty_board(10, 20)
    assert is_valid_position(board, I, 0, 0)
    assert is_valid_position(board, I, 6, 0)
    assert not is_valid_position(board, I, 7, 0)
    assert not is_valid_position(board, I, -1, 0)


def test_floor() -> None:
    board = empty_board(10, 20)
    assert is_valid_position(board, I, 0, 19)
    assert not is_valid_position(board, I, 0, 20)
    assert is_valid_position(board, O, 0, 18)
    assert not is_valid_position(board, O, 0, 19)


def test_rows_above_the_board_are_free() -> None:
    board = empty_board(10, 20)
    assert is_valid_position(board, T, 3, -1)
    assert is_valid_position(board, T, 3, -5)
    assert not is_valid_position(board, T, -1, -5)
    assert not is_valid_position(board, T, 8, -5)


def test_overlap_is_rejected() -> None:
    board = empty_board(10, 20)
    board[10][5] = "Z"
    assert not is_valid_position(board, O, 4, 9)
    assert not is_valid_position(board, O, 5, 10)
    assert is_valid_position(board, O, 6, 9)
    assert is_valid_position(board, O, 4, 7)


def test_overlap_check_skips_empty_matrix_cells() -> None:
    board = empty_board(10, 20)
    board[0][3] = "Z"
    # T's top-left matrix cell is empty and sits on the occupied cell
    assert is_valid_position(board, T, 3, 0)


def test_merge_writes_kind_and_drops_blocks_above_top() -> None:
    board = empty_board(10, 20)
    lost = merge(board, Piece("T", T, 3, -1))
    assert lost == 1
    assert board[0][3:6] == ["T", "T", "T"]
    assert sum(1 for row in board for v in row if v) == 3


def test_sweep_four_adjacent_rows() -> None:
    board = empty_board(10, 20)
    for y in (5, 6, 7, 8):
        board[y] = ["Z"] * 10
    board[4][0] = "T"
    board[9][1] = "J"
    board[19][2] = "L"

    assert sweep(board) == 4

    assert board[8][0] == "T"
    assert board[9][1] == "J"
    assert board[19][2] == "L"
    assert sum(1 for row in board for v in row if v) == 3
    assert all(not any(board[y]) for y in range(0, 8))


def test_sweep_split_rows() -> None:
    board = empty_board(10, 20)
    board[10] = ["I"] * 10
    board[12] = ["I"] * 10
    board[11][4] = "S"
    assert sweep(board) == 2
    assert board[12][4] == "S"
    assert sum(1 for row in board for v in row if v) == 1


def test_sweep_nothing_full() -> None:
    board = empty_board(10, 20)
    board[19] = ["I"] * 9 + [None]
    assert sweep(board) == 0
    assert board[19][0] == "I"


def test_ghost_y() -> None:
    board = empty_board(10, 20)
    assert ghost_y(board, Piece("O", O, 4, 0)) == 18
    assert ghost_y(board, Piece("I", I, 3, 0)) == 19
    board[15][4] = "Z"
    assert ghost_y(board, Piece("O", O, 4, 0)) == 13
