"""Board helpers: validity, merge, sweep, ghost"""
from typing import Optional, List
from tetris_piece import Piece, Shape

Board = List[List[Optional[str]]]


def empty_board(cols: int, rows: int) -> Board:
    if cols <= 0 or rows <= 0:
        raise ValueError(f"board must be at least 1x1, got {cols}x{rows}")
    return [[None] * cols for _ in range(rows)]


def is_valid_position(board: Board, shape: Shape, x: int, y: int) -> bool:
    """Rows above the top (y < 0) count as free space."""
    rows, cols = len(board), len(board[0])
    for r, row in enumerate(shape):
        for c, v in enumerate(row):
            if not v: continue
            bx, by = x + c, y + r
            if bx < 0 or bx >= cols or by >= rows: return False
            if by >= 0 and board[by][bx]: return False
    return True


def merge(board: Board, piece: Piece) -> int:
    """Write the piece into the board; blocks above the top are dropped.

    Returns how many blocks were dropped.
    """
    lost = 0
    for bx, by in piece.cells():
        if by >= 0: board[by][bx] = piece.t
        else: lost += 1
    return lost


def sweep(board: Board) -> int:
    """Clear full rows bottom-up and return how many went."""
    c = 0; y = len(board) - 1
    cols = len(board[0])
    while y >= 0:
        if all(board[y][x] for x in range(cols)):
            del board[y]; board.insert(0, [None] * cols); c += 1
        else: y -= 1
    return c


def ghost_y(board: Board, piece: Piece) -> int:
    y = piece.y
    while is_valid_position(board, piece.shape, piece.x, y + 1):
        y += 1
    return y
