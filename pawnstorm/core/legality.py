"""Filtering pseudo-legal moves down to legal ones.

A move is legal when, after playing it, no opposing piece can capture the
mover's king on the next ply. Attackers are generated pseudo-legally only;
their own king safety is never checked.
"""

from typing import List, Tuple

from .board import Board
from .movegen import pseudo_legal_moves
from .pieces import Side, Square

Move = Tuple[int, int, int, int]


def is_square_attacked(board: Board, square: Square, by: Side) -> bool:
    for (row, col), _piece in board.pieces(by):
        if square in pseudo_legal_moves(board, row, col):
            return True
    return False


def leaves_king_exposed(board: Board, side: Side, origin: Square, target: Square) -> bool:
    """Play origin->target, test whether ``side``'s king is capturable, then undo."""
    board.push(origin, target)
    try:
        king = board.find_king(side)
        return king is not None and is_square_attacked(board, king, side.opponent)
    finally:
        board.pop()


def legal_moves(board: Board, row: int, col: int) -> List[Square]:
    piece = board.piece_at(row, col)
    if piece is None:
        return []
    return [
        target for target in pseudo_legal_moves(board, row, col)
        if not leaves_king_exposed(board, piece.side, (row, col), target)
    ]


def all_legal_moves(board: Board, side: Side) -> List[Move]:
    """Every legal (from_row, from_col, to_row, to_col) for ``side``, row-major."""
    moves = []
    for (row, col), _piece in list(board.pieces(side)):
        for to_row, to_col in legal_moves(board, row, col):
            moves.append((row, col, to_row, to_col))
    return moves


def has_any_legal_move(board: Board, side: Side) -> bool:
    for (row, col), _piece in list(board.pieces(side)):
        if legal_moves(board, row, col):
            return True
    return False
