"""Pseudo-legal move generation: piece geometry and occupancy, no king safety."""

from typing import List

from .board import Board, on_board
from .pieces import Kind, Piece, Square

KNIGHT_OFFSETS = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2),
    (1, -2), (1, 2), (2, -1), (2, 1),
)
KING_OFFSETS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)
BISHOP_DIRECTIONS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _pawn_moves(board: Board, row: int, col: int, piece: Piece) -> List[Square]:
    moves = []
    step = piece.side.pawn_direction
    ahead = row + step

    if on_board(ahead, col) and board.piece_at(ahead, col) is None:
        moves.append((ahead, col))
        double = row + 2 * step
        if row == piece.side.pawn_start_row and board.piece_at(double, col) is None:
            moves.append((double, col))

    for dc in (-1, 1):
        c = col + dc
        if on_board(ahead, c):
            target = board.piece_at(ahead, c)
            if target is not None and target.side is not piece.side:
                moves.append((ahead, c))
    return moves


def _step_moves(board: Board, row: int, col: int, piece: Piece, offsets) -> List[Square]:
    moves = []
    for dr, dc in offsets:
        r, c = row + dr, col + dc
        if not on_board(r, c):
            continue
        target = board.piece_at(r, c)
        if target is None or target.side is not piece.side:
            moves.append((r, c))
    return moves


def _ray_moves(board: Board, row: int, col: int, piece: Piece, directions) -> List[Square]:
    moves = []
    for dr, dc in directions:
        r, c = row + dr, col + dc
        while on_board(r, c):
            target = board.piece_at(r, c)
            if target is None:
                moves.append((r, c))
            else:
                if target.side is not piece.side:
                    moves.append((r, c))
                break
            r += dr
            c += dc
    return moves


def pseudo_legal_moves(board: Board, row: int, col: int) -> List[Square]:
    """Destinations for the piece on (row, col); empty list for an empty square."""
    piece = board.piece_at(row, col)
    if piece is None:
        return []

    kind = piece.kind
    if kind is Kind.PAWN:
        return _pawn_moves(board, row, col, piece)
    if kind is Kind.KNIGHT:
        return _step_moves(board, row, col, piece, KNIGHT_OFFSETS)
    if kind is Kind.BISHOP:
        return _ray_moves(board, row, col, piece, BISHOP_DIRECTIONS)
    if kind is Kind.ROOK:
        return _ray_moves(board, row, col, piece, ROOK_DIRECTIONS)
    if kind is Kind.QUEEN:
        return _ray_moves(board, row, col, piece, BISHOP_DIRECTIONS + ROOK_DIRECTIONS)
    if kind is Kind.KING:
        return _step_moves(board, row, col, piece, KING_OFFSETS)
    raise ValueError(f"unhandled piece kind: {kind!r}")
