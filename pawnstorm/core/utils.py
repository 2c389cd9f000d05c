"""Square names and move notation."""

from typing import Iterable, List, Optional

import chess

from .pieces import Kind, Piece, Square


def square_name(square: Square) -> str:
    """(row, col) -> algebraic name; row 0 is rank 8, col 0 is the a-file."""
    row, col = square
    return chess.FILE_NAMES[col] + chess.RANK_NAMES[7 - row]


def parse_square(name: str) -> Square:
    """Algebraic name -> (row, col). Raises ValueError for anything else."""
    sq = chess.parse_square(name.strip().lower())
    return 7 - chess.square_rank(sq), chess.square_file(sq)


def move_notation(origin: Square, target: Square, piece: Piece,
                  captured: Optional[Piece]) -> str:
    """Short algebraic-style notation: 'e4', 'Nf3', 'Bxc6', 'exd5'."""
    notation = "" if piece.kind is Kind.PAWN else piece.kind.initial
    if captured is not None:
        if piece.kind is Kind.PAWN:
            notation = chess.FILE_NAMES[origin[1]]
        notation += "x"
    return notation + square_name(target)


def format_move_list(notations: Iterable[str]) -> List[str]:
    """Numbered display lines, one per move: ['1. e4', '1. e5', '2. Nf3', ...]."""
    return [f"{index // 2 + 1}. {text}" for index, text in enumerate(notations)]
