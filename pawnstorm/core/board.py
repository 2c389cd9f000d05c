"""8x8 mailbox board with an explicit undo-record stack.

Rows run 0..7 from black's back rank to white's back rank, columns 0..7
from the a-file to the h-file. Simulation (check validation, search) goes
through ``push``/``pop`` so nested make/unmake under recursion restores the
position exactly.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

import chess

from .pieces import BACK_RANK, Kind, Piece, Side, Square

SIZE = 8


def on_board(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


@dataclass(frozen=True)
class UndoRecord:
    origin: Square
    target: Square
    moved: Piece
    captured: Optional[Piece]
    side_to_move: Side


class Board:
    def __init__(self, side_to_move: Side = Side.WHITE):
        """Create an empty board. Use ``Board.initial()`` for the opening position."""
        self.grid: List[List[Optional[Piece]]] = [[None] * SIZE for _ in range(SIZE)]
        self.side_to_move = side_to_move
        self._undo_stack: List[UndoRecord] = []

    @classmethod
    def empty(cls, side_to_move: Side = Side.WHITE) -> "Board":
        return cls(side_to_move)

    @classmethod
    def initial(cls) -> "Board":
        board = cls(Side.WHITE)
        for col, kind in enumerate(BACK_RANK):
            board.grid[0][col] = Piece(kind, Side.BLACK)
            board.grid[1][col] = Piece(Kind.PAWN, Side.BLACK)
            board.grid[6][col] = Piece(Kind.PAWN, Side.WHITE)
            board.grid[7][col] = Piece(kind, Side.WHITE)
        return board

    @classmethod
    def from_pieces(cls, pieces: Dict[Square, Piece],
                    side_to_move: Side = Side.WHITE) -> "Board":
        board = cls(side_to_move)
        for (row, col), piece in pieces.items():
            board.grid[row][col] = piece
        return board

    # ── Square access ────────────────────────────────────────

    def piece_at(self, row: int, col: int) -> Optional[Piece]:
        return self.grid[row][col]

    def set_piece(self, row: int, col: int, piece: Optional[Piece]):
        self.grid[row][col] = piece

    def pieces(self, side: Optional[Side] = None) -> Iterator[Tuple[Square, Piece]]:
        """Yield ((row, col), piece) in row-major order, optionally for one side."""
        for row in range(SIZE):
            for col in range(SIZE):
                piece = self.grid[row][col]
                if piece is not None and (side is None or piece.side is side):
                    yield (row, col), piece

    def find_king(self, side: Side) -> Optional[Square]:
        for square, piece in self.pieces(side):
            if piece.kind is Kind.KING:
                return square
        return None

    # ── Make / unmake ────────────────────────────────────────

    def push(self, origin: Square, target: Square) -> UndoRecord:
        """Relocate the piece on ``origin`` to ``target`` and flip the side to move.

        No legality checks happen here. The returned record is also kept on the
        board's own stack for ``pop``.
        """
        moved = self.grid[origin[0]][origin[1]]
        record = UndoRecord(origin, target, moved,
                            self.grid[target[0]][target[1]], self.side_to_move)
        self.grid[target[0]][target[1]] = moved
        self.grid[origin[0]][origin[1]] = None
        self.side_to_move = self.side_to_move.opponent
        self._undo_stack.append(record)
        return record

    def pop(self) -> UndoRecord:
        """Undo the most recent ``push``. Raises IndexError when nothing was pushed."""
        record = self._undo_stack.pop()
        self.grid[record.origin[0]][record.origin[1]] = record.moved
        self.grid[record.target[0]][record.target[1]] = record.captured
        self.side_to_move = record.side_to_move
        return record

    @property
    def ply_depth(self) -> int:
        """Number of pushes not yet popped."""
        return len(self._undo_stack)

    def relocate(self, origin: Square, target: Square):
        """Raw relocation outside the undo stack, used for history replay."""
        self.grid[target[0]][target[1]] = self.grid[origin[0]][origin[1]]
        self.grid[origin[0]][origin[1]] = None

    # ── Copies and views ─────────────────────────────────────

    def copy(self) -> "Board":
        clone = Board(self.side_to_move)
        clone.grid = [list(row) for row in self.grid]
        return clone

    def mirrored(self) -> "Board":
        """Colour-mirrored position: rows flipped, sides swapped."""
        clone = Board(self.side_to_move.opponent)
        for (row, col), piece in self.pieces():
            clone.grid[SIZE - 1 - row][col] = Piece(piece.kind, piece.side.opponent)
        return clone

    def snapshot(self) -> Tuple[Tuple[Optional[Piece], ...], ...]:
        """Hashable copy of the grid, handy for equality checks."""
        return tuple(tuple(row) for row in self.grid)

    def to_chess_board(self) -> chess.Board:
        """python-chess board with the same placement, for rendering only."""
        out = chess.Board(None)
        for (row, col), piece in self.pieces():
            out.set_piece_at(chess.square(col, SIZE - 1 - row), piece.to_chess())
        out.turn = self.side_to_move is Side.WHITE
        return out

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid and self.side_to_move is other.side_to_move

    def __str__(self):
        return str(self.to_chess_board())
