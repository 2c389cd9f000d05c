"""Piece kinds, sides and the immutable piece value."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

import chess

Square = Tuple[int, int]


class Side(Enum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "Side":
        return Side.BLACK if self is Side.WHITE else Side.WHITE

    @property
    def pawn_direction(self) -> int:
        """Row delta of a forward pawn step (white moves toward row 0)."""
        return -1 if self is Side.WHITE else 1

    @property
    def pawn_start_row(self) -> int:
        return 6 if self is Side.WHITE else 1

    @classmethod
    def parse(cls, value) -> "Side":
        if isinstance(value, Side):
            return value
        return cls(str(value).lower())


class Kind(Enum):
    PAWN = "p"
    KNIGHT = "n"
    BISHOP = "b"
    ROOK = "r"
    QUEEN = "q"
    KING = "k"

    @property
    def initial(self) -> str:
        """Upper-case letter used in move notation."""
        return self.value.upper()


# python-chess piece types, used for glyphs and board rendering
_CHESS_TYPES = {
    Kind.PAWN: chess.PAWN,
    Kind.KNIGHT: chess.KNIGHT,
    Kind.BISHOP: chess.BISHOP,
    Kind.ROOK: chess.ROOK,
    Kind.QUEEN: chess.QUEEN,
    Kind.KING: chess.KING,
}


@dataclass(frozen=True)
class Piece:
    kind: Kind
    side: Side

    def to_chess(self) -> chess.Piece:
        return chess.Piece(_CHESS_TYPES[self.kind], self.side is Side.WHITE)

    def symbol(self) -> str:
        """'P' for a white pawn, 'n' for a black knight and so on."""
        return self.to_chess().symbol()

    def glyph(self) -> str:
        return self.to_chess().unicode_symbol()

    def __str__(self):
        return self.symbol()


BACK_RANK = (
    Kind.ROOK, Kind.KNIGHT, Kind.BISHOP, Kind.QUEEN,
    Kind.KING, Kind.BISHOP, Kind.KNIGHT, Kind.ROOK,
)
