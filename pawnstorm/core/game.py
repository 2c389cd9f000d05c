"""Game state: board plus move history and captured pieces."""

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .board import Board
from .legality import Move, all_legal_moves, has_any_legal_move, legal_moves
from .pieces import Piece, Side, Square
from .utils import format_move_list, move_notation

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    origin: Square
    target: Square
    piece: Piece
    captured: Optional[Piece]
    notation: str


class ChessGame:
    def __init__(self):
        """Start from the opening position."""
        self.board = Board.initial()
        self._history: List[MoveRecord] = []
        self._captured: Dict[Side, List[Piece]] = {Side.WHITE: [], Side.BLACK: []}

    @property
    def side_to_move(self) -> Side:
        return self.board.side_to_move

    @property
    def move_history(self) -> Tuple[MoveRecord, ...]:
        return tuple(self._history)

    @property
    def captured_pieces(self) -> Dict[Side, Tuple[Piece, ...]]:
        """Captured pieces keyed by the side that lost them."""
        return {side: tuple(pieces) for side, pieces in self._captured.items()}

    def reset(self):
        """Reset to the initial position."""
        self.board = Board.initial()
        self._history.clear()
        for pieces in self._captured.values():
            pieces.clear()

    def get_legal_moves(self, square: Square) -> List[Square]:
        return legal_moves(self.board, *square)

    def get_all_legal_moves(self, side: Side) -> List[Move]:
        return all_legal_moves(self.board, side)

    def has_any_legal_move(self, side: Side) -> bool:
        return has_any_legal_move(self.board, side)

    def make_move(self, origin: Square, target: Square) -> bool:
        """Play origin->target if legal. Returns False and changes nothing otherwise.

        Turn ownership is not checked; callers decide who may move.
        """
        piece = self.board.piece_at(*origin)
        if piece is None or target not in self.get_legal_moves(origin):
            log.debug("rejected move %s -> %s", origin, target)
            return False

        captured = self.board.piece_at(*target)
        notation = move_notation(origin, target, piece, captured)
        self.board.relocate(origin, target)
        self.board.side_to_move = self.board.side_to_move.opponent
        if captured is not None:
            self._captured[captured.side].append(captured)
        self._history.append(MoveRecord(origin, target, piece, captured, notation))
        return True

    def undo_move(self) -> bool:
        """Take back the last two moves (one per side) by replaying the rest."""
        if len(self._history) < 2:
            return False
        kept = self._history[:-2]
        self.reset()
        for record in kept:
            self.board.relocate(record.origin, record.target)
            self.board.side_to_move = self.board.side_to_move.opponent
            if record.captured is not None:
                self._captured[record.captured.side].append(record.captured)
        self._history.extend(kept)
        return True

    def hint(self, side: Side, rng: Optional[random.Random] = None) -> Optional[Move]:
        """A uniformly random legal move for ``side``, or None."""
        moves = self.get_all_legal_moves(side)
        if not moves:
            return None
        return (rng or random).choice(moves)

    def move_list(self) -> List[str]:
        return format_move_list(record.notation for record in self._history)
