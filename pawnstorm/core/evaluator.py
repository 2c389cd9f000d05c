"""Static evaluator: material plus small centralisation bonuses."""

from typing import Optional

from pawnstorm.config import CONFIG, EvalConfig
from .board import Board
from .pieces import Kind, Piece, Side


class Evaluator:
    def __init__(self, cfg: Optional[EvalConfig] = None):
        self.cfg = cfg or CONFIG.eval

    def evaluate(self, board: Board, side: Side) -> float:
        """Score in pawns, positive favours ``side``."""
        score = 0.0
        for (row, col), piece in board.pieces():
            value = self.cfg.piece_values[piece.kind.name] + self.position_bonus(piece, row, col)
            if piece.side is side:
                score += value
            else:
                score -= value
        return score

    def position_bonus(self, piece: Piece, row: int, col: int) -> float:
        if piece.kind is Kind.PAWN:
            if col in self.cfg.center_cols:
                return self.cfg.center_pawn_bonus
        elif piece.kind in (Kind.KNIGHT, Kind.BISHOP):
            if row in self.cfg.center_rows and col in self.cfg.center_cols:
                return self.cfg.center_minor_bonus
        return 0.0
