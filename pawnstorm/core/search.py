import logging
import random
import time
from typing import Optional

from pawnstorm.config import CONFIG, SearchConfig
from .board import Board
from .evaluator import Evaluator
from .legality import Move, all_legal_moves
from .pieces import Side

log = logging.getLogger(__name__)

INF = float("inf")


class SearchEngine:
    """Depth-limited minimax with alpha-beta pruning and a soft time budget.

    The board passed to ``search_best_move`` is searched in place through
    ``Board.push``/``Board.pop`` and is back in its original state on return.
    """

    def __init__(self, config: Optional[SearchConfig] = None,
                 evaluator: Optional[Evaluator] = None,
                 rng: Optional[random.Random] = None):
        self.config = (config or CONFIG.search).validate()
        self.evaluator = evaluator or Evaluator()
        self.rng = rng or random.Random(self.config.seed)
        self.side = Side.parse(self.config.side)
        self.nodes = 0
        self.last_score: Optional[float] = None
        self._start = 0.0

    @property
    def time_limit(self) -> float:
        return self.config.time_limit_ms / 1000.0

    def _out_of_time(self) -> bool:
        return time.monotonic() - self._start > self.time_limit

    def search_best_move(self, board: Board, side: Optional[Side] = None) -> Optional[Move]:
        """Pick a move (from_row, from_col, to_row, to_col) for ``side``, or None."""
        side = side or self.side
        self._start = time.monotonic()
        self.nodes = 0
        self.last_score = None

        moves = all_legal_moves(board, side)
        if not moves:
            log.info("no legal move for %s", side.value)
            return None

        if self.rng.random() < self.config.random_move_probability:
            move = self.rng.choice(moves)
            log.info("%s plays random move %s", side.value, move)
            return move

        best_move = None
        best_score = -INF
        truncated = False
        for move in moves:
            if self._out_of_time():
                truncated = True
                break
            board.push(move[:2], move[2:])
            score = self._minimax(board, side, self.config.max_depth - 1,
                                  best_score, INF, False)
            board.pop()
            if score > best_score:
                best_score = score
                best_move = move

        if best_move is None:
            best_move = self.rng.choice(moves)
        else:
            self.last_score = best_score

        elapsed = time.monotonic() - self._start
        log.info("%s plays %s score %s nodes %d time %.3fs%s",
                 side.value, best_move, self.last_score, self.nodes, elapsed,
                 " (time budget exhausted)" if truncated else "")
        return best_move

    def _minimax(self, board: Board, side: Side, depth: int,
                 alpha: float, beta: float, maximizing: bool) -> float:
        self.nodes += 1
        if self._out_of_time() or depth <= 0:
            return self.evaluator.evaluate(board, side)

        mover = side if maximizing else side.opponent
        moves = all_legal_moves(board, mover)
        if not moves:
            return -INF if maximizing else INF

        if maximizing:
            best = -INF
            for move in moves:
                board.push(move[:2], move[2:])
                score = self._minimax(board, side, depth - 1, alpha, beta, False)
                board.pop()
                best = max(best, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
            return best

        best = INF
        for move in moves:
            board.push(move[:2], move[2:])
            score = self._minimax(board, side, depth - 1, alpha, beta, True)
            board.pop()
            best = min(best, score)
            beta = min(beta, score)
            if beta <= alpha:
                break
        return best
