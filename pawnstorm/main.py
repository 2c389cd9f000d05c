import random
from typing import Dict, List, Optional, Tuple

from pawnstorm.config import SearchConfig
from pawnstorm.core.game import ChessGame, MoveRecord
from pawnstorm.core.legality import Move
from pawnstorm.core.pieces import Piece, Side, Square
from pawnstorm.core.search import SearchEngine


class Engine:
    """In-process interface consumed by display/input collaborators."""

    def __init__(self, config: Optional[SearchConfig] = None, search: Optional[SearchEngine] = None):
        self.game = ChessGame()
        self.search = search or SearchEngine(config)
        # hints draw from their own stream; the bot's sequence is untouched
        self.hint_rng = random.Random(self.search.config.seed)

    @property
    def side_to_move(self) -> Side:
        return self.game.side_to_move

    def legal_moves(self, square: Square) -> List[Square]:
        return self.game.get_legal_moves(square)

    def attempt_move(self, origin: Square, target: Square) -> bool:
        return self.game.make_move(origin, target)

    @property
    def move_history(self) -> Tuple[MoveRecord, ...]:
        return self.game.move_history

    @property
    def captured_pieces(self) -> Dict[Side, Tuple[Piece, ...]]:
        return self.game.captured_pieces

    def has_any_legal_move(self, side: Side) -> bool:
        return self.game.has_any_legal_move(side)

    def bot_select_move(self, side: Optional[Side] = None) -> Optional[Move]:
        return self.search.search_best_move(self.game.board, side)

    def bot_move(self, side: Optional[Side] = None) -> Optional[MoveRecord]:
        """Select a move for the bot and play it. Returns the new record or None."""
        move = self.bot_select_move(side)
        if move is None or not self.attempt_move(move[:2], move[2:]):
            return None
        return self.game.move_history[-1]

    def undo(self) -> bool:
        return self.game.undo_move()

    def reset(self):
        self.game.reset()

    def hint(self, side: Optional[Side] = None) -> Optional[Move]:
        return self.game.hint(side or self.side_to_move, self.hint_rng)

    def move_list(self) -> List[str]:
        return self.game.move_list()

    def print_board(self):
        print(self.game.board)
