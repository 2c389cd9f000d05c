"""Core engine components: board, move generation, legality, game, evaluator and search."""

from .board import Board
from .evaluator import Evaluator
from .game import ChessGame, MoveRecord
from .pieces import Kind, Piece, Side
from .search import SearchEngine
