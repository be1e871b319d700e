"""
TicTacToe engine.
Handles the board, the rules, the minimax AI opponent, and the game session.

The computer plays +1 and always plays optimally; the human plays -1.
"""

from .config import EngineConfig
from .board import Board, Player, available_moves, clone_board, index_to_move, move_to_index
from .win_checker import Outcome, UnsupportedBoardSizeError, WinChecker
from .ai_player import AIPlayer, SearchNode
from .move_validator import (
    CellOccupiedError,
    IllegalMoveError,
    InvalidIndexError,
    MoveAfterGameOverError,
    MoveValidator,
)
from .session import GameSession, GameStatus

__version__ = "1.0.0"
