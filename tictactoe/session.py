"""
Game session for the TicTacToe engine.
Owns the live board, applies human and computer moves, and tells
listeners when the game is over.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .ai_player import AIPlayer
from .board import Board, Player, index_to_move, move_to_index
from .config import EngineConfig
from .move_validator import MoveValidator
from .win_checker import Outcome, WinChecker

logger = logging.getLogger(__name__)

GameOverCallback = Callable[[Outcome], None]


class GameStatus(Enum):
    """Where the game is."""
    IN_PROGRESS = "in_progress"
    COMPUTER_WINS = "computer_wins"
    HUMAN_WINS = "human_wins"
    DRAW = "draw"

    @classmethod
    def from_outcome(cls, outcome: Optional[Outcome]) -> "GameStatus":
        if outcome is None:
            return cls.IN_PROGRESS
        return {
            Outcome.COMPUTER_WINS: cls.COMPUTER_WINS,
            Outcome.HUMAN_WINS: cls.HUMAN_WINS,
            Outcome.DRAW: cls.DRAW,
        }[outcome]


class GameSession:
    """
    A game of TicTacToe between a human and the computer.

    Game flow:
    1. Human plays with human_move_at_index() (hint() suggests a move)
    2. Computer answers with computer_move()
    3. Repeat until someone wins or it's a draw; every registered
       callback then receives the Outcome (1, -1 or 0)
    """

    def __init__(self, config: Optional[EngineConfig] = None,
                 board: Optional[Board] = None):
        """
        Initialize the session.

        Args:
            config: Engine configuration (default: EngineConfig()).
            board: Starting position. A copy is taken; default is an empty board.
        """
        self.config = config or EngineConfig()
        self.win_checker = WinChecker(self.config)
        self.validator = MoveValidator()
        self.ai = AIPlayer(self.config, self.win_checker)

        self._callbacks: List[GameOverCallback] = []

        self.reset()
        if board is not None:
            self._board = board.copy()
            self._status = GameStatus.from_outcome(
                self.win_checker.game_over_state(self._board)
            )

    # ==================== STATE ====================

    @property
    def board(self) -> Board:
        """Copy of the live board."""
        return self._board.copy()

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_game_over(self) -> bool:
        return self._status != GameStatus.IN_PROGRESS

    @property
    def history(self) -> List[Tuple[Player, int]]:
        """Moves played since the last reset, as (player, index)."""
        return list(self._history)

    def reset(self):
        """Resets the game board. Registered callbacks are kept."""
        size = self.config.BOARD_SIZE
        self._board = Board.from_rows([[None] * size for _ in range(size)])
        self._status = GameStatus.IN_PROGRESS
        self._history: List[Tuple[Player, int]] = []

    def register_game_over_callback(self, callback: GameOverCallback):
        """
        Registers a callback to be run when the game ends.
        The Outcome (1, 0, -1) is passed to each callback.
        """
        self._callbacks.append(callback)

    # ==================== MOVES ====================

    def human_move_at_index(self, index: int):
        """
        Human plays at a sequential index.

        Raises:
            MoveAfterGameOverError: The game has already finished.
            InvalidIndexError: The index is not on the board.
            CellOccupiedError: The cell is taken.
        """
        result = self.validator.validate_index(self._board, index, self.is_game_over)
        if not result.is_valid:
            logger.debug("Rejected human move at %r: %s", index, result.error_message)
            raise result.error

        index = int(index)
        self._board.place(index_to_move(index, self._board.size), Player.HUMAN)
        self._history.append((Player.HUMAN, index))
        self.check_game_over()

    def computer_move(self) -> Optional[int]:
        """
        Triggers a computer move.

        Returns:
            The sequential index played, or None if there is no move
            (board full or game already over).
        """
        if self.is_game_over:
            return None

        move = self.ai.get_best_move(self._board, Player.COMPUTER)
        if move is None:
            return None

        self._board.place(move, Player.COMPUTER)
        index = move_to_index(move, self._board.size)
        self._history.append((Player.COMPUTER, index))
        self.check_game_over()
        return index

    def hint(self) -> Optional[int]:
        """
        Computes the best move for the human player
        out of the goodness of the AI's heart.

        Returns:
            A sequential index, or None if there is no move.
        """
        move = self.ai.get_best_move(self._board, Player.HUMAN)
        if move is None:
            return None
        return move_to_index(move, self._board.size)

    def check_game_over(self) -> Optional[Outcome]:
        """
        Calls all of the game over callbacks if the game has just ended.

        Returns:
            The Outcome, or None while the game is in progress.
        """
        outcome = self.win_checker.game_over_state(self._board)
        if outcome is None or self.is_game_over:
            return outcome

        self._status = GameStatus.from_outcome(outcome)
        logger.info("Game over: %s", self._status.value)

        for callback in self._callbacks:
            callback(outcome)

        return outcome
