"""
Win checker for the TicTacToe engine.
Checks if a player has won or if the game is a draw.
"""

from enum import IntEnum
from typing import List, Optional

import numpy as np

from .board import Board, Move
from .config import EngineConfig


class Outcome(IntEnum):
    """Finished game result, as passed to game over callbacks."""
    COMPUTER_WINS = 1
    DRAW = 0
    HUMAN_WINS = -1


class UnsupportedBoardSizeError(ValueError):
    """The win checker only knows three in a row on a 3x3 board."""


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally). With the computer
    stored as +1 and the human as -1, a line wins when it sums to +3 or -3.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    def _check_size(self, board: Board):
        if board.size != self.config.WIN_LENGTH:
            raise UnsupportedBoardSizeError(
                f"Win check needs a {self.config.WIN_LENGTH}x{self.config.WIN_LENGTH} "
                f"board, got {board.size}x{board.size}"
            )

    def _line_sums(self, cells: np.ndarray) -> List[int]:
        # Rows, then columns, then main and anti diagonal
        sums = list(cells.sum(axis=1)) + list(cells.sum(axis=0))
        sums.append(np.trace(cells))
        sums.append(np.trace(np.fliplr(cells)))
        return [int(s) for s in sums]

    def evaluate(self, board: Board) -> Optional[int]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The line sum of the first complete line found (+3 computer,
            -3 human), or None if no winner yet.
        """
        self._check_size(board)

        for total in self._line_sums(board.cells):
            if abs(total) == self.config.WIN_LENGTH:
                return total

        return None

    def check_draw(self, board: Board) -> bool:
        """True if the board is full and nobody has three in a row."""
        return self.evaluate(board) is None and board.is_full()

    def game_over_state(self, board: Board) -> Optional[Outcome]:
        """
        Determines computer win (1), computer loss (-1) or draw (0).

        Returns:
            The Outcome, or None if the game is still in progress.
        """
        winner = self.evaluate(board)

        if winner is None:
            return Outcome.DRAW if board.is_full() else None

        return Outcome.COMPUTER_WINS if winner > 0 else Outcome.HUMAN_WINS

    def get_winning_line(self, board: Board) -> Optional[List[Move]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        self._check_size(board)
        size = board.size

        lines = [[(row, col) for col in range(size)] for row in range(size)]
        lines += [[(row, col) for row in range(size)] for col in range(size)]
        lines.append([(i, i) for i in range(size)])
        lines.append([(i, size - 1 - i) for i in range(size)])

        for line in lines:
            total = sum(board.get(move) for move in line)
            if abs(total) == self.config.WIN_LENGTH:
                return line
        return None
