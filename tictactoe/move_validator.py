"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules.
"""

import numbers
from typing import Optional
from dataclasses import dataclass

from .board import Board, index_to_move


class IllegalMoveError(Exception):
    """A move was rejected."""


class InvalidIndexError(IllegalMoveError):
    """The index is not a cell on the board."""


class CellOccupiedError(IllegalMoveError):
    """The cell already holds a mark."""


class MoveAfterGameOverError(IllegalMoveError):
    """The game has already finished."""


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    error: Optional[IllegalMoveError] = None

    @classmethod
    def invalid(cls, error: IllegalMoveError) -> "ValidationResult":
        return cls(is_valid=False, error_message=str(error), error=error)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be a cell on the board
    3. Can only place on empty cells
    """

    def validate_index(
        self,
        board: Board,
        index: int,
        is_game_over: bool = False
    ) -> ValidationResult:
        """
        Validate a move given as a sequential index.

        Args:
            board: Current board.
            index: Cell to place a mark on (0-8 on a 3x3 board).
            is_game_over: Whether the game has already finished.

        Returns:
            ValidationResult with is_valid, error_message and the error to raise.
        """
        if is_game_over:
            return ValidationResult.invalid(
                MoveAfterGameOverError("Game is already over!")
            )

        cell_count = board.size * board.size
        # bool is an int subclass, but True is not a cell
        if not isinstance(index, numbers.Integral) or isinstance(index, bool) \
                or not 0 <= index < cell_count:
            return ValidationResult.invalid(
                InvalidIndexError(f"Invalid index {index!r}. Must be 0-{cell_count - 1}.")
            )

        move = index_to_move(index, board.size)
        if not board.is_empty(move):
            return ValidationResult.invalid(
                CellOccupiedError(f"Cell {index} {move} is already occupied")
            )

        return ValidationResult(is_valid=True)
