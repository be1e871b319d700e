"""
Board model for the TicTacToe engine.
Holds the 3x3 grid and the coordinate helpers used by the AI.

Cells hold +1 (computer), -1 (human) or 0 (empty).
"""

from enum import IntEnum
from typing import List, Optional, Sequence, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import EngineConfig


BOARD_SIZE = EngineConfig.BOARD_SIZE
EMPTY = EngineConfig.EMPTY

# A move is a (row, col) pair
Move = Tuple[int, int]


class Player(IntEnum):
    """The two players. The value is the mark placed on the board."""
    COMPUTER = EngineConfig.COMPUTER_MARK
    HUMAN = EngineConfig.HUMAN_MARK

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.HUMAN if self == Player.COMPUTER else Player.COMPUTER


def _empty_cells(size: int = BOARD_SIZE) -> np.ndarray:
    return np.zeros((size, size), dtype=np.int8)


@dataclass
class Board:
    """
    A square TicTacToe grid.

    The cells are stored as a numpy int8 array so that line sums can be
    taken directly by the win checker.
    """

    cells: np.ndarray = field(default_factory=_empty_cells)

    def __post_init__(self):
        cells = np.asarray(self.cells)

        if cells.ndim != 2 or cells.shape[0] != cells.shape[1]:
            raise ValueError(f"Board must be square, got shape {cells.shape}")

        # Check before the int8 cast, which would truncate or overflow
        marks = (EngineConfig.HUMAN_MARK, EMPTY, EngineConfig.COMPUTER_MARK)
        if not np.isin(cells, marks).all():
            raise ValueError("Board cells must be -1, 0 or 1")

        self.cells = cells.astype(np.int8)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[int]]]) -> "Board":
        """
        Build a board from nested lists.

        Args:
            rows: One list per row. None (or 0) marks an empty cell.

        Returns:
            The new Board.
        """
        return cls([[EMPTY if cell is None else cell for cell in row] for row in rows])

    def to_rows(self) -> List[List[Optional[int]]]:
        """Nested lists with None for empty cells."""
        return [
            [None if cell == EMPTY else int(cell) for cell in row]
            for row in self.cells
        ]

    @property
    def size(self) -> int:
        return int(self.cells.shape[0])

    def get(self, move: Move) -> int:
        row, col = move
        return int(self.cells[row, col])

    def place(self, move: Move, mark: int):
        """Put a mark on a cell. Does not check if the cell is empty."""
        row, col = move
        self.cells[row, col] = int(mark)

    def is_empty(self, move: Move) -> bool:
        return self.get(move) == EMPTY

    def count(self, mark: int) -> int:
        """How many cells hold the given mark."""
        return int(np.count_nonzero(self.cells == int(mark)))

    def is_full(self) -> bool:
        return self.count(EMPTY) == 0

    def get_empty_cells(self) -> List[Move]:
        return available_moves(self)

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        return Board(self.cells.copy())

    def render(self, config: Optional[EngineConfig] = None) -> str:
        """
        Plain text picture of the board, with the sequential index shown
        in each empty cell.
        """
        config = config or EngineConfig()
        lines = []
        for row in range(self.size):
            symbols = []
            for col in range(self.size):
                mark = self.get((row, col))
                if mark == EMPTY:
                    symbols.append(str(move_to_index((row, col), self.size)))
                else:
                    symbols.append(config.symbol_for(mark))
            lines.append(" " + " | ".join(symbols))
        separator = "\n" + "-" * (4 * self.size - 1) + "\n"
        return separator.join(lines)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)


def move_to_index(move: Move, size: int = BOARD_SIZE) -> int:
    """
    Takes a move (row, col) and returns its sequential index on the board.
    """
    row, col = move
    return row * size + col


def index_to_move(index: int, size: int = BOARD_SIZE) -> Move:
    """
    Takes a sequential index and returns the move (row, col).

    Inverse of move_to_index.
    """
    row, col = divmod(index, size)
    return (row, col)


def available_moves(board: Board) -> List[Move]:
    """
    Get all empty cells on the board, row by row.

    The AI breaks ties by taking the first move found, so this order
    must stay row-major.
    """
    moves = []
    for row in range(board.size):
        for col in range(board.size):
            if board.cells[row, col] == EMPTY:
                moves.append((row, col))
    return moves


def clone_board(board: Board) -> Board:
    """Independent copy of a board, safe to mutate."""
    return board.copy()
