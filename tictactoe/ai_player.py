"""
AI player for the TicTacToe engine.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board, Move, Player, available_moves, clone_board
from .config import EngineConfig
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


@dataclass
class SearchNode:
    """
    One position in the search tree.

    Lives only for the duration of the recursive call that created it.
    """
    board: Board
    moves: List[Move] = field(default_factory=list)
    score: Optional[int] = None
    best_move: Optional[Move] = None


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The computer (+1) maximizes and the human (-1) minimizes. Scores are
    the raw line sums from the win checker: +3 computer win, -3 human
    win, 0 draw.
    """

    def __init__(self, config: Optional[EngineConfig] = None,
                 win_checker: Optional[WinChecker] = None):
        """
        Initialize the AI player.

        Args:
            config: Engine configuration (default: EngineConfig()).
            win_checker: Evaluator used at every node.
        """
        self.config = config or EngineConfig()
        self.win_checker = win_checker or WinChecker(self.config)

        # Keep track of how many nodes we've evaluated (for debugging)
        self.nodes_evaluated = 0

    def search(
        self,
        board: Board,
        turn: int,
        moves: Optional[List[Move]] = None,
        alpha: float = -math.inf,
        beta: float = math.inf
    ) -> SearchNode:
        """
        Search the game tree from a position.

        Args:
            board: Position to search from. Never modified.
            turn: Side to move, +1 (computer) or -1 (human).
            moves: Candidate moves (default: every empty cell, row-major).
            alpha: Best score the maximizer can already guarantee.
            beta: Best score the minimizer can already guarantee.

        Returns:
            The root SearchNode with its score and best move.
        """
        turn = Player(turn)
        self.nodes_evaluated = 0

        node = self._search(board, turn, moves, alpha, beta)

        logger.debug(
            "Searched %d nodes for %s: best move %s (score %s)",
            self.nodes_evaluated, turn.name, node.best_move, node.score
        )
        return node

    def _search(
        self,
        board: Board,
        turn: Player,
        moves: Optional[List[Move]],
        alpha: float,
        beta: float
    ) -> SearchNode:
        """
        Minimax algorithm with alpha-beta pruning.

        Ties keep the first move found, so the result depends on the order
        of the candidate moves.
        """
        self.nodes_evaluated += 1

        if moves is None:
            moves = available_moves(board)

        node = SearchNode(board=board, moves=list(moves))
        score = -turn * math.inf
        best_move = None

        # Someone already won, nothing left to explore
        winner = self.win_checker.evaluate(board)
        if winner is not None:
            node.moves = []
            score = winner

        for i, move in enumerate(node.moves):
            child_board = clone_board(board)
            child_board.place(move, turn)
            remaining = node.moves[:i] + node.moves[i + 1:]

            child = self._search(child_board, turn.opposite(), remaining, alpha, beta)

            if turn == Player.COMPUTER:
                # Maximizing
                if child.score > score:
                    best_move = move
                    score = child.score
                alpha = max(alpha, score)
            else:
                # Minimizing
                if child.score < score:
                    best_move = move
                    score = child.score
                beta = min(beta, score)

            if alpha >= beta:
                break  # Prune

        if math.isinf(score):
            # No move was explored
            winner = self.win_checker.evaluate(board)
            score = winner if winner is not None else 0

        node.score = int(score)
        node.best_move = best_move
        return node

    def get_best_move(self, board: Board, turn: int) -> Optional[Move]:
        """
        Get the best move for the given side.

        Returns:
            (row, col) of best move, or None if no moves available.
        """
        return self.search(board, turn).best_move
