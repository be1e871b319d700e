"""
Tests for the TicTacToe engine modules.
Covers the board, the win checker, the move validator, and the AI.

Usage:
    pytest test_modules.py
"""

import itertools
from functools import lru_cache

import numpy as np
import pytest

from tictactoe import (
    AIPlayer,
    Board,
    CellOccupiedError,
    InvalidIndexError,
    MoveAfterGameOverError,
    MoveValidator,
    Outcome,
    Player,
    UnsupportedBoardSizeError,
    WinChecker,
    available_moves,
    clone_board,
    index_to_move,
    move_to_index,
)

_ = None

LINES = [
    [(0, 0), (0, 1), (0, 2)],
    [(1, 0), (1, 1), (1, 2)],
    [(2, 0), (2, 1), (2, 2)],
    [(0, 0), (1, 0), (2, 0)],
    [(0, 1), (1, 1), (2, 1)],
    [(0, 2), (1, 2), (2, 2)],
    [(0, 0), (1, 1), (2, 2)],
    [(0, 2), (1, 1), (2, 0)],
]


# ==================== BOARD ====================

def test_index_round_trip():
    for index in range(9):
        assert move_to_index(index_to_move(index)) == index
    for row in range(3):
        for col in range(3):
            assert index_to_move(move_to_index((row, col))) == (row, col)


def test_index_to_move_is_row_major():
    assert index_to_move(0) == (0, 0)
    assert index_to_move(5) == (1, 2)
    assert index_to_move(7) == (2, 1)


def test_available_moves_row_major_order():
    board = Board.from_rows([
        [1, _, -1],
        [_, 1, _],
        [-1, _, _],
    ])
    assert available_moves(board) == [(0, 1), (1, 0), (1, 2), (2, 1), (2, 2)]
    assert len(available_moves(Board())) == 9


def test_clone_is_independent():
    board = Board()
    board.place((1, 1), Player.HUMAN)

    copy = clone_board(board)
    copy.place((0, 0), Player.COMPUTER)

    assert board.get((0, 0)) == 0
    assert copy.get((1, 1)) == Player.HUMAN
    assert board != copy


def test_from_rows_maps_none_to_empty():
    board = Board.from_rows([[1, _, _], [_, -1, _], [_, _, _]])
    assert board.count(Player.COMPUTER) == 1
    assert board.count(Player.HUMAN) == 1
    assert board.to_rows() == [[1, None, None], [None, -1, None], [None, None, None]]


def test_board_rejects_bad_input():
    with pytest.raises(ValueError):
        Board(np.zeros((3, 2), dtype=np.int8))
    with pytest.raises(ValueError):
        Board.from_rows([[2, 0, 0], [0, 0, 0], [0, 0, 0]])


@pytest.mark.parametrize("rows", [
    [[0.5, 1.9, 0], [0, 0, 0], [0, 0, 0]],
    [[300, 0, 0], [0, 0, 0], [0, 0, 0]],
    [[-129, 0, 0], [0, 0, 0], [0, 0, 0]],
    [[None, None, None], [None, None, None], [None, None, None]],
])
def test_board_rejects_marks_that_are_not_cells(rows):
    with pytest.raises(ValueError):
        Board(rows)


def test_from_rows_rejects_fractional_marks():
    with pytest.raises(ValueError):
        Board.from_rows([[1.5, _, _], [_, _, _], [_, _, _]])


def test_board_accepts_plain_lists_and_stores_int8():
    board = Board([[1, 0, -1], [0, 0, 0], [0, 0, 0]])
    assert board.cells.dtype == np.int8
    assert board.to_rows()[0] == [1, None, -1]


def test_render_shows_indices_and_symbols():
    board = Board.from_rows([[1, _, _], [_, -1, _], [_, _, _]])
    text = board.render()
    assert "O | 1 | 2" in text
    assert "3 | X | 5" in text


# ==================== WIN CHECKER ====================

def test_every_line_wins_for_both_players():
    checker = WinChecker()
    for line in LINES:
        for player, outcome in ((Player.COMPUTER, Outcome.COMPUTER_WINS),
                                (Player.HUMAN, Outcome.HUMAN_WINS)):
            board = Board()
            for move in line:
                board.place(move, player)

            assert checker.evaluate(board) == 3 * player
            assert checker.game_over_state(board) == outcome
            assert checker.get_winning_line(board) == line


def test_full_boards_without_a_line_are_draws():
    checker = WinChecker()
    draws = 0
    for first, second in ((Player.COMPUTER, Player.HUMAN), (Player.HUMAN, Player.COMPUTER)):
        for cells in itertools.combinations(range(9), 5):
            board = Board(np.full((3, 3), int(second), dtype=np.int8))
            for index in cells:
                board.place(index_to_move(index), first)

            if checker.evaluate(board) is None:
                draws += 1
                assert checker.game_over_state(board) == Outcome.DRAW
                assert checker.check_draw(board)

    assert draws > 0


def test_undecided_board_is_not_over():
    checker = WinChecker()
    board = Board.from_rows([[1, -1, _], [_, _, _], [_, _, _]])
    assert checker.evaluate(board) is None
    assert checker.game_over_state(board) is None
    assert not checker.check_draw(board)
    assert checker.get_winning_line(board) is None


def test_win_on_full_board_is_not_a_draw():
    checker = WinChecker()
    board = Board.from_rows([
        [1, 1, 1],
        [-1, -1, 1],
        [1, -1, -1],
    ])
    assert checker.game_over_state(board) == Outcome.COMPUTER_WINS
    assert not checker.check_draw(board)


def test_only_3x3_boards_are_supported():
    checker = WinChecker()
    with pytest.raises(UnsupportedBoardSizeError):
        checker.evaluate(Board(np.zeros((4, 4), dtype=np.int8)))


# ==================== MOVE VALIDATOR ====================

def test_validator_accepts_empty_cell():
    result = MoveValidator().validate_index(Board(), 4)
    assert result.is_valid
    assert result.error is None


@pytest.mark.parametrize("index", [-1, 9, 100, "4", 1.0, True])
def test_validator_rejects_bad_index(index):
    result = MoveValidator().validate_index(Board(), index)
    assert not result.is_valid
    assert isinstance(result.error, InvalidIndexError)


def test_validator_rejects_occupied_cell():
    board = Board.from_rows([[_, _, _], [_, 1, _], [_, _, _]])
    result = MoveValidator().validate_index(board, 4)
    assert not result.is_valid
    assert isinstance(result.error, CellOccupiedError)
    assert "occupied" in result.error_message


def test_validator_cell_count_follows_board_size():
    board = Board(np.zeros((4, 4), dtype=np.int8))
    validator = MoveValidator()
    assert validator.validate_index(board, 15).is_valid
    assert isinstance(validator.validate_index(board, 16).error, InvalidIndexError)


def test_validator_checks_game_over_first():
    result = MoveValidator().validate_index(Board(), 42, is_game_over=True)
    assert isinstance(result.error, MoveAfterGameOverError)


# ==================== AI ====================

@lru_cache(maxsize=None)
def _reference_value(cells, turn):
    """Plain minimax over flat tuples, no pruning."""
    for a, b, c in [[r * 3 + col for r, col in line] for line in LINES]:
        total = cells[a] + cells[b] + cells[c]
        if abs(total) == 3:
            return total

    values = []
    for i, cell in enumerate(cells):
        if cell == 0:
            child = cells[:i] + (turn,) + cells[i + 1:]
            values.append(_reference_value(child, -turn))

    if not values:
        return 0
    return max(values) if turn == 1 else min(values)


def _flat(board):
    return tuple(int(v) for v in board.cells.flatten())


def test_empty_board_is_a_draw_with_corner_or_center_opening():
    node = AIPlayer().search(Board(), Player.COMPUTER)
    assert node.score == 0
    assert move_to_index(node.best_move) in (0, 2, 4, 6, 8)


def test_search_does_not_modify_board():
    board = Board.from_rows([[1, _, _], [_, -1, _], [_, _, _]])
    before = board.copy()
    AIPlayer().search(board, Player.COMPUTER)
    assert board == before


def test_computer_takes_the_win():
    board = Board.from_rows([
        [1, 1, _],
        [-1, -1, _],
        [_, _, _],
    ])
    node = AIPlayer().search(board, Player.COMPUTER)
    assert node.best_move == (0, 2)
    assert node.score == 3


def test_human_search_blocks_and_forks():
    board = Board.from_rows([
        [1, 1, _],
        [-1, -1, _],
        [_, _, _],
    ])
    node = AIPlayer().search(board, Player.HUMAN)
    # Blocking at (0, 2) also sets up a fork, and it is found first
    assert node.best_move == (0, 2)
    assert node.score == -3


def test_terminal_board_has_no_best_move():
    board = Board.from_rows([
        [-1, -1, -1],
        [1, 1, _],
        [_, _, _],
    ])
    node = AIPlayer().search(board, Player.COMPUTER)
    assert node.best_move is None
    assert node.score == -3


def test_full_drawn_board_scores_zero():
    board = Board.from_rows([
        [1, -1, 1],
        [1, -1, -1],
        [-1, 1, 1],
    ])
    node = AIPlayer().search(board, Player.HUMAN)
    assert node.best_move is None
    assert node.score == 0


def test_pruning_matches_plain_minimax():
    ai = AIPlayer()
    for first, second in itertools.permutations(range(9), 2):
        board = Board()
        board.place(index_to_move(first), Player.COMPUTER)
        board.place(index_to_move(second), Player.HUMAN)

        node = ai.search(board, Player.COMPUTER)
        expected = _reference_value(_flat(board), 1)
        assert node.score == expected

        after = board.copy()
        after.place(node.best_move, Player.COMPUTER)
        assert _reference_value(_flat(after), -1) == expected


def test_pruning_visits_fewer_nodes():
    ai = AIPlayer()
    ai.search(Board(), Player.COMPUTER)
    pruned = ai.nodes_evaluated

    assert pruned > 0
    # A full minimax tree from the empty board has 549946 nodes
    assert pruned < 549946


def test_search_rejects_bad_turn():
    with pytest.raises(ValueError):
        AIPlayer().search(Board(), 0)


def test_explicit_candidate_moves_are_respected():
    node = AIPlayer().search(Board(), Player.COMPUTER, moves=[(2, 2), (0, 0)])
    assert node.best_move in ((2, 2), (0, 0))
