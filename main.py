"""
Console game for the TicTacToe engine.

This script ties together:
- The game session (board, rules, game over callbacks)
- The minimax AI (computer moves and hints)

Run this script to play TicTacToe against the computer!
"""

import argparse
import logging
from typing import Optional

from tictactoe import (
    EngineConfig,
    GameSession,
    IllegalMoveError,
    Outcome,
)


class TicTacToeConsole:
    """
    Plays a game in the terminal.

    Game flow:
    1. Human types the index of a cell (0-8)
    2. Computer calculates and plays the best response
    3. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        computer_first: bool = False,
        show_hints: bool = False,
        config: Optional[EngineConfig] = None
    ):
        """
        Initialize the console game.

        Args:
            computer_first: If True, the computer makes the first move.
            show_hints: If True, print the AI's suggestion before each human move.
            config: Engine configuration.
        """
        self.config = config or EngineConfig()
        self.computer_first = computer_first
        self.show_hints = show_hints

        self.session = GameSession(self.config)
        self.session.register_game_over_callback(self._announce_result)

    def start(self):
        """Start the game."""
        print("\nStarting TicTacToe game...")
        print(f"You play {self.config.HUMAN_SYMBOL}, "
              f"the computer plays {self.config.COMPUTER_SYMBOL}.")
        print("Type a cell number to move, 'h' for a hint, 'q' to quit\n")

        if self.computer_first:
            self._computer_turn()

        while not self.session.is_game_over:
            if not self._human_turn():
                return
            if not self.session.is_game_over:
                self._computer_turn()

    def _human_turn(self) -> bool:
        """Read and play one human move. Returns False if the player quits."""
        print("\n" + self.session.board.render(self.config) + "\n")

        if self.show_hints:
            print(f"Hint: try {self.session.hint()}")

        while True:
            text = input("Your move: ").strip().lower()
            if text == "q":
                print("Goodbye!")
                return False
            if text == "h":
                print(f"Hint: try {self.session.hint()}")
                continue

            try:
                self.session.human_move_at_index(int(text))
                return True
            except ValueError:
                print("Please type a number 0-8.")
            except IllegalMoveError as e:
                print(f"Illegal move: {e}")

    def _computer_turn(self):
        index = self.session.computer_move()
        if index is not None:
            print(f"Computer plays {index}")

    def _announce_result(self, outcome: Outcome):
        print("\n" + self.session.board.render(self.config))

        if outcome == Outcome.HUMAN_WINS:
            print("\nCongratulations! You won!")
        elif outcome == Outcome.COMPUTER_WINS:
            print("\nComputer wins! Better luck next time!")
        else:
            print("\nIt's a draw! Good game!")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer play first"
    )
    parser.add_argument(
        "--hints",
        action="store_true",
        help="Show the best move before each of your turns"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log search statistics"
    )

    args = parser.parse_args()

    config = EngineConfig()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT
    )

    game = TicTacToeConsole(
        computer_first=args.computer_first,
        show_hints=args.hints,
        config=config
    )

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")


if __name__ == "__main__":
    main()
