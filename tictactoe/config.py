"""
Engine configuration for the TicTacToe engine.
All the settings for the board, the marks, and logging.
"""


class EngineConfig:
    """
    Configuration class for engine settings.
    Change these values based on your setup!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Three in a row wins. The win checker only supports 3x3 boards.
    WIN_LENGTH = 3

    # ==================== MARKS ====================
    # Computer maximizes, human minimizes
    COMPUTER_MARK = 1
    HUMAN_MARK = -1
    EMPTY = 0

    # Symbols used when printing the board
    COMPUTER_SYMBOL = "O"
    HUMAN_SYMBOL = "X"
    EMPTY_SYMBOL = " "

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"

    def symbol_for(self, mark: int) -> str:
        """Get the console symbol for a cell mark."""
        if mark == self.COMPUTER_MARK:
            return self.COMPUTER_SYMBOL
        if mark == self.HUMAN_MARK:
            return self.HUMAN_SYMBOL
        return self.EMPTY_SYMBOL
