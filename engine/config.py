"""
Engine configuration for the TicTacToe bot.
All the constants the board, the evaluator and the search agree on.
"""


class EngineConfig:
    """
    Configuration class for the game engine.

    These values decide which moves the bot picks. Changing the weights
    or the depth changes the bot's observable play.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells indexed 0..8 row by row
    BOARD_SIZE = 3
    BOARD_CELLS = BOARD_SIZE * BOARD_SIZE

    # Cell contents
    EMPTY = " "
    FIRST_MARK = "X"   # Whoever moves first plays X
    SECOND_MARK = "O"

    # ==================== EVALUATION SETTINGS ====================
    # Score of a position with a completed line
    WIN_SCORE = 10

    # Position weights for occupied cells
    CENTER_WEIGHT = 3
    CORNER_WEIGHT = 2
    EDGE_WEIGHT = 1

    CENTER_CELL = 4
    CORNER_CELLS = (0, 2, 6, 8)
    EDGE_CELLS = (1, 3, 5, 7)

    # ==================== SEARCH SETTINGS ====================
    # Plies searched below each candidate move
    SEARCH_DEPTH = 5

    @classmethod
    def position_weight(cls, position: int) -> int:
        """Get the evaluation weight of a cell index."""
        if position == cls.CENTER_CELL:
            return cls.CENTER_WEIGHT
        if position in cls.CORNER_CELLS:
            return cls.CORNER_WEIGHT
        return cls.EDGE_WEIGHT
