"""
Win checker for the TicTacToe bot.
Decides whether a game is still going, won, or drawn.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .board_state import BoardState, Side


class GameStatus(Enum):
    """Where the game stands after a move."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass
class GameOutcome:
    """Result of checking a board."""
    status: GameStatus
    winner: Optional[Side] = None
    winning_line: Optional[Tuple[int, int, int]] = None

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS


class WinChecker:
    """
    Checks for the end of a game.

    A completed line wins, even on a full board. A full board without
    a completed line is a draw. Anything else is still in progress.
    """

    def check(self, board: BoardState) -> GameOutcome:
        """
        Check the board after a move.

        Args:
            board: The current board.

        Returns:
            GameOutcome with status, winner and the winning line.
        """
        line = board.winning_line()
        if line is not None:
            return GameOutcome(
                status=GameStatus.WON,
                winner=board.side_of(board.cells[line[0]]),
                winning_line=line,
            )

        if not board.has_moves_left():
            return GameOutcome(status=GameStatus.DRAW)

        return GameOutcome(status=GameStatus.IN_PROGRESS)

    def check_draw(self, board: BoardState) -> bool:
        """True if the board is full with no completed line."""
        return self.check(board).status == GameStatus.DRAW
