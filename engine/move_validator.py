"""
Move validator for the TicTacToe bot.
Turns the human's typed cell number into a board index and checks it.
"""

from typing import Optional
from dataclasses import dataclass

from .board_state import BoardState
from .config import EngineConfig


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


def parse_cell_number(text: str) -> Optional[int]:
    """
    Parse a cell number typed by the human.

    Args:
        text: Raw input line, cells numbered 1-9.

    Returns:
        The 0-based board index, or None if the text is not an
        integer in range.
    """
    try:
        number = int(text.strip())
    except ValueError:
        return None

    if not 1 <= number <= EngineConfig.BOARD_CELLS:
        return None
    return number - 1


class MoveValidator:
    """
    Validates moves against the board.

    Rules:
    1. The index must be on the board
    2. The cell must be empty
    """

    def validate_move(self, board: BoardState, position: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            position: Cell index (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not 0 <= position < EngineConfig.BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {position + 1}. Must be 1-9."
            )

        if board.cells[position] != EngineConfig.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {position + 1} is already taken by {board.cells[position]}."
            )

        return ValidationResult(is_valid=True)
