"""
Board state for the TicTacToe bot.
Holds the nine cells and which mark belongs to which side.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .config import EngineConfig


class Side(Enum):
    """The two sides in the game."""
    HUMAN = "human"
    AUTOMATED = "automated"

    def opposite(self) -> "Side":
        """Get the opposite side."""
        return Side.AUTOMATED if self == Side.HUMAN else Side.HUMAN


# All possible winning lines as cell indices
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def _empty_cells() -> List[str]:
    return [EngineConfig.EMPTY] * EngineConfig.BOARD_CELLS


@dataclass
class BoardState:
    """
    The 3x3 TicTacToe board.

    Cells are indexed 0..8 in row-major order. Each cell holds
    EngineConfig.EMPTY or one of the two marks. The same instance is
    kept for the whole game; the search places and undoes marks on it
    in place.
    """

    cells: List[str] = field(default_factory=_empty_cells)

    # Marks are assigned once, depending on who moves first
    human_mark: str = EngineConfig.FIRST_MARK
    bot_mark: str = EngineConfig.SECOND_MARK

    @classmethod
    def for_first_mover(cls, first: Side) -> "BoardState":
        """
        Create an empty board with marks assigned for the given first mover.

        The side moving first plays X.
        """
        if first == Side.AUTOMATED:
            return cls(human_mark=EngineConfig.SECOND_MARK,
                       bot_mark=EngineConfig.FIRST_MARK)
        return cls()

    def mark_for(self, side: Side) -> str:
        """Get the mark a side plays with."""
        return self.bot_mark if side == Side.AUTOMATED else self.human_mark

    def side_of(self, mark: str) -> Optional[Side]:
        """Get the side owning a mark, or None for an empty cell."""
        if mark == self.bot_mark:
            return Side.AUTOMATED
        if mark == self.human_mark:
            return Side.HUMAN
        return None

    def place(self, position: int, mark: str):
        """
        Put a mark on an empty cell.

        Args:
            position: Cell index (0-8).
            mark: The mark to place.

        Raises:
            ValueError: If the index is out of range, the cell is
                occupied or the mark belongs to neither side.
        """
        self._check_position(position)
        if mark not in (self.human_mark, self.bot_mark):
            raise ValueError(f"Unknown mark {mark!r}")
        if self.cells[position] != EngineConfig.EMPTY:
            raise ValueError(
                f"Cell {position} is already occupied by {self.cells[position]!r}"
            )
        self.cells[position] = mark

    def undo(self, position: int):
        """Clear a cell again. Used by the search to revert speculative moves."""
        self._check_position(position)
        self.cells[position] = EngineConfig.EMPTY

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        """Get the first completed line, or None."""
        b = self.cells
        for line in WINNING_LINES:
            a, c, d = line
            if b[a] != EngineConfig.EMPTY and b[a] == b[c] == b[d]:
                return line
        return None

    def is_terminal_win(self) -> Optional[Side]:
        """
        Check all 8 lines for a winner.

        Returns:
            The Side owning a completed line, or None.
        """
        line = self.winning_line()
        if line is None:
            return None
        return self.side_of(self.cells[line[0]])

    def has_moves_left(self) -> bool:
        """True if any cell is empty."""
        return EngineConfig.EMPTY in self.cells

    def empty_cells(self) -> List[int]:
        """Get the empty cell indices in ascending order."""
        return [i for i, c in enumerate(self.cells) if c == EngineConfig.EMPTY]

    def heuristic_score(self) -> int:
        """
        Evaluate the position from the automated side's point of view.

        A completed line scores +WIN_SCORE for the bot and -WIN_SCORE for
        the human. Otherwise every occupied cell adds its position weight
        (center 3, corner 2, edge 1), positive for the bot's marks and
        negative for the human's.
        """
        winner = self.is_terminal_win()
        if winner == Side.AUTOMATED:
            return EngineConfig.WIN_SCORE
        if winner == Side.HUMAN:
            return -EngineConfig.WIN_SCORE

        score = 0
        for position, mark in enumerate(self.cells):
            if mark == EngineConfig.EMPTY:
                continue
            weight = EngineConfig.position_weight(position)
            score += weight if mark == self.bot_mark else -weight
        return score

    def copy(self) -> "BoardState":
        """Create an independent copy of the board."""
        return BoardState(
            cells=list(self.cells),
            human_mark=self.human_mark,
            bot_mark=self.bot_mark,
        )

    def _check_position(self, position: int):
        if not 0 <= position < EngineConfig.BOARD_CELLS:
            raise ValueError(
                f"Invalid position {position}. Must be 0-{EngineConfig.BOARD_CELLS - 1}."
            )
