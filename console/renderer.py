"""
Text rendering of the TicTacToe board.
"""

from engine.board_state import BoardState
from engine.config import EngineConfig

SEPARATOR = "-" * 29


def render_board(board: BoardState) -> str:
    """
    Render the board as a fixed-width grid, 3 cells per row.

    Empty cells show as a blank.
    """
    size = EngineConfig.BOARD_SIZE
    rows = []
    for start in range(0, EngineConfig.BOARD_CELLS, size):
        rows.append("".join(f"|{c}|" for c in board.cells[start:start + size]))
    return SEPARATOR + "\n\n" + "\n".join(rows)


def render_index_map() -> str:
    """Show which number selects which cell."""
    size = EngineConfig.BOARD_SIZE
    rows = []
    for start in range(0, EngineConfig.BOARD_CELLS, size):
        rows.append("|".join(str(i + 1) for i in range(start, start + size)))
    return "Index map:\n" + "\n".join(rows)
