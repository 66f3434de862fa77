"""
Search engine for the TicTacToe bot.
Uses depth-limited Minimax with alpha-beta pruning to choose a move.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from .board_state import BoardState, Side
from .config import EngineConfig

logger = logging.getLogger(__name__)


@contextmanager
def placed(board: BoardState, position: int, mark: str) -> Iterator[BoardState]:
    """
    Place a mark for the duration of a block.

    The cell is cleared again on every exit from the block, including
    a pruning break or an exception. Placements must nest strictly.
    """
    board.place(position, mark)
    try:
        yield board
    finally:
        board.undo(position)


class SearchEngine:
    """
    Picks moves for the automated side.

    Every candidate move is searched SEARCH_DEPTH plies deep and scored
    with the board's heuristic. The search places and undoes marks on
    the board it is given instead of copying it.
    """

    def __init__(self, depth: int = EngineConfig.SEARCH_DEPTH):
        """
        Initialize the search engine.

        Args:
            depth: Plies searched below each candidate move.
        """
        self.depth = depth

        # Nodes visited by the last choose_move (for debugging)
        self.nodes_evaluated = 0

    def choose_move(self, board: BoardState) -> Optional[int]:
        """
        Get the best cell for the automated side.

        Ties go to the lowest index.

        Args:
            board: Current board. Left unchanged on return.

        Returns:
            Cell index (0-8), or None if the board is full.
        """
        self.nodes_evaluated = 0

        best_score = float('-inf')
        best_move = None

        for position in board.empty_cells():
            with placed(board, position, board.bot_mark):
                # Next ply is the human's
                score = self.minimax(
                    board, self.depth, float('-inf'), float('inf'), False
                )

            if score > best_score:
                best_score = score
                best_move = position

        logger.debug(
            "Evaluated %d positions. Best move: %s (score: %s)",
            self.nodes_evaluated, best_move, best_score
        )
        return best_move

    def minimax(
        self,
        board: BoardState,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool
    ) -> int:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Position to evaluate. Restored before returning.
            depth: Plies left to search.
            alpha: Best score the automated side can guarantee so far.
            beta: Best score the human side can guarantee so far.
            maximizing: True if the automated side moves next.

        Returns:
            The score of the position.
        """
        self.nodes_evaluated += 1

        score = board.heuristic_score()
        if depth == 0 or abs(score) == EngineConfig.WIN_SCORE:
            return score
        if not board.has_moves_left():
            return 0  # Draw

        side = Side.AUTOMATED if maximizing else Side.HUMAN
        mark = board.mark_for(side)

        if maximizing:
            max_score = float('-inf')
            for position in board.empty_cells():
                with placed(board, position, mark):
                    value = self.minimax(board, depth - 1, alpha, beta, False)
                max_score = max(max_score, value)
                alpha = max(alpha, value)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for position in board.empty_cells():
                with placed(board, position, mark):
                    value = self.minimax(board, depth - 1, alpha, beta, True)
                min_score = min(min_score, value)
                beta = min(beta, value)
                if beta <= alpha:
                    break  # Prune
            return min_score
