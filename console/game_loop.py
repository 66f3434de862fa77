"""
Console game loop for TicTacToe.

Alternates between the human, who types a cell number, and the bot,
which asks the SearchEngine for its move. Input and output go through
injectable callables so the loop can be driven from tests.
"""

import logging
from typing import Callable, Optional

from engine.board_state import BoardState, Side
from engine.move_validator import MoveValidator, parse_cell_number
from engine.search import SearchEngine
from engine.win_checker import WinChecker, GameOutcome, GameStatus
from .renderer import render_board, render_index_map

logger = logging.getLogger(__name__)


class GameSession:
    """
    One game between a human and the bot.

    Game flow:
    1. Ask who moves first (the first mover plays X)
    2. The side to move places its mark
    3. Check for a win or a full board
    4. Hand the turn to the other side and repeat
    """

    def __init__(
        self,
        engine: Optional[SearchEngine] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize the session.

        Args:
            engine: Search engine for the bot's moves.
            input_fn: Reads one line after showing a prompt (default: input).
            output_fn: Writes one message (default: print).
        """
        self.engine = engine or SearchEngine()
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self.board: Optional[BoardState] = None
        self.turn: Optional[Side] = None

    def ask_first_mover(self) -> Side:
        """
        Ask whether the human wants to move first.

        Only "n" (any case, surrounding blanks ignored) gives the first
        move to the bot. Anything else, including an empty answer,
        keeps the human first.
        """
        answer = self.input_fn("Do you want to make a move first (Y/n): ")
        if answer.strip().lower() == "n":
            return Side.AUTOMATED
        return Side.HUMAN

    def play(self, first: Optional[Side] = None) -> GameOutcome:
        """
        Play one full game.

        Args:
            first: Side moving first. Asked interactively if None.

        Returns:
            The final GameOutcome (WON or DRAW).
        """
        self.output_fn("Welcome to the game of Tic Tac Toe!")

        if first is None:
            first = self.ask_first_mover()

        self.board = BoardState.for_first_mover(first)
        self.turn = first
        logger.debug(
            "New game: %s moves first, human plays %s, bot plays %s",
            first.value, self.board.human_mark, self.board.bot_mark
        )

        self.output_fn(render_index_map())
        self.output_fn(render_board(self.board))

        while True:
            if self.turn == Side.HUMAN:
                self._human_move()
            else:
                self._bot_move()

            self.output_fn(render_board(self.board))

            outcome = self.win_checker.check(self.board)
            if outcome.is_game_over:
                self._show_result(outcome)
                return outcome

            self.turn = self.turn.opposite()

    def _human_move(self):
        """Read cell numbers until one names an empty cell, then place it."""
        while True:
            position = parse_cell_number(self.input_fn("Time for your move (1-9): "))
            if position is None:
                continue  # Not a number in 1-9, ask again

            result = self.validator.validate_move(self.board, position)
            if not result.is_valid:
                self.output_fn(result.error_message)
                continue

            self.board.place(position, self.board.human_mark)
            logger.debug("Human placed %s at %d", self.board.human_mark, position)
            return

    def _bot_move(self):
        """Let the search engine pick and place the bot's mark."""
        position = self.engine.choose_move(self.board)
        self.board.place(position, self.board.bot_mark)
        self.output_fn(f"Bot plays at {position + 1}")

    def _show_result(self, outcome: GameOutcome):
        if outcome.status == GameStatus.WON:
            self.output_fn("We have a winner!")
        else:
            self.output_fn("We have a tie!")
