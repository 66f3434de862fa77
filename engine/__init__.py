"""
TicTacToe engine.
Board state, game rules and the search that picks the bot's moves.
"""

from .config import EngineConfig
from .board_state import BoardState, Side, WINNING_LINES
from .win_checker import WinChecker, GameStatus, GameOutcome
from .move_validator import MoveValidator, ValidationResult, parse_cell_number
from .search import SearchEngine, placed

__version__ = "1.0.0"
