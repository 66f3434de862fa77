"""
Console front end for TicTacToe.
Reads moves from the terminal and prints the board.
"""

from .game_loop import GameSession
from .renderer import render_board, render_index_map
