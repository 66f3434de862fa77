"""
Tests for the board, the heuristic, win checking and move validation.
"""

import itertools

import pytest

from engine.board_state import BoardState, Side, WINNING_LINES
from engine.config import EngineConfig
from engine.move_validator import MoveValidator, parse_cell_number
from engine.win_checker import WinChecker, GameStatus


def board_from(text, human="X", bot="O"):
    """Build a board from a 9-character string, '_' for empty."""
    cells = [EngineConfig.EMPTY if c == "_" else c for c in text]
    return BoardState(cells=cells, human_mark=human, bot_mark=bot)


def reachable_boards():
    """Every position reachable from an empty board with X moving first."""
    seen = set()
    stack = [tuple(EngineConfig.EMPTY * 9)]
    while stack:
        cells = stack.pop()
        if cells in seen:
            continue
        seen.add(cells)
        board = BoardState(cells=list(cells))
        if board.is_terminal_win() is not None or not board.has_moves_left():
            continue
        mark = "X" if cells.count("X") == cells.count("O") else "O"
        for position in board.empty_cells():
            child = list(cells)
            child[position] = mark
            stack.append(tuple(child))
    return [list(cells) for cells in seen]


REACHABLE = reachable_boards()


def test_winning_lines_are_exactly_rows_columns_and_diagonals():
    assert len(WINNING_LINES) == 8
    assert len(set(WINNING_LINES)) == 8
    assert {(0, 1, 2), (3, 4, 5), (6, 7, 8)} <= set(WINNING_LINES)
    assert {(0, 3, 6), (1, 4, 7), (2, 5, 8)} <= set(WINNING_LINES)
    assert {(0, 4, 8), (2, 4, 6)} <= set(WINNING_LINES)


def test_new_board_is_empty():
    board = BoardState()
    assert board.cells == [" "] * 9
    assert board.empty_cells() == list(range(9))
    assert board.has_moves_left()
    assert board.is_terminal_win() is None
    assert board.heuristic_score() == 0


def test_first_mover_plays_x():
    human_first = BoardState.for_first_mover(Side.HUMAN)
    assert (human_first.human_mark, human_first.bot_mark) == ("X", "O")

    bot_first = BoardState.for_first_mover(Side.AUTOMATED)
    assert (bot_first.human_mark, bot_first.bot_mark) == ("O", "X")
    assert bot_first.mark_for(Side.AUTOMATED) == "X"
    assert bot_first.side_of("O") == Side.HUMAN
    assert bot_first.side_of(" ") is None


def test_side_opposite():
    assert Side.HUMAN.opposite() == Side.AUTOMATED
    assert Side.AUTOMATED.opposite() == Side.HUMAN


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("side", [Side.HUMAN, Side.AUTOMATED])
def test_every_line_wins(line, side):
    board = BoardState()
    for position in line:
        board.place(position, board.mark_for(side))

    assert board.is_terminal_win() == side
    assert board.winning_line() == line
    expected = EngineConfig.WIN_SCORE if side == Side.AUTOMATED else -EngineConfig.WIN_SCORE
    assert board.heuristic_score() == expected


def test_two_in_a_row_is_not_a_win():
    board = board_from("XX_OO____")
    assert board.is_terminal_win() is None
    assert board.winning_line() is None


def test_mixed_line_is_not_a_win():
    board = board_from("XOX______")
    assert board.is_terminal_win() is None


@pytest.mark.parametrize("text, expected", [
    ("____O____", 3),    # bot center
    ("O________", 2),    # bot corner
    ("_O_______", 1),    # bot edge
    ("____X____", -3),   # human center
    ("X___O____", 1),    # human corner, bot center
    ("XO_______", -1),   # human corner, bot edge
    ("X_O_X_O_X", -10),  # human diagonal
    ("OX_XO_XXO", 10),   # bot diagonal beats positional sum
])
def test_heuristic_score(text, expected):
    assert board_from(text).heuristic_score() == expected


def test_heuristic_sign_follows_bot_mark():
    as_o = board_from("____O____", human="X", bot="O")
    as_x = board_from("____O____", human="O", bot="X")
    assert as_o.heuristic_score() == 3
    assert as_x.heuristic_score() == -3


def test_heuristic_and_terminal_win_agree_on_reachable_boards():
    for cells in REACHABLE:
        board = BoardState(cells=cells)
        winner = board.is_terminal_win()
        score = board.heuristic_score()

        has_line = any(
            cells[a] != " " and cells[a] == cells[b] == cells[c]
            for a, b, c in WINNING_LINES
        )
        assert (winner is not None) == has_line
        if winner == Side.AUTOMATED:
            assert score == 10
        elif winner == Side.HUMAN:
            assert score == -10
        else:
            assert abs(score) != 10


def test_reachable_boards_keep_mark_counts_balanced():
    for cells in REACHABLE:
        assert cells.count("X") - cells.count("O") in (0, 1)


def test_place_then_undo_restores_board():
    for cells in REACHABLE[:500]:
        board = BoardState(cells=cells)
        before = board.copy()
        for position in board.empty_cells():
            board.place(position, board.bot_mark)
            board.undo(position)
            assert board == before


def test_place_rejects_occupied_cell():
    board = BoardState()
    board.place(4, "X")
    with pytest.raises(ValueError):
        board.place(4, "O")
    assert board.cells[4] == "X"


@pytest.mark.parametrize("position", [-1, 9, 42])
def test_place_rejects_out_of_range(position):
    board = BoardState()
    with pytest.raises(ValueError):
        board.place(position, "X")
    with pytest.raises(ValueError):
        board.undo(position)


def test_place_rejects_unknown_mark():
    with pytest.raises(ValueError):
        BoardState().place(0, "Z")


def test_copy_is_independent():
    board = board_from("X___O____")
    clone = board.copy()
    clone.place(8, "X")
    assert board.cells[8] == " "
    assert clone != board


def test_has_moves_left_only_false_when_full():
    assert board_from("XOXXOOOX_").has_moves_left()
    assert not board_from("XOXXOOOXX").has_moves_left()


# ==================== WIN CHECKER ====================

def test_win_checker_in_progress():
    outcome = WinChecker().check(board_from("X___O____"))
    assert outcome.status == GameStatus.IN_PROGRESS
    assert not outcome.is_game_over
    assert outcome.winner is None


def test_win_checker_won():
    outcome = WinChecker().check(board_from("OOO_XX_X_"))
    assert outcome.status == GameStatus.WON
    assert outcome.winner == Side.AUTOMATED
    assert outcome.winning_line == (0, 1, 2)
    assert outcome.is_game_over


def test_win_checker_draw():
    checker = WinChecker()
    board = board_from("XOXXOOOXX", human="O", bot="X")
    assert checker.check(board).status == GameStatus.DRAW
    assert checker.check_draw(board)


def test_win_on_full_board_is_a_win_not_a_draw():
    board = board_from("XOXOXOXOX")
    outcome = WinChecker().check(board)
    assert outcome.status == GameStatus.WON
    assert outcome.winner == Side.HUMAN


# ==================== MOVE VALIDATION ====================

@pytest.mark.parametrize("text, expected", [
    ("1", 0),
    ("9", 8),
    ("  5 \n", 4),
    ("0", None),
    ("10", None),
    ("-3", None),
    ("", None),
    ("five", None),
    ("4.0", None),
])
def test_parse_cell_number(text, expected):
    assert parse_cell_number(text) == expected


def test_validator_accepts_empty_cell():
    result = MoveValidator().validate_move(BoardState(), 0)
    assert result.is_valid
    assert result.error_message is None


def test_validator_rejects_taken_cell():
    result = MoveValidator().validate_move(board_from("X________"), 0)
    assert not result.is_valid
    assert "already taken" in result.error_message


def test_validator_rejects_out_of_range():
    assert not MoveValidator().validate_move(BoardState(), 9).is_valid
