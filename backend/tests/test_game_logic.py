# backend/tests/test_game_logic.py
# Test cases for board model functions

import types

import pytest
from tictactoe_bot.services.game_logic import (
    GameResult,
    GameStatus,
    apply_move,
    cell_at,
    coords_to_index,
    create_board,
    empty_cells,
    find_winning_move,
    format_board,
    game_result,
    index_to_coords,
    is_full,
    is_terminal,
    lines,
    to_board,
    winner,
    winning_line,
)
from tictactoe_bot.core.constants import Player
from tictactoe_bot.core.exceptions import InvalidStateError, OutOfRangeError

F, S, N = Player.FIRST, Player.SECOND, Player.NONE

THREE_BY_THREE_LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (6, 4, 2),
]


def board_with(size, cells, player):
    board = list(create_board(size))
    for i in cells:
        board[i] = player
    return tuple(board)


def test_create_board():
    board = create_board(3)
    assert len(board) == 9
    assert all(cell == N for cell in board)
    assert len(create_board(2)) == 4
    with pytest.raises(InvalidStateError):
        create_board(1)


def test_cell_at_bounds():
    board = apply_move(create_board(3), 4, F)
    assert cell_at(board, 4) == F
    assert cell_at(board, 0) == N
    with pytest.raises(OutOfRangeError):
        cell_at(board, 9)
    with pytest.raises(OutOfRangeError):
        cell_at(board, -1)  # no wraparound


def test_coords_round_trip():
    assert index_to_coords(5, 3) == (1, 2)
    assert coords_to_index(2, 0, 3) == 6
    with pytest.raises(OutOfRangeError):
        index_to_coords(4, 2)
    with pytest.raises(OutOfRangeError):
        coords_to_index(0, 3, 3)


def test_empty_cells_is_lazy_and_ascending():
    board = to_board([F, N, S, N, N, F, N, S, N], 3)
    cells = empty_cells(board)
    assert isinstance(cells, types.GeneratorType)
    assert list(cells) == [1, 3, 4, 6, 8]

    full = to_board([F, S, F, F, S, S, S, F, F], 3)
    assert list(empty_cells(full)) == []


def test_lines_three_by_three():
    assert list(lines(3, 3)) == THREE_BY_THREE_LINES


def test_lines_with_shorter_win_length():
    found = lines(4, 3)
    assert len(found) == 24  # 8 horizontal, 8 vertical, 4 + 4 diagonal
    assert (1, 6, 11) in found
    assert (4, 9, 14) in found
    assert (13, 10, 7) in found


@pytest.mark.parametrize("line", THREE_BY_THREE_LINES)
@pytest.mark.parametrize("player", [F, S])
def test_winner_every_line(line, player):
    board = board_with(3, line, player)
    assert winner(board, 3) == player
    assert winner(board, 3) != player.opponent
    assert sorted(winning_line(board, 3)) == sorted(line)


def test_no_win():
    board = to_board([F, S, F, F, S, S, S, F, F], 3)
    assert winner(board, 3) == N
    assert winning_line(board, 3) is None

    board = to_board([F, F, N, N, S, N, N, N, S], 3)
    assert winner(board, 3) == N


def test_winner_two_by_two():
    assert winner(to_board([F, N, N, F], 2), 2) == F
    assert winner(to_board([N, S, S, N], 2), 2) == S
    assert winner(to_board([F, S, N, N], 2), 2) == N


def test_winner_offset_diagonal_with_shorter_win_length():
    board = board_with(4, (1, 6, 11), S)
    assert winner(board, 4, 3) == S
    assert winner(board, 4) == N  # needs four in a row by default

    board = board_with(4, (13, 10, 7), F)
    assert winner(board, 4, 3) == F


def test_win_length_is_validated():
    with pytest.raises(InvalidStateError):
        winner(create_board(3), 3, 4)
    with pytest.raises(InvalidStateError):
        winner(create_board(3), 3, 1)


def test_is_full_and_is_terminal():
    board = create_board(3)
    assert not is_full(board)
    assert not is_terminal(board, 3)

    drawn = to_board([F, S, F, F, S, S, S, F, F], 3)
    assert is_full(drawn)
    assert is_terminal(drawn, 3)

    won = board_with(3, (0, 1, 2), F)
    assert not is_full(won)
    assert is_terminal(won, 3)


def test_game_result():
    assert game_result(create_board(3), 3) == GameResult.in_progress()
    assert game_result(to_board([F, S, F, F, S, S, S, F, F], 3), 3) == GameResult.draw()
    result = game_result(board_with(3, (2, 5, 8), S), 3)
    assert result.status is GameStatus.WIN
    assert result.winner == S


def test_apply_move_returns_new_board():
    board = create_board(3)
    after = apply_move(board, 0, F)
    assert board == create_board(3)  # snapshot untouched
    assert after[0] == F

    with pytest.raises(InvalidStateError):
        apply_move(after, 0, S)  # occupied
    with pytest.raises(InvalidStateError):
        apply_move(after, 1, N)
    with pytest.raises(OutOfRangeError):
        apply_move(after, 9, S)


def test_to_board_accepts_symbols():
    board = to_board(["X", None, "o", " ", "X", None, None, None, "O"], 3)
    assert board == (F, N, S, N, F, N, N, N, S)
    with pytest.raises(InvalidStateError):
        to_board([None] * 8, 3)
    with pytest.raises(InvalidStateError):
        to_board(["Z"] + [None] * 8, 3)


def test_find_winning_move_scans_lines_in_order():
    board = to_board([F, S, F, S, F, S, N, N, N], 3)
    # both 8 (0-4-8) and 6 (2-4-6) win; positive diagonals come first
    assert find_winning_move(board, F, 3) == 8
    assert find_winning_move(board, S, 3) is None

    board = to_board([N, S, S, N, F, N, N, N, F], 3)
    assert find_winning_move(board, S, 3) == 0
    assert find_winning_move(board, F, 3) == 0


def test_format_board():
    text = format_board(to_board([F, N, N, S], 2), 2)
    assert text.splitlines() == ["  0 1", "0 [X _]", "1 [_ O]"]
