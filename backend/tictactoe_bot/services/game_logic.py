from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from math import isqrt
from typing import Iterable, Iterator, Optional, Tuple, Union

from tictactoe_bot.core.constants import (
    DEFAULT_BOARD_SIZE,
    EMPTY_PLAYER_ERROR,
    GAME_STATUS_DRAW,
    GAME_STATUS_IN_PROGRESS,
    GAME_STATUS_WIN,
    MIN_BOARD_SIZE,
    MIN_WIN_LENGTH,
    OCCUPIED_CELL_ERROR_PREFIX,
    Player,
)
from tictactoe_bot.core.exceptions import InvalidStateError, OutOfRangeError

Board = Tuple[Player, ...]
Line = Tuple[int, ...]


class GameStatus(Enum):
    IN_PROGRESS = GAME_STATUS_IN_PROGRESS
    WIN = GAME_STATUS_WIN
    DRAW = GAME_STATUS_DRAW


@dataclass(frozen=True)
class GameResult:
    status: GameStatus
    winner: Player = Player.NONE

    @classmethod
    def in_progress(cls) -> "GameResult":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def win(cls, player: Player) -> "GameResult":
        return cls(GameStatus.WIN, player)

    @classmethod
    def draw(cls) -> "GameResult":
        return cls(GameStatus.DRAW)


def resolve_win_length(size: int, win_length: Optional[int] = None) -> int:
    if size < MIN_BOARD_SIZE:
        raise InvalidStateError(f"Board size must be at least {MIN_BOARD_SIZE}, got {size}.")
    if win_length is None:
        return size
    if not (MIN_WIN_LENGTH <= win_length <= size):
        raise InvalidStateError(
            f"Win length must be between {MIN_WIN_LENGTH} and {size}, got {win_length}."
        )
    return win_length


def board_size(board: Board) -> int:
    """Side length of a square board, inferred from its cell count."""
    size = isqrt(len(board))
    if size * size != len(board) or size < MIN_BOARD_SIZE:
        raise InvalidStateError(f"A board of {len(board)} cells is not a square grid.")
    return size


def create_board(size: int = DEFAULT_BOARD_SIZE) -> Board:
    """Creates a new empty game board."""
    resolve_win_length(size)
    return (Player.NONE,) * (size * size)


def to_board(cells: Iterable[Union[Player, str, None]], size: int) -> Board:
    """
    Normalises caller data (Players, 'X'/'O' symbols or None) into an immutable board
    of exactly size * size cells.
    """
    board = tuple(
        cell if isinstance(cell, Player) else Player.from_symbol(cell) for cell in cells
    )
    if len(board) != size * size:
        raise InvalidStateError(
            f"Expected {size * size} cells for a {size}x{size} board, got {len(board)}."
        )
    return board


def index_to_coords(index: int, size: int) -> Tuple[int, int]:
    if not (0 <= index < size * size):
        raise OutOfRangeError(index, size * size)
    return index // size, index % size


def coords_to_index(row: int, col: int, size: int) -> int:
    if not (0 <= row < size and 0 <= col < size):
        raise OutOfRangeError(row * size + col, size * size)
    return row * size + col


def cell_at(board: Board, index: int) -> Player:
    if not (0 <= index < len(board)):
        raise OutOfRangeError(index, len(board))
    return board[index]


def empty_cells(board: Board) -> Iterator[int]:
    """Yields the index of every empty cell, in ascending order."""
    return (index for index, cell in enumerate(board) if cell is Player.NONE)


def is_full(board: Board) -> bool:
    return all(cell is not Player.NONE for cell in board)


@lru_cache(maxsize=None)
def lines(size: int, win_length: int) -> Tuple[Line, ...]:
    """
    Every run of `win_length` cells on a size x size grid, in scan order:
    rows, columns, positive diagonals, then negative diagonals.
    """
    span = size - win_length + 1
    found = []

    # Horizontal
    for r in range(size):
        for c in range(span):
            found.append(tuple(r * size + c + i for i in range(win_length)))

    # Vertical
    for c in range(size):
        for r in range(span):
            found.append(tuple((r + i) * size + c for i in range(win_length)))

    # Positive Diagonal (\)
    for r in range(span):
        for c in range(span):
            found.append(tuple((r + i) * size + c + i for i in range(win_length)))

    # Negative Diagonal (/)
    for r in range(win_length - 1, size):
        for c in range(span):
            found.append(tuple((r - i) * size + c + i for i in range(win_length)))

    return tuple(found)


def winning_line(board: Board, size: int, win_length: Optional[int] = None) -> Optional[Line]:
    """Returns the cells of the first completed line found, or None."""
    win_length = resolve_win_length(size, win_length)
    for line in lines(size, win_length):
        first = board[line[0]]
        if first is not Player.NONE and all(board[i] is first for i in line):
            return line
    return None


def winner(board: Board, size: int, win_length: Optional[int] = None) -> Player:
    """
    Returns the player owning an unbroken line of `win_length` cells,
    or Player.NONE if no such line exists.
    """
    line = winning_line(board, size, win_length)
    return board[line[0]] if line else Player.NONE


def is_terminal(board: Board, size: int, win_length: Optional[int] = None) -> bool:
    return winner(board, size, win_length) is not Player.NONE or is_full(board)


def game_result(board: Board, size: int, win_length: Optional[int] = None) -> GameResult:
    player = winner(board, size, win_length)
    if player is not Player.NONE:
        return GameResult.win(player)
    if is_full(board):
        return GameResult.draw()
    return GameResult.in_progress()


def apply_move(board: Board, index: int, player: Player) -> Board:
    """
    Returns a new board with `player` placed on `index`. The given board is left untouched.
    """
    if player is Player.NONE:
        raise InvalidStateError(EMPTY_PLAYER_ERROR)
    if cell_at(board, index) is not Player.NONE:
        raise InvalidStateError(f"{OCCUPIED_CELL_ERROR_PREFIX}{index}")
    return board[:index] + (player,) + board[index + 1:]


def find_winning_move(
    board: Board, player: Player, size: int, win_length: Optional[int] = None
) -> Optional[int]:
    """
    Returns the empty cell completing a line for `player`, scanning lines in
    `lines()` order, or None if `player` cannot win with a single move.
    """
    win_length = resolve_win_length(size, win_length)
    for line in lines(size, win_length):
        gaps = [i for i in line if board[i] is Player.NONE]
        if len(gaps) == 1 and all(board[i] is player for i in line if i != gaps[0]):
            return gaps[0]
    return None


def format_board(board: Board, size: int) -> str:
    """Text rendering of the board (for debugging)."""
    rows = ["  " + " ".join(str(c) for c in range(size))]
    for r in range(size):
        cells = [board[r * size + c].symbol.strip() or "_" for c in range(size)]
        rows.append(f"{r} [" + " ".join(cells) + "]")
    return "\n".join(rows)
