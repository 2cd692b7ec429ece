# backend/tictactoe_bot/core/exceptions.py


class TicTacToeError(Exception):
    """Base class for every error raised by the decision engine."""


class OutOfRangeError(TicTacToeError, IndexError):
    """A cell index falls outside the board."""

    def __init__(self, index: int, cell_count: int):
        self.index = index
        self.cell_count = cell_count
        super().__init__(f"Cell index {index} is outside the board [0, {cell_count}).")


class InvalidStateError(TicTacToeError, ValueError):
    """The board or player given to the engine cannot be played from."""
