# backend/tictactoe_bot/core/constants.py
from enum import Enum
from typing import Optional

from tictactoe_bot.core.exceptions import InvalidStateError


class Player(Enum):
    NONE = 0
    FIRST = 1
    SECOND = 2

    @property
    def opponent(self) -> "Player":
        if self is Player.FIRST:
            return Player.SECOND
        if self is Player.SECOND:
            return Player.FIRST
        raise InvalidStateError("An empty cell has no opponent.")

    @property
    def symbol(self) -> str:
        return PLAYER_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: Optional[str]) -> "Player":
        """Maps 'X' / 'O' / None (or a blank string) back to a Player."""
        if symbol is None or not str(symbol).strip():
            return cls.NONE
        normalized = str(symbol).strip().upper()
        for player, player_symbol in PLAYER_SYMBOLS.items():
            if player_symbol == normalized:
                return player
        raise InvalidStateError(f"Unknown cell symbol: {symbol!r}")


class Difficulty(Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    UNBEATABLE = "UNBEATABLE"

    @classmethod
    def parse(cls, value) -> "Difficulty":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().upper()
        if normalized == AI_DIFFICULTY_HARD_ALIAS:
            return cls.UNBEATABLE
        try:
            return cls(normalized)
        except ValueError:
            raise InvalidStateError(f"Unknown difficulty: {value!r}") from None


PLAYER_X: str = "X"
PLAYER_O: str = "O"
EMPTY_SYMBOL: str = " "

PLAYER_SYMBOLS = {
    Player.FIRST: PLAYER_X,
    Player.SECOND: PLAYER_O,
    Player.NONE: EMPTY_SYMBOL,
}

# Board Dimensions
DEFAULT_BOARD_SIZE: int = 3
MIN_BOARD_SIZE: int = 2
MIN_WIN_LENGTH: int = 2

# AI Difficulty Levels
AI_DIFFICULTY_HARD_ALIAS: str = "HARD"
DEFAULT_AI_DIFFICULTY: Difficulty = Difficulty.UNBEATABLE

# Search tuning
WIN_SCORE: int = 1_000_000
HEURISTIC_LIMIT: int = WIN_SCORE // 10
THREAT_MULTIPLIER: int = 10
DEFAULT_MEDIUM_SEARCH_DEPTH: int = 2
DEFAULT_EASY_SEARCH_DEPTH: int = 1
DEFAULT_EASY_RANDOM_MOVE_PROBABILITY: float = 0.4
DEFAULT_MAX_SEARCH_NODES: int = 2_000_000

# Game Statuses (API payloads)
GAME_STATUS_IN_PROGRESS: str = "in_progress"
GAME_STATUS_WIN: str = "win"
GAME_STATUS_DRAW: str = "draw"

# Localization keys
I18N_AI_PLAYING: str = "game.waiting-ai"
I18N_SELECT_MOVE: str = "game.action"
I18N_WIN: str = "game.win"
I18N_DRAW: str = "game.end"

# Error Message Strings
FULL_BOARD_ERROR: str = "Cannot decide a move on a full board."
TERMINAL_BOARD_ERROR: str = "Cannot decide a move on a finished game."
OCCUPIED_CELL_ERROR_PREFIX: str = "Cell is already occupied: "
EMPTY_PLAYER_ERROR: str = "The player to move must be FIRST or SECOND."
