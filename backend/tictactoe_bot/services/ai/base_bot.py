# backend/tictactoe_bot/services/ai/base_bot.py
import random
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Union

from tictactoe_bot.core.constants import (
    DEFAULT_BOARD_SIZE,
    EMPTY_PLAYER_ERROR,
    FULL_BOARD_ERROR,
    TERMINAL_BOARD_ERROR,
    Player,
)
from tictactoe_bot.core.exceptions import InvalidStateError
from tictactoe_bot.services.ai.search import (
    ScoredMove,
    SearchBudget,
    SearchContext,
    iterative_deepening,
)
from tictactoe_bot.services.game_logic import (
    Board,
    find_winning_move,
    format_board,
    is_full,
    resolve_win_length,
    to_board,
    winner,
)

from tictactoe_bot.core.logging_config import setup_logger

logger = setup_logger(__name__)


class BaseBot(ABC):
    def __init__(
        self,
        player_piece: Player,
        size: int = DEFAULT_BOARD_SIZE,
        win_length: Optional[int] = None,
        rng: Optional[random.Random] = None,
        max_nodes: Optional[int] = None,
    ):
        if player_piece is Player.NONE:
            raise InvalidStateError(EMPTY_PLAYER_ERROR)
        self.player_piece = player_piece
        self.opponent_piece = player_piece.opponent
        self.size = size
        self.win_length = resolve_win_length(size, win_length)
        self.rng = rng if rng is not None else random.Random()
        self.max_nodes = max_nodes

    def get_move(self, board: Iterable[Union[Player, str, None]]) -> int:
        """
        Determines the AI's next move as a cell index.
        Raises InvalidStateError when the board is malformed, won or full.
        """
        board = self._validate(board)
        move = self._choose_move(board)
        logger.info(f"{type(self).__name__} ({self.player_piece.symbol}) chose cell {move}.")
        return move

    @abstractmethod
    def _choose_move(self, board: Board) -> int:
        pass

    def _validate(self, board: Iterable[Union[Player, str, None]]) -> Board:
        board = to_board(board, self.size)
        if winner(board, self.size, self.win_length) is not Player.NONE:
            raise InvalidStateError(TERMINAL_BOARD_ERROR)
        if is_full(board):
            raise InvalidStateError(FULL_BOARD_ERROR)
        logger.debug(f"Board for {self.player_piece.symbol}:\n{format_board(board, self.size)}")
        return board

    def _immediate_win(self, board: Board) -> Optional[int]:
        return find_winning_move(board, self.player_piece, self.size, self.win_length)

    def _immediate_block(self, board: Board) -> Optional[int]:
        return find_winning_move(board, self.opponent_piece, self.size, self.win_length)

    def _search(self, board: Board, max_depth: Optional[int]) -> List[ScoredMove]:
        context = SearchContext(
            owner=self.player_piece,
            size=self.size,
            win_length=self.win_length,
            max_depth=max_depth,
        )
        scored, _ = iterative_deepening(board, context, SearchBudget(self.max_nodes))
        return scored
