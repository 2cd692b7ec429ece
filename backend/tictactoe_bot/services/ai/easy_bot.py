# backend/tictactoe_bot/services/ai/easy_bot.py
from tictactoe_bot.core.constants import (
    DEFAULT_EASY_RANDOM_MOVE_PROBABILITY,
    DEFAULT_EASY_SEARCH_DEPTH,
)
from tictactoe_bot.services.ai.base_bot import BaseBot
from tictactoe_bot.services.ai.search import best_moves
from tictactoe_bot.services.game_logic import Board, empty_cells

from tictactoe_bot.core.logging_config import setup_logger

logger = setup_logger(__name__)


class EasyAIBot(BaseBot):
    def __init__(
        self,
        *args,
        random_move_probability: float = DEFAULT_EASY_RANDOM_MOVE_PROBABILITY,
        search_depth: int = DEFAULT_EASY_SEARCH_DEPTH,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.random_move_probability = min(1.0, max(0.0, random_move_probability))
        self.search_depth = max(1, search_depth)

    def _choose_move(self, board: Board) -> int:
        valid_moves = list(empty_cells(board))

        # 1. Sometimes just play anywhere
        if self.rng.random() < self.random_move_probability:
            move = self.rng.choice(valid_moves)
            logger.debug(f"EasyAI ({self.player_piece.symbol}): random move {move}.")
            return move

        # 2. Otherwise a shallow search (still sees a win one move away)
        scored = self._search(board, max_depth=self.search_depth)
        return self.rng.choice(best_moves(scored))
