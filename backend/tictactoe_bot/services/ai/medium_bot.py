# backend/tictactoe_bot/services/ai/medium_bot.py
from typing import Optional

from tictactoe_bot.core.constants import DEFAULT_MEDIUM_SEARCH_DEPTH
from tictactoe_bot.services.ai.base_bot import BaseBot
from tictactoe_bot.services.ai.search import best_moves
from tictactoe_bot.services.game_logic import Board

from tictactoe_bot.core.logging_config import setup_logger

logger = setup_logger(__name__)


class MediumAIBot(BaseBot):
    def __init__(self, *args, search_depth: int = DEFAULT_MEDIUM_SEARCH_DEPTH, **kwargs):
        # Depth 2 means AI move, Opponent reply
        super().__init__(*args, **kwargs)
        self.search_depth = max(1, search_depth)

    def _choose_move(self, board: Board) -> int:
        # 1. Check for AI's immediate winning move
        winning_move = self._immediate_win(board)
        if winning_move is not None:
            return winning_move

        # 2. Check to block opponent's immediate winning move
        blocking_move: Optional[int] = self._immediate_block(board)
        if blocking_move is not None:
            logger.debug(f"MediumAI ({self.player_piece.symbol}): blocking at {blocking_move}.")
            return blocking_move

        # 3. Depth-limited minimax, heuristic at the horizon, random among equal scores
        scored = self._search(board, max_depth=self.search_depth)
        return self.rng.choice(best_moves(scored))
