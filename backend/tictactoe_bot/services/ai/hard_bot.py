# backend/tictactoe_bot/services/ai/hard_bot.py
from tictactoe_bot.services.ai.base_bot import BaseBot
from tictactoe_bot.services.ai.search import best_moves
from tictactoe_bot.services.game_logic import Board


class UnbeatableAIBot(BaseBot):
    """
    Full-depth minimax. Deterministic: an immediate win is taken first (first winning
    line in scan order), otherwise the lowest-indexed move among the best scores.
    """

    def _choose_move(self, board: Board) -> int:
        # 1. Immediate winning move
        winning_move = self._immediate_win(board)
        if winning_move is not None:
            return winning_move

        # 2. Minimax to the end of the game
        scored = self._search(board, max_depth=None)
        return best_moves(scored)[0]
