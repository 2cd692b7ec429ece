# backend/tictactoe_bot/services/ai/search.py
import math
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from tictactoe_bot.core.constants import Player
from tictactoe_bot.services.ai.evaluator import heuristic_score, score
from tictactoe_bot.services.game_logic import (
    Board,
    apply_move,
    empty_cells,
    is_full,
    winner,
)

from tictactoe_bot.core.logging_config import setup_logger

logger = setup_logger(__name__)

ScoredMove = Tuple[int, int]  # (cell index, score)


class SearchBudgetExceeded(Exception):
    """Raised inside the search when the node budget runs out."""


class SearchBudget:
    def __init__(self, max_nodes: Optional[int] = None):
        self.max_nodes = max_nodes
        self.nodes = 0
        self.enforced = True
        self.cutoff_reached = False

    def visit(self):
        self.nodes += 1
        if self.enforced and self.max_nodes is not None and self.nodes > self.max_nodes:
            raise SearchBudgetExceeded(self.nodes)


@dataclass(frozen=True)
class SearchContext:
    owner: Player  # the player the engine is choosing for
    size: int
    win_length: int
    max_depth: Optional[int] = None  # None searches to the end of the game


def minimax(
    board: Board,
    player_to_move: Player,
    depth: int,
    alpha: float,
    beta: float,
    context: SearchContext,
    budget: SearchBudget,
) -> int:
    budget.visit()

    if winner(board, context.size, context.win_length) is not Player.NONE or is_full(board):
        return score(board, context.owner, depth, context.size, context.win_length)
    if context.max_depth is not None and depth >= context.max_depth:
        budget.cutoff_reached = True
        return heuristic_score(board, context.owner, context.size, context.win_length)

    if player_to_move is context.owner:  # maximizer
        max_eval = -math.inf
        for index in empty_cells(board):
            child = apply_move(board, index, player_to_move)
            evaluation = minimax(
                child, player_to_move.opponent, depth + 1, alpha, beta, context, budget
            )
            max_eval = max(max_eval, evaluation)
            alpha = max(alpha, evaluation)
            if beta <= alpha:
                break
        return max_eval
    else:  # minimizer
        min_eval = math.inf
        for index in empty_cells(board):
            child = apply_move(board, index, player_to_move)
            evaluation = minimax(
                child, player_to_move.opponent, depth + 1, alpha, beta, context, budget
            )
            min_eval = min(min_eval, evaluation)
            beta = min(beta, evaluation)
            if beta <= alpha:
                break
        return min_eval


def root_scores(board: Board, context: SearchContext, budget: SearchBudget) -> List[ScoredMove]:
    """
    Exact minimax score of every legal move for context.owner. Each root child gets a
    full window, so equal scores really are ties.
    """
    scored = []
    for index in empty_cells(board):
        child = apply_move(board, index, context.owner)
        value = minimax(
            child, context.owner.opponent, 1, -math.inf, math.inf, context, budget
        )
        scored.append((index, value))
    return scored


def iterative_deepening(
    board: Board, context: SearchContext, budget: SearchBudget
) -> Tuple[List[ScoredMove], int]:
    """
    Searches depth 1, 2, ... up to context.max_depth (or the end of the game) and returns
    the root scores of the deepest completed iteration with that depth. Depth 1 always
    completes; deeper iterations stop as soon as the node budget runs out, or once an
    iteration never hit its horizon. Without a budget only the last iteration is run.
    """
    remaining = sum(1 for _ in empty_cells(board))
    limit = remaining if context.max_depth is None else min(context.max_depth, remaining)
    first = limit if budget.max_nodes is None else 1

    completed: List[ScoredMove] = []
    completed_depth = 0
    for depth_limit in range(first, limit + 1):
        budget.enforced = completed_depth > 0
        budget.cutoff_reached = False
        try:
            scored = root_scores(board, replace(context, max_depth=depth_limit), budget)
        except SearchBudgetExceeded:
            logger.warning(
                f"Search budget of {budget.max_nodes} nodes exhausted at depth {depth_limit}; "
                f"using depth {completed_depth} result."
            )
            break
        completed, completed_depth = scored, depth_limit
        if not budget.cutoff_reached:
            break

    logger.debug(
        f"Search for {context.owner.name}: depth {completed_depth}/{limit}, {budget.nodes} nodes."
    )
    return completed, completed_depth


def best_moves(scored: List[ScoredMove]) -> List[int]:
    """All moves sharing the best score, in ascending cell order."""
    top = max(value for _, value in scored)
    return sorted(index for index, value in scored if value == top)
