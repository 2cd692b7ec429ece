# backend/tictactoe_bot/services/ai/evaluator.py
from typing import Optional

from tictactoe_bot.core.constants import (
    HEURISTIC_LIMIT,
    THREAT_MULTIPLIER,
    WIN_SCORE,
    Player,
)
from tictactoe_bot.core.exceptions import InvalidStateError
from tictactoe_bot.services.game_logic import (
    Board,
    is_full,
    lines,
    resolve_win_length,
    winner,
)


def score(
    board: Board, perspective: Player, depth: int, size: int, win_length: Optional[int] = None
) -> int:
    """
    Scores a terminal board for `perspective`. Wins lose value with depth and losses
    gain value with depth, so the search prefers quick wins and slow losses.
    """
    owner = winner(board, size, win_length)
    if owner is perspective:
        return WIN_SCORE - depth
    if owner is perspective.opponent:
        return -WIN_SCORE + depth
    if is_full(board):
        return 0
    raise InvalidStateError("Only terminal boards can be scored.")


def _line_value(count: int, win_length: int) -> int:
    value = 10 ** (count - 1)
    if count == win_length - 1:
        value *= THREAT_MULTIPLIER  # one move away from completing the line
    return value


def heuristic_score(
    board: Board, perspective: Player, size: int, win_length: Optional[int] = None
) -> int:
    """
    Positional estimate of a non-terminal board, used at a depth cutoff.

    Each line still winnable by exactly one player is worth 10 ** (marks - 1) to that
    player, ten times more when it is one mark short of a win. The opponent's lines
    count negatively. The result stays inside +/- HEURISTIC_LIMIT so a guess never
    outranks a real win or loss found by the search.
    """
    win_length = resolve_win_length(size, win_length)
    opponent = perspective.opponent
    total = 0
    for line in lines(size, win_length):
        own = opp = 0
        for index in line:
            cell = board[index]
            if cell is perspective:
                own += 1
            elif cell is opponent:
                opp += 1
        if own and opp:
            continue  # blocked for both sides
        if own:
            total += _line_value(own, win_length)
        elif opp:
            total -= _line_value(opp, win_length)
    return max(-HEURISTIC_LIMIT, min(HEURISTIC_LIMIT, total))
