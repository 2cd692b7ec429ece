# backend/tictactoe_bot/services/match_runner.py
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

from tictactoe_bot.core.constants import Player
from tictactoe_bot.core.exceptions import InvalidStateError
from tictactoe_bot.schemas.game import EngineConfig
from tictactoe_bot.services.ai.engine import DecisionEngine
from tictactoe_bot.services.game_logic import (
    Board,
    GameResult,
    GameStatus,
    apply_move,
    cell_at,
    create_board,
    format_board,
    game_result,
    to_board,
)

from tictactoe_bot.core.logging_config import setup_logger

logger = setup_logger(__name__)


@dataclass
class MatchReport:
    result: GameResult
    board: Board
    moves: List[int] = field(default_factory=list)


def _player_to_move(board: Board) -> Player:
    """FIRST always opens, so the side with fewer marks is next."""
    first = sum(1 for cell in board if cell is Player.FIRST)
    second = sum(1 for cell in board if cell is Player.SECOND)
    return Player.FIRST if first <= second else Player.SECOND


def run_ai_vs_ai_game(
    first: DecisionEngine,
    second: DecisionEngine,
    config: EngineConfig,
    board: Optional[Iterable[Union[Player, str, None]]] = None,
) -> MatchReport:
    """
    Lets two engines play each other until the game ends and reports the outcome.
    Starts from an empty board unless one is given.
    """
    current = create_board(config.size) if board is None else to_board(board, config.size)
    engines = {Player.FIRST: first, Player.SECOND: second}
    report = MatchReport(result=game_result(current, config.size, config.win_length), board=current)
    logger.info(f"AI vs AI game started: {first} vs {second}")

    while report.result.status is GameStatus.IN_PROGRESS:
        to_move = _player_to_move(current)
        move = engines[to_move].decide(current, to_move)
        if cell_at(current, move) is not Player.NONE:
            raise InvalidStateError(f"AI Error: invalid move {move} by {to_move.name}.")
        current = apply_move(current, move, to_move)
        report.moves.append(move)
        report.board = current
        report.result = game_result(current, config.size, config.win_length)

    logger.info(
        f"AI vs AI game over: {report.result.status.value} "
        f"(winner: {report.result.winner.name}) after {len(report.moves)} moves."
    )
    logger.debug(f"Final board:\n{format_board(current, config.size)}")
    return report
