import random
from fastapi import APIRouter, Body, HTTPException

from tictactoe_bot.core.config import settings
from tictactoe_bot.core.constants import Player
from tictactoe_bot.core.exceptions import TicTacToeError
from tictactoe_bot.schemas.game import (
    EngineConfig,
    MoveRequest,
    MoveResponse,
    RenderRequest,
)
from tictactoe_bot.services.ai.engine import DecisionEngine
from tictactoe_bot.services.board_renderer import GameBoardButtonBuilder
from tictactoe_bot.services.game_logic import (
    GameStatus,
    apply_move,
    game_result,
    index_to_coords,
    to_board,
    winning_line,
)

from tictactoe_bot.core.logging_config import setup_logger

logger = setup_logger(__name__)

router = APIRouter()

AI_ENTITY_NAME = "AI"


def _symbols(board):
    return [cell.symbol if cell is not Player.NONE else None for cell in board]


@router.post("/ai/move", response_model=MoveResponse)
def http_ai_move(request: MoveRequest = Body(...)):
    """
    Chooses the AI's move for `player` on the given board and returns the board after it.
    """
    try:
        config = EngineConfig(
            size=request.size,
            win_length=request.win_length,
            difficulty=request.difficulty,
            max_nodes=settings.MAX_SEARCH_NODES,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    player = Player.from_symbol(request.player)
    rng = random.Random(request.seed) if request.seed is not None else None
    try:
        board = to_board(request.board, config.size)
        move = DecisionEngine(config, rng).decide(board, player)
    except TicTacToeError as exc:
        logger.warning(f"AI move rejected: {exc}")
        raise HTTPException(status_code=400, detail=str(exc))

    new_board = apply_move(board, move, player)
    result = game_result(new_board, config.size, config.win_length)
    line = winning_line(new_board, config.size, config.win_length)
    row, col = index_to_coords(move, config.size)

    return MoveResponse(
        move=move,
        row=row,
        col=col,
        board=_symbols(new_board),
        status=result.status.value,
        winner=result.winner.symbol if result.status is GameStatus.WIN else None,
        winning_line=list(line) if line else None,
    )


@router.post("/board/render")
def http_render_board(request: RenderRequest = Body(...)):
    """
    Renders the board as interactive message options (rows of buttons).
    """
    try:
        board = to_board(request.board, request.size)
        builder = GameBoardButtonBuilder(locale=request.locale).with_board(
            request.size, board, request.win_length
        )
        result = game_result(board, request.size, request.win_length)
    except TicTacToeError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    if request.emojis:
        builder.with_emojies(*request.emojis)
    if request.disable_used:
        builder.with_buttons_disabled_after_use()
    if request.embed_color is not None:
        builder.with_embed(request.embed_color)

    if result.status is not GameStatus.IN_PROGRESS:
        builder.with_ending_message(result)
    elif request.player == AI_ENTITY_NAME:
        builder.with_entity_playing(DecisionEngine())
    else:
        builder.with_entity_playing(request.player)

    return builder.to_message_options()
