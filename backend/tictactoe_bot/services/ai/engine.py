# backend/tictactoe_bot/services/ai/engine.py
import random
from typing import Iterable, Optional, Union

from tictactoe_bot.core.config import settings
from tictactoe_bot.core.constants import Difficulty, Player
from tictactoe_bot.schemas.game import EngineConfig
from tictactoe_bot.services.ai.base_bot import BaseBot
from tictactoe_bot.services.ai.easy_bot import EasyAIBot
from tictactoe_bot.services.ai.hard_bot import UnbeatableAIBot
from tictactoe_bot.services.ai.medium_bot import MediumAIBot

from tictactoe_bot.core.logging_config import setup_logger

logger = setup_logger(__name__)

BoardInput = Iterable[Union[Player, str, None]]


def create_bot(
    difficulty: Union[Difficulty, str],
    player_piece: Player,
    config: Optional[EngineConfig] = None,
    rng: Optional[random.Random] = None,
) -> BaseBot:
    """Instantiates the bot variant for a difficulty level."""
    config = config or EngineConfig.from_settings()
    difficulty = Difficulty.parse(difficulty)
    common = dict(
        size=config.size,
        win_length=config.win_length,
        rng=rng,
        max_nodes=config.max_nodes,
    )
    if difficulty is Difficulty.EASY:
        return EasyAIBot(
            player_piece,
            random_move_probability=settings.EASY_RANDOM_MOVE_PROBABILITY,
            **common,
        )
    if difficulty is Difficulty.MEDIUM:
        return MediumAIBot(player_piece, search_depth=settings.MEDIUM_SEARCH_DEPTH, **common)
    return UnbeatableAIBot(player_piece, **common)


class DecisionEngine:
    """
    Chooses moves for whichever player is to move. Holds only its configuration and
    its random source; boards are passed in per decision and never kept.
    """

    def __init__(self, config: Optional[EngineConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or EngineConfig.from_settings()
        self.rng = rng if rng is not None else random.Random()

    @property
    def difficulty(self) -> Difficulty:
        return self.config.difficulty

    def decide(
        self,
        board: BoardInput,
        player_to_move: Player,
        difficulty: Optional[Union[Difficulty, str]] = None,
    ) -> int:
        bot = create_bot(
            difficulty if difficulty is not None else self.config.difficulty,
            player_to_move,
            self.config,
            self.rng,
        )
        return bot.get_move(board)

    def __str__(self) -> str:
        return f"AI ({self.config.difficulty.value})"


def decide(
    board: BoardInput,
    player_to_move: Player,
    config: Optional[EngineConfig] = None,
    rng: Optional[random.Random] = None,
) -> int:
    return DecisionEngine(config, rng).decide(board, player_to_move)
