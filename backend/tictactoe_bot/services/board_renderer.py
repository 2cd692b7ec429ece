# backend/tictactoe_bot/services/board_renderer.py
import re
from typing import Dict, Iterable, List, Optional, Union

from tictactoe_bot.core import constants
from tictactoe_bot.core.constants import Player
from tictactoe_bot.core.i18n import localize
from tictactoe_bot.services.ai.engine import DecisionEngine
from tictactoe_bot.services.game_logic import (
    Board,
    GameResult,
    GameStatus,
    to_board,
    winning_line,
)

# Chat component types and button styles
ACTION_ROW_TYPE = 1
BUTTON_TYPE = 2
STYLE_PRIMARY = 1
STYLE_SECONDARY = 2
STYLE_SUCCESS = 3
STYLE_DANGER = 4

PLAYER_STYLES = {
    Player.FIRST: STYLE_PRIMARY,
    Player.SECOND: STYLE_DANGER,
    Player.NONE: STYLE_SECONDARY,
}

CUSTOM_EMOJI_PATTERN = re.compile(r"^<(a?):(\w+):(\d+)>$")


def parse_emoji(text: str) -> Dict[str, object]:
    """':dog:' -> {'name': 'dog'}; '<:cat:123>' -> {'name': 'cat', 'id': '123'}."""
    match = CUSTOM_EMOJI_PATTERN.match(text)
    if match:
        emoji = {"name": match.group(2), "id": match.group(3)}
        if match.group(1):
            emoji["animated"] = True
        return emoji
    return {"name": text.strip(":")}


class GameBoardButtonBuilder:
    """
    Builds platform-neutral message options (content + rows of buttons) for a board.
    Each button's custom_id is the cell index it plays.
    """

    def __init__(self, locale: Optional[str] = None):
        self.locale = locale
        self.board_size = 0
        self.board: Board = ()
        self.highlighted: tuple = ()
        self.emojies: Dict[Player, Optional[str]] = {}
        self.disable_buttons_after_used = False
        self.state = ""
        self.ended = False
        self.embed_color: Optional[int] = None

    def with_board(
        self,
        size: int,
        board: Iterable[Union[Player, str, None]],
        win_length: Optional[int] = None,
    ) -> "GameBoardButtonBuilder":
        self.board_size = size
        self.board = to_board(board, size)
        self.highlighted = winning_line(self.board, size, win_length) or ()
        return self

    def with_emojies(
        self, first: str, second: str, none: Optional[str] = None
    ) -> "GameBoardButtonBuilder":
        self.emojies = {Player.FIRST: first, Player.SECOND: second, Player.NONE: none}
        return self

    def with_entity_playing(self, entity=None) -> "GameBoardButtonBuilder":
        if entity is None:
            self.state = ""
        elif isinstance(entity, DecisionEngine):
            self.state = localize(constants.I18N_AI_PLAYING, self.locale)
        else:
            self.state = localize(constants.I18N_SELECT_MOVE, self.locale, player=str(entity))
        return self

    def with_buttons_disabled_after_use(self) -> "GameBoardButtonBuilder":
        self.disable_buttons_after_used = True
        return self

    def with_ending_message(self, result: Optional[GameResult] = None, winner_name=None) -> "GameBoardButtonBuilder":
        self.ended = True
        if result is not None and result.status is GameStatus.WIN:
            name = winner_name if winner_name is not None else result.winner.symbol
            self.state = localize(constants.I18N_WIN, self.locale, player=str(name))
        else:
            self.state = localize(constants.I18N_DRAW, self.locale)
        return self

    def with_embed(self, color: int) -> "GameBoardButtonBuilder":
        self.embed_color = color
        return self

    def _button(self, index: int) -> Dict[str, object]:
        cell = self.board[index]
        button: Dict[str, object] = {
            "type": BUTTON_TYPE,
            "custom_id": str(index),
            "style": STYLE_SUCCESS if index in self.highlighted else PLAYER_STYLES[cell],
            "disabled": self.ended
            or (self.disable_buttons_after_used and cell is not Player.NONE),
        }
        emoji = self.emojies.get(cell)
        if emoji:
            button["emoji"] = parse_emoji(emoji)
        else:
            button["label"] = cell.symbol
        return button

    def _components(self) -> List[Dict[str, object]]:
        return [
            {
                "type": ACTION_ROW_TYPE,
                "components": [
                    self._button(row * self.board_size + col) for col in range(self.board_size)
                ],
            }
            for row in range(self.board_size)
        ]

    def to_message_options(self) -> Dict[str, object]:
        components = self._components() if self.board else []
        if self.embed_color is not None:
            return {
                "embeds": [{"color": self.embed_color, "description": self.state}],
                "components": components,
            }
        return {"content": self.state, "components": components}
