# backend/tictactoe_bot/core/i18n.py
from typing import Dict, Optional

from tictactoe_bot.core import constants
from tictactoe_bot.core.config import settings

LOCALES: Dict[str, Dict[str, str]] = {
    "en": {
        constants.I18N_AI_PLAYING: ":robot: AI is playing, please wait...",
        constants.I18N_SELECT_MOVE: "{player}, select your move:",
        constants.I18N_WIN: ":tada: {player} has won the game!",
        constants.I18N_DRAW: "No one won the game!",
    },
    "fr": {
        constants.I18N_AI_PLAYING: ":robot: L'IA joue, veuillez patienter...",
        constants.I18N_SELECT_MOVE: "{player}, choisissez votre coup :",
        constants.I18N_WIN: ":tada: {player} a gagné la partie !",
        constants.I18N_DRAW: "Personne n'a gagné la partie !",
    },
}


def localize(key: str, locale: Optional[str] = None, **params) -> str:
    """
    Returns the text for `key` in `locale` (settings.DEFAULT_LOCALE when omitted),
    falling back to English, then to the key itself.
    """
    table = LOCALES.get(locale or settings.DEFAULT_LOCALE, LOCALES["en"])
    text = table.get(key, LOCALES["en"].get(key, key))
    return text.format(**params) if params else text
