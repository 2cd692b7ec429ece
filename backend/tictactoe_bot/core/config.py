from typing import Optional

from pydantic_settings import BaseSettings
import os
from dotenv import load_dotenv

# Load .env file from the backend directory
dotenv_path = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), '.env')
if os.path.exists(dotenv_path):
    load_dotenv(dotenv_path=dotenv_path)
else:
    load_dotenv()


class Settings(BaseSettings):
    PROJECT_NAME: str = "Tic-Tac-Toe Bot"
    API_V1_STR: str = "/api/v1"

    # Engine defaults
    BOARD_SIZE: int = 3
    WIN_LENGTH: Optional[int] = None  # None means "same as BOARD_SIZE"
    AI_DIFFICULTY: str = "UNBEATABLE"
    EASY_RANDOM_MOVE_PROBABILITY: float = 0.4
    MEDIUM_SEARCH_DEPTH: int = 2
    MAX_SEARCH_NODES: int = 2_000_000

    DEFAULT_LOCALE: str = "en"
    LOG_LEVEL: str = "INFO"

    class Config:
        case_sensitive = True

settings = Settings()
