# backend/tictactoe_bot/core/logging_config.py
import logging
import sys

from tictactoe_bot.core.config import settings

# --- Configuration ---
LOG_LEVEL = logging.getLevelName(settings.LOG_LEVEL.upper())
if not isinstance(LOG_LEVEL, int):
    LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# --- Setup ---
def setup_logger(name="tictactoe_bot", level=LOG_LEVEL):
    """
    Sets up and returns a logger instance.
    Each module can get its own logger instance using its __name__.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent adding multiple handlers if already configured (e.g., during uvicorn reload)
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)

        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        console_handler.setFormatter(formatter)

        logger.addHandler(console_handler)

    return logger
