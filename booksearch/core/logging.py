"""
Purpose:
- One shared 'booksearch' logger, configured once from settings.log_level.
- Modules just call logging.getLogger("booksearch").
"""

import logging
from .settings import settings

LOGGER_NAME = "booksearch"
LOG_FORMAT = "[%(levelname)s] %(asctime)s - %(message)s"

def setup_logger(level: str | None = None) -> logging.Logger:
    """
    Attach a stream handler (only the first time) and apply the level.
    Unknown level names fall back to INFO.
    """
    name = (level or settings.log_level).upper()
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, name, logging.INFO))
    return logger
