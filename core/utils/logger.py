"""Logging utility."""
import logging
import sys
from typing import Optional, Union

from app.config import settings


def setup_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Set up and return a logger instance writing to stdout."""
    logger = logging.getLogger(name)

    if level is None:
        level = logging.INFO
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    ))

    # Uvicorn reloads modules; avoid stacking handlers on the same logger
    if not logger.handlers:
        logger.addHandler(handler)

    return logger


# Default logger instance
logger = setup_logger("quiz_search", settings.LOG_LEVEL)
