"""Logging configuration for Pickleball Pong."""

import logging
from typing import Optional

from .config import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: Optional[str] = None, name: str = "") -> logging.Logger:
    """
    Set up console logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        name: Logger to configure; the root logger by default so that
            pong_core.* and the application module share one handler

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_LEVEL

    logger = logging.getLogger(name)
    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
