"""
Logging helpers for the BizTime API.

Log high-level events only (record created/updated/deleted, rejected
requests, startup). Request bodies are not logged.
"""

import logging
from typing import Optional

from biztime.api.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger for the given module.

    Args:
        name: Module name (typically __name__)
        level: Optional level name (DEBUG, INFO, ...); defaults to
            settings.LOG_LEVEL, which Settings already restricts to valid names

    Returns:
        Logger with a single stream handler attached
    """
    logger = logging.getLogger(name)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    # Avoid duplicate handlers on re-import
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)

    return logger
