"""Logger setup for the tariff catalog tools.

All modules log through loguru's shared ``logger``. Standard output is
reserved for the catalog rendering, so the single sink configured here
writes to standard error.
"""

from __future__ import annotations

import os
import sys
from typing import Optional

from loguru import logger


LOG_LEVEL_ENV_VAR = "TARIFF_CATALOG_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level:<8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)


def configure_logger(level: Optional[str] = None):
    """
    Replace loguru's default sink with one stderr sink.

    The level is taken from ``level``, then from the
    TARIFF_CATALOG_LOG_LEVEL environment variable, then DEFAULT_LOG_LEVEL.
    Calling it again reconfigures the sink instead of adding a second one.

    Raises:
        ValueError: if the level name is unknown to loguru.
    """
    resolved_level = (level or os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper()

    logger.remove()
    logger.add(sys.stderr, level=resolved_level, format=LOG_FORMAT, colorize=None)
    return logger
