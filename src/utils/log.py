"""
Logging setup for the date helpers.

Modules create their own logger with ``logging.getLogger(__name__)``; all of
them live under the ``src`` logger, which configure_logging() attaches a
single console handler to.
"""

import logging
import sys
from typing import Optional

from src.config.settings import Settings, get_settings

PACKAGE_LOGGER_NAME = "src"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Console handler installed by configure_logging(); created on first use
_console_handler: Optional[logging.Handler] = None


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Attach a stdout handler to the package logger at the configured level.

    Safe to call more than once: the handler is installed on the first call
    and later calls only update the level.

    Args:
        settings: Settings to read the level from. Defaults to get_settings().

    Returns:
        The configured package logger.
    """
    global _console_handler

    settings = settings or get_settings()

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(settings.log.numeric_level)

    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stdout)
        _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    if _console_handler not in logger.handlers:
        logger.addHandler(_console_handler)

    return logger
