"""
Logging configuration.

One stdout handler on the package logger; modules log through
logging.getLogger(__name__) and pass structured fields via `extra`.
"""

import logging
import sys

LOGGER_NAME = "product_view"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger. Safe to call more than once.

    Args:
        level: Log level name (DEBUG, INFO, ...)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    # Prevent propagation to root logger (avoid duplicate logs)
    logger.propagate = False
    return logger
