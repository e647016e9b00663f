"""
Logging configuration
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(name: str = "todonotifier", level: str = "WARNING") -> logging.Logger:
    """
    Setup and configure logger

    Args:
        name: Logger name
        level: Level name, e.g. "DEBUG"

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    set_level(logger, level)

    # Remove existing handlers
    logger.handlers.clear()

    # stdout carries the report, so diagnostics go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    logger.addHandler(console_handler)

    return logger


def set_level(logger: logging.Logger, level: str):
    """Apply a level name, falling back to WARNING for unknown names."""
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))


# Global logger instance, level applied from settings at startup
logger = setup_logger()
