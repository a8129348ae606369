"""Logging configuration."""

import logging
from typing import Optional

PACKAGE_LOGGER = "kubedump"

# verbosity -> level of the package logger
VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: logging.WARNING,
    2: logging.INFO,
    3: logging.DEBUG,
}


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a configured logger instance."""
    logger = logging.getLogger(name or __name__)

    # Only configure if no handlers exist
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.NOTSET)

    return logger


def configure_logging(verbosity: int) -> None:
    """Set the package log level from a 0-3 verbosity value."""
    level = VERBOSITY_LEVELS[verbosity]
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
