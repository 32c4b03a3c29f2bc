"""Logging setup.

stdout is the drawing surface, so nothing is ever logged to the terminal.
Records go to a file when one is requested and are discarded otherwise.
"""

import logging
from typing import Optional

_LOGGER_NAME = "figclock"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Optional[str] = None, level: str = "INFO") -> logging.Logger:
    """Attach handlers to the package logger once and return it."""
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(level.upper())
    logger.propagate = False
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.info("logging configured, writing to %s", log_file)
    else:
        logger.addHandler(logging.NullHandler())
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)
