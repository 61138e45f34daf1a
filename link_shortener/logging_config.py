"""Logging setup for the link shortener."""

import logging

LOGGER_NAME = "link_shortener"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger once.

    Every module logs through ``logging.getLogger(__name__)``, so a single
    handler on the package logger covers all of them. Calling this again
    only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
