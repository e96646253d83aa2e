"""Logging setup for the wiki server."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """Configure the ``textwiki`` logger with a single stream handler.

    Calling this again only updates the level.
    """
    logger = logging.getLogger("textwiki")
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
