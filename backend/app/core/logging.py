from __future__ import annotations

import logging

LOGGER_NAME = "app"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter(LOG_FORMAT))


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach the stream handler to the ``app`` logger.

    Calling it again only updates the level, so building several apps in one
    process (tests) does not duplicate log lines.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
