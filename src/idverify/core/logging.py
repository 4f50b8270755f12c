"""Logging setup shared by the API and the CLI."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_ROOT_LOGGER = "idverify"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a single stream handler to the ``idverify`` logger.

    Safe to call more than once; later calls only change the level.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    if not any(h.get_name() == _ROOT_LOGGER for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_ROOT_LOGGER)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
