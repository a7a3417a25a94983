"""Logging configuration helpers."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure the ``coffee_order`` logger with a single stream handler."""
    logger = logging.getLogger("coffee_order")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
