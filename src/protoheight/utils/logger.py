"""Central logging configuration for the library."""

from __future__ import annotations

import logging

_DEFAULT_LEVEL = logging.WARNING
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-level logger with default configuration applied."""
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=_DEFAULT_LEVEL, format=_FORMAT)
    return logger


def set_level(level: int | str) -> None:
    """Change the level of every protoheight logger at once."""
    logging.getLogger("protoheight").setLevel(level)
