"""
Logger factory shared by every relay module.

Verbosity follows ``settings.ENV``:
  * ``"dev"``  -> DEBUG
  * ``"prod"`` -> WARNING

Usage:
    from gemini_relay.logger import get_logger
    logger = get_logger(__name__)
"""

import logging
import sys

from gemini_relay.settings import settings

_ENV_LEVEL_MAP = {
    "dev": logging.DEBUG,
    "prod": logging.WARNING,
}
_DEFAULT_LEVEL = _ENV_LEVEL_MAP.get(settings.ENV, logging.INFO)


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """
    Return a named logger writing to stdout with the standard format.

    Args:
        name:  Usually ``__name__`` of the caller.
        level: Explicit level; derived from ``settings.ENV`` when None.
    """
    resolved_level = level if level is not None else _DEFAULT_LEVEL
    logger = logging.getLogger(name)

    # handlers are attached once per logger name
    if not logger.handlers:
        logger.setLevel(resolved_level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(resolved_level)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.propagate = False

    return logger
