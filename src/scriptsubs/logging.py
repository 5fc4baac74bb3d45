"""Logging helpers with structured defaults."""

from __future__ import annotations

import logging
import sys
from typing import Optional

_LOGGER: Optional[logging.Logger] = None


def configure_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure application logging.

    Records go to stderr; stdout is reserved for the rendered subtitles.
    """
    global _LOGGER
    if _LOGGER is not None:
        if verbose:
            _LOGGER.setLevel(logging.DEBUG)
        elif quiet:
            _LOGGER.setLevel(logging.WARNING)
        return _LOGGER

    level = logging.INFO
    if quiet:
        level = logging.WARNING
    if verbose:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    logger = logging.getLogger("scriptsubs")
    logger.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False

    _LOGGER = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger with the configured settings."""
    base = configure_logging()
    return base.getChild(name)
