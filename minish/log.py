"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the ``minish`` logger."""

    logger = logging.getLogger("minish")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.WARNING
    logger.setLevel(level)
    if not any(getattr(handler, "_minish", False) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._minish = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.propagate = False
    return logger


__all__ = ["configure_logging", "LOG_FORMAT"]
