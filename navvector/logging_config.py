"""Logger setup for the navvector namespace.

Evaluated results are printed on stdout, so log records go to stderr.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def resolve_level(level: int | str) -> int:
    """Accept a numeric level or a level name in any case."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(level: int | str = logging.WARNING, log_file: str | None = None) -> logging.Logger:
    """Route the 'navvector' logger to stderr, and to log_file when given.

    Calling it again replaces the handlers of the previous call.
    """
    resolved = resolve_level(level)
    logger = logging.getLogger("navvector")
    logger.setLevel(resolved)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging at %s", logging.getLevelName(resolved))
    return logger
