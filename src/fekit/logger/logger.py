"""Logging setup for fekit.

The helpers only log at DEBUG, when a lookup falls back to a sentinel value
(an unparseable date string, a malformed percent escape), so the default
INFO level keeps them silent. Set ``LOG_LEVEL=DEBUG`` to see why a call
returned None.
"""

import logging
import os
import sys

__all__ = ["logger", "setup_logger"]

DEFAULT_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = "fekit",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Return the named logger, attaching a stdout handler on first use.

    Args:
        name: Logger name; child loggers such as ``fekit.date`` work too
        level: Level name (DEBUG, INFO, ...); defaults to ``$LOG_LEVEL`` or INFO
        format_string: Record format; timestamps are ISO-8601 with milliseconds

    Returns:
        The configured logger. Later calls with the same name return it
        unchanged.
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"
        )
    )
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger


logger = setup_logger()
