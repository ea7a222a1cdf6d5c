# glyphlog/log_config.py
"""Diagnostics channel for the glyphlog library itself, using Loguru.

glyphlog reports its own problems (a file sink that cannot be opened, a write
that failed) through Loguru rather than through a glyphlog Logger, whose sink
may be the very thing that broke. Loguru's default stderr handler is enough
for that; ``configure_logging`` lets a host program redirect or quieten it.
"""

import sys

from loguru import logger

DIAGNOSTIC_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(level: str = "INFO", sink=sys.stderr):
    """
    Configures the Loguru logger used for glyphlog diagnostics.

    Removes existing handlers and adds a new one with the specified level and
    sink.

    Args:
        level: The minimum diagnostic level (e.g., "DEBUG", "INFO", "ERROR").
        sink: The output sink (e.g., sys.stderr, "glyphlog-diagnostics.log").
    """
    logger.remove()
    logger.add(
        sink,
        level=level.upper(),
        format=DIAGNOSTIC_FORMAT,
        colorize=sink is sys.stderr,  # Only colorize if writing to stderr
        backtrace=False,
        diagnose=False,
    )
    logger.debug(f"glyphlog diagnostics configured with level={level.upper()}")


__all__ = ["configure_logging", "logger"]
