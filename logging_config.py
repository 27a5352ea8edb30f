"""
Logging configuration for the food ordering bot.

Usage:
    from logging_config import setup_logging
    setup_logging()  # once at startup
"""
import logging
import os
import sys

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: str = None) -> None:
    """
    Configure logging for the application.

    Args:
        level: Log level name. Falls back to LOG_LEVEL, then INFO.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    level = level.upper()
    if level not in VALID_LEVELS:
        level = "INFO"

    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    # werkzeug logs every request at INFO
    if level != "DEBUG":
        logging.getLogger("werkzeug").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug("Logging configured at %s level", level)
