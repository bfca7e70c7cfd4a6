"""Leveled console and file logging with loguru."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from mediaorg.config.settings import LOG_FILE_ROTATION, LOG_LEVELS

CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> <level>[{level: <7}] {message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} [{level: <7}] {message}"


def setup_logging(level: str = "ALL", log_file: Optional[Path] = None, colorize: bool = True) -> None:
    """
    Configure loguru logging.

    Args:
        level: One of ALL, DEBUG, INFO, WARN, ERROR, OFF. Unknown values
            behave like ALL.
        log_file: Optional file receiving the same messages, uncolored.
        colorize: Colorize console output.
    """
    logger.remove()
    loguru_level = LOG_LEVELS.get(level.upper(), LOG_LEVELS["ALL"])
    if loguru_level is None:
        return

    logger.add(
        sys.stderr,
        level=loguru_level,
        format=CONSOLE_FORMAT,
        colorize=colorize,
    )
    if log_file is not None:
        logger.add(
            str(log_file),
            level=loguru_level,
            format=FILE_FORMAT,
            rotation=LOG_FILE_ROTATION,
            colorize=False,
        )
