"""Logging setup for testfilter."""

import sys
from pathlib import Path
from typing import List

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)
VERBOSE_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_session_logging(config) -> List[int]:
    """Replace the default loguru sink with console and optional file sinks.

    Returns the ids of the sinks that were added.
    """
    logger.remove()

    sink_ids = [
        logger.add(
            sys.stderr,
            level=config.console_level,
            format=VERBOSE_CONSOLE_FORMAT if config.verbose else CONSOLE_FORMAT,
            colorize=True,
        )
    ]

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        sink_ids.append(
            logger.add(
                str(log_path),
                level="DEBUG",
                format=FILE_FORMAT,
                rotation=config.log_rotation,
                retention=config.log_retention,
            )
        )

    logger.debug(f"Logging configured at {config.console_level}")
    return sink_ids
