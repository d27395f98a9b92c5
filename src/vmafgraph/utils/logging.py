"""Logging configuration and utilities."""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

LOG_FORMAT = (
    "<level>{level}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:"
    "<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(
    level: str = "WARNING", log_file: Optional[Union[str, Path]] = None
) -> None:
    """Configure loguru sinks for command line use.
    
    Args:
        level: Minimum log level
        log_file: Optional log file path
    """
    logger.remove()  # Remove default handler
    
    # stdout carries the filter graph, keep logs on stderr
    logger.add(sink=sys.stderr, level=level.upper(), format=LOG_FORMAT)
    
    if log_file:
        logger.add(
            sink=str(log_file),
            level=level.upper(),
            rotation="100 MB",
            retention="1 week"
        )
