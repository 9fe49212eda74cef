"""Logging utilities for beanctx, built on loguru."""

import sys
from typing import Optional

from loguru import logger

DEFAULT_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(
    level: str = "INFO",
    format: Optional[str] = None,
    enqueue: bool = False,
    backtrace: bool = False,
    diagnose: bool = False,
) -> int:
    """
    Configure loguru logging with standardized settings.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Custom log format string (uses default if None)
        enqueue: Whether to enqueue logs (helps with threading issues)
        backtrace: Whether to show full traceback on errors
        diagnose: Whether to show variable values in tracebacks

    Returns:
        The id of the added sink
    """
    # Remove default handler
    logger.remove()

    return logger.add(
        sys.stderr,
        format=format or DEFAULT_FORMAT,
        level=level,
        enqueue=enqueue,
        backtrace=backtrace,
        diagnose=diagnose,
    )
