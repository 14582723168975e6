"""Logging setup for prtifact (stderr, so stdout stays free for reports)."""

import logging
import os
import sys
from typing import Optional, Union

LOG_LEVEL_ENV = "PRTIFACT_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: Optional[Union[int, str]] = None) -> int:
    """
    Resolve a logging level from an int, a level name, or PRTIFACT_LOG_LEVEL.

    Unknown names fall back to INFO.
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: Optional[Union[int, str]] = None, format_string: Optional[str] = None) -> logging.Logger:
    """
    Set up logging for prtifact.

    Args:
        level: Logging level or level name (default: PRTIFACT_LOG_LEVEL, else INFO)
        format_string: Custom format string (optional)

    Returns:
        The package root logger
    """
    logging.basicConfig(
        level=resolve_level(level),
        format=format_string or DEFAULT_FORMAT,
        stream=sys.stderr,
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    return logging.getLogger("prtifact")


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    return logging.getLogger(f"prtifact.{name}")
