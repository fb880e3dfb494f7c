"""
Logging helpers.

The package itself only creates module-level loggers; applications embedding
the planner call setup_logging() once to get console output.
"""

import logging
import sys
from typing import Optional, Union


def setup_logging(level: Union[int, str] = "INFO", filename: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Idempotent with respect to handlers: if the root logger already has
    handlers, only the level is updated.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if root_logger.handlers:
        return

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
    )

    stream_handler = logging.StreamHandler(stream=sys.stdout)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if filename:
        file_handler = logging.FileHandler(filename, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return logging.getLogger(name), defaulting to the package logger."""
    return logging.getLogger(name or "module_planner")
