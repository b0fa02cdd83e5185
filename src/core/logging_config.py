"""Logging configuration for the renderer."""

import logging
from pathlib import Path
from typing import Optional

from core.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(
    name: str = "pathtracer",
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Set up logging configuration.

    Handlers are attached to the root logger so that every module logger
    created with ``logging.getLogger(__name__)`` shares them.

    Args:
        name: Name of the logger returned to the caller
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to an additional log file

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(numeric_level)
    formatter = logging.Formatter(LOG_FORMAT)

    # Console handler (stderr keeps stdout free for piping images)
    if not any(getattr(h, "_pathtracer", False) for h in root.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler._pathtracer = True
        root.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for handler in root.handlers:
        handler.setLevel(numeric_level)

    return logging.getLogger(name)
