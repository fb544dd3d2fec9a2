"""Logging setup shared by the collector modules."""

import logging
from pathlib import Path
from typing import Optional

from .config import DEFAULT_LOG_PATH


_logger: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    """Get or create the collector logger."""
    global _logger
    if _logger is None:
        _logger = logging.getLogger("ojad_accent")
        _logger.setLevel(logging.DEBUG)

        # Only add handlers if none exist
        if not _logger.handlers:
            console = logging.StreamHandler()
            console.setLevel(logging.INFO)
            console.setFormatter(logging.Formatter(
                "%(asctime)s %(levelname)s %(message)s",
                datefmt="%H:%M:%S"
            ))
            _logger.addHandler(console)

    return _logger


def setup_file_logging(log_path: Path = DEFAULT_LOG_PATH) -> None:
    """Add file handler for persistent logging."""
    logger = get_logger()

    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return

    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s [%(funcName)s] %(message)s"
    ))
    logger.addHandler(file_handler)


def set_console_level(level: int) -> None:
    """Change the level of the console handler (the log file keeps DEBUG)."""
    for handler in get_logger().handlers:
        # FileHandler is a StreamHandler too
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)
