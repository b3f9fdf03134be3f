"""
Centralized logging configuration.

All FormFlow loggers hang off the 'formflow' root logger, which owns the
console and rotating-file handlers. Module loggers only propagate.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

from .constants import (
    LOG_LEVEL, LOG_FORMAT, LOG_FILE,
    LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT
)

ROOT_LOGGER_NAME = 'formflow'


def setup_logger(
    level: Optional[str] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure the 'formflow' root logger once.

    Usage:
        from config.logging_config import setup_logger
        setup_logger(level="DEBUG", log_file="logs/run.log")

    Args:
        level: Level name for the root logger (defaults to LOG_LEVEL).
        log_file: Rotating log file path (defaults to LOG_FILE).

    Returns:
        The configured root logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, (level or LOG_LEVEL).upper()))

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    # Console handler - INFO level
    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)

    # File handler with rotation - DEBUG level
    log_path = Path(log_file or LOG_FILE)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
        backupCount=LOG_BACKUP_COUNT,
        encoding='utf-8',
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a module logger that propagates to the 'formflow' root.

    Usage:
        from config.logging_config import get_logger
        logger = get_logger(__name__)
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


# Singleton logger for quick imports
# Usage: from config.logging_config import logger
logger = setup_logger()
