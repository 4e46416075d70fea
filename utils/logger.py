# -*- coding: utf-8 -*-
"""
Logging configuration.

All modules log under the "scolarite" logger; ``get_logger(__name__)``
returns a child so records carry the module path.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

APP_LOGGER_NAME = "scolarite"

_logger: Optional[logging.Logger] = None


def setup_logger(console_level: Optional[str] = None,
                 log_path: Optional[Path] = None) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        console_level: Level name for stdout (defaults to Config.LOG_LEVEL)
        log_path: Rotating log file (defaults to Config.LOG_PATH)

    Calling it again replaces the handlers instead of adding new ones.
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    log_path = Path(log_path) if log_path else Config.LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(Config.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)

    level_name = (console_level or Config.LOG_LEVEL).upper()
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level_name, logging.INFO))
    console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(name)s | %(message)s"))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger of the application logger, set up on first use."""
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
