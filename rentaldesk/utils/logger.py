# rentaldesk/utils/logger.py
"""
Logging setup shared by every module.
Writes to the console and, unless LOG_TO_FILE is off, to a rotating
rentaldesk.log under LOG_DIR.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from rentaldesk.config import settings

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))

_configured = False


def _resolve_log_dir() -> str:
    if os.path.isabs(settings.LOG_DIR):
        return settings.LOG_DIR
    return os.path.join(PROJECT_ROOT, settings.LOG_DIR)


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True

    level = settings.LOG_LEVEL.upper()
    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root = logging.getLogger()
    root.setLevel(level)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)
    root.addHandler(console)

    if settings.LOG_TO_FILE:
        log_dir = _resolve_log_dir()
        os.makedirs(log_dir, exist_ok=True)
        # 10 × 5MB
        file_handler = RotatingFileHandler(
            filename=os.path.join(log_dir, "rentaldesk.log"),
            maxBytes=5 * 1024 * 1024,
            backupCount=10,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    _configure_root_logger()
    return logging.getLogger(name)
