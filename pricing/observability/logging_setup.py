"""Logging for the pricing package.

Every module logs under ``pricing.*``; setup_logging() attaches handlers to
that one logger and leaves the root logger alone.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "pricing"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _handlers(log_file: Optional[str]) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", log_file: Optional[str] = None, force: bool = False):
    """Configure the package logger. Later calls are ignored unless forced."""
    global _configured
    if _configured and not force:
        return

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    for handler in _handlers(log_file):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name`` inside the package namespace."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
