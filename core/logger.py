"""Logging configuration."""
import logging
import sys
from pathlib import Path
from typing import List, Optional

from config.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(log_file: Optional[Path]) -> List[logging.Handler]:
    """Stdout handler, plus a file handler when LOG_FILE is set."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    return handlers


def setup_logger(
    name: str = "hello_api",
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Configure the named logger for the API and webapp servers.

    Handlers are attached once per logger name; later calls only adjust the level.

    Args:
        name: Logger name
        log_level: Level name, falls back to LOG_LEVEL
        log_file: File to append records to, falls back to LOG_FILE

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    level_name = (log_level or settings.log_level or "INFO").upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(log_file or settings.log_file):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


# Default logger instance
logger = setup_logger()
