"""Logging configuration for Supplier Directory.

Every module logs through a child of the ``supplier_directory`` logger
(``get_logger("listing")`` -> ``supplier_directory.listing``), so one call
to ``setup_logging`` configures the listing client, the selection stores
and the API alike.
"""

import logging
import sys
from pathlib import Path
from datetime import date
from typing import Optional

ROOT_LOGGER_NAME = "supplier_directory"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_DIR = Path(__file__).parent.parent / "logs"

# Third-party loggers that are only interesting when something breaks
QUIET_LOGGERS = ("urllib3", "httpx", "multipart")


def _parse_level(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    return level


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Defaults to the
            LOG_LEVEL setting.
        log_file: Optional file to log to as well.
        log_to_console: Log to stdout.

    Returns:
        The ``supplier_directory`` logger.
    """
    if log_level is None:
        from config.settings import config

        log_level = config.app.log_level
    level = _parse_level(log_level)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list = []
    if log_to_console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Logger named ``supplier_directory.<name>``."""
    if name == ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def daily_log_file(prefix: str = "directory", day: Optional[date] = None) -> Path:
    """Dated log file under ``logs/``, e.g. ``logs/directory_20240601.log``."""
    day = day or date.today()
    return LOG_DIR / f"{prefix}_{day.strftime('%Y%m%d')}.log"
