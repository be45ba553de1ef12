"""Logging configuration for skill-porter-tui.

The dashboard owns the terminal, so log records only ever go to a file under
~/.skill-porter/logs/. Until setup_logger() is called, records are dropped.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from .runtime import get_log_dir

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are noisy at DEBUG
_QUIET_LOGGERS = ("asyncio", "markdown_it")

_log_file_path: Optional[str] = None
_file_handler: Optional[logging.Handler] = None


def _build_file_handler(log_dir: str, level: int) -> logging.FileHandler:
    directory = Path(log_dir)
    directory.mkdir(exist_ok=True, parents=True)

    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    handler = logging.FileHandler(directory / f"skill_porter_{stamp}.log", encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logger(log_dir: Optional[str] = None, log_level: Optional[str] = None) -> None:
    """Send log records to a timestamped file.

    Calling it again while a file is attached does nothing.

    Args:
        log_dir: Directory for log files (default: ~/.skill-porter/logs/)
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: Config.LOG_LEVEL)
    """
    global _log_file_path, _file_handler

    if _file_handler is not None:
        return

    if log_level is None:
        from config import Config

        log_level = Config.LOG_LEVEL
    level = getattr(logging, log_level.upper(), logging.INFO)

    _file_handler = _build_file_handler(log_dir or get_log_dir(), level)
    _log_file_path = _file_handler.baseFilename

    logging.root.setLevel(level)
    logging.root.addHandler(_file_handler)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.info(f"Logging initialized. Level: {log_level}, File: {_log_file_path}")


def shutdown_logger() -> None:
    """Detach and close the file handler installed by setup_logger()."""
    global _log_file_path, _file_handler

    if _file_handler is not None:
        logging.root.removeHandler(_file_handler)
        _file_handler.close()
    _file_handler = None
    _log_file_path = None


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_log_file_path() -> Optional[str]:
    """Path of the current log file, or None if logging is not set up."""
    return _log_file_path
