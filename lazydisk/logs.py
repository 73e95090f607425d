"""Logging setup.

The terminal is in raw alternate-screen mode while the app runs, so log
records go to a file in the platform log directory instead of stderr.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "lazydisk"
LOG_FILENAME = "lazydisk.log"
LOG_LEVEL_ENV = "LAZYDISK_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def resolve_log_level(requested: str | None) -> int:
    """Map a level name from CLI or environment to a ``logging`` level.

    Unknown names fall back to ``WARNING``.
    """
    name = (requested or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: int, log_path: Path | None = None) -> Path | None:
    """Attach a file handler to the package logger and return the log file path.

    When the log directory cannot be created, records are discarded through
    a ``NullHandler`` and ``None`` is returned.
    """
    package_logger = logging.getLogger(APP_NAME)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    path = log_path if log_path is not None else default_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        package_logger.addHandler(logging.NullHandler())
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False
    return path


__all__ = [
    "LOG_LEVEL_ENV",
    "configure_logging",
    "default_log_path",
    "resolve_log_level",
]
