"""Logging setup.

stdout belongs to the full-screen timer, so records go to a rotating file
under the per-user log directory instead of the console.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "goat"
LOG_FILENAME = "goat.log"
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s | %(message)s"

_HANDLER_NAME = "goat-file"


def parse_log_level(value: str) -> int:
    """Return the numeric level for a name like ``"info"``; raise ``ValueError`` otherwise."""
    level = logging.getLevelName(str(value).strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {value!r}")
    return level


def setup_logging(level: int | str = DEFAULT_LOG_LEVEL, path: Path | None = None) -> logging.Logger:
    """Attach the rotating file handler to the ``goat`` logger.

    Calling it again replaces the previous handler, so repeated setup never
    duplicates records.
    """
    numeric_level = parse_log_level(level) if isinstance(level, str) else level
    log_path = path or DEFAULT_LOG_PATH
    handler: logging.Handler
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(log_path, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8")
    except OSError:
        # Unwritable log directory: run without a log file.
        handler = logging.NullHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger(APP_NAME)
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
            existing.close()
    root.addHandler(handler)
    root.setLevel(numeric_level)
    root.propagate = False
    return root


__all__ = ["DEFAULT_LOG_LEVEL", "DEFAULT_LOG_PATH", "LOG_FORMAT", "parse_log_level", "setup_logging"]
