"""File logging for pomo.

Records go to a rotating ``pomo.log`` in the platformdirs user log directory
and never to the terminal, where the countdown is drawn. ``--debug`` lowers the
level so interval start/finish and notification details are kept too.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "pomo"
_LOG_FILE = "pomo.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_logger: logging.Logger | None = None


def _session_log_handler(logger: logging.Logger) -> RotatingFileHandler | None:
    """The pomo.log handler already attached to ``logger``, if any."""
    for handler in logger.handlers:
        if (
            isinstance(handler, RotatingFileHandler)
            and Path(handler.baseFilename).name == _LOG_FILE
        ):
            return handler
    return None


def _open_session_log() -> RotatingFileHandler:
    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def get_logger() -> logging.Logger:
    """Return the pomo logger, attaching the log file on first use."""
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(_APP_NAME)
    # Other handlers (capture tools, embedding apps) may already be attached;
    # only the log file itself must not be added twice.
    if _session_log_handler(logger) is None:
        logger.addHandler(_open_session_log())
    logger.setLevel(logging.INFO)
    logger.propagate = False

    _logger = logger
    return _logger


def set_debug(enabled: bool) -> None:
    """Log DEBUG records as well when ``enabled``, else INFO and above."""
    get_logger().setLevel(logging.DEBUG if enabled else logging.INFO)
