"""Application-wide logger for the study planner.

The log file lives in the directory chosen by ``ConfigManager.log_dir`` and
the level comes from the ``logging.level`` setting, so::

    studyplan config set logging.level DEBUG

makes the next command record every load, save and mutation.
"""

from __future__ import annotations

import logging
import logging.handlers

from studyplan_cli.config import get_config_manager

LOGGER_NAME = "studyplan_cli"
LOG_FILE = "studyplan.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call."""
    global _logger
    if _logger is not None:
        return _logger

    config_manager = get_config_manager()
    log_dir = config_manager.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config_manager.config.logging.level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger


def reset_logger() -> None:
    """Close the log file so the next get_logger() call re-reads the settings."""
    global _logger
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    _logger = None
