import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from dsmovie.config.environment import LOG_DIR, LOG_LEVEL

LOGGER_NAME = "dsmovie"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

APP_LOG_FILE = "dsmovie.log"
ERROR_LOG_FILE = "dsmovie-errors.log"
MAX_BYTES = 2 * 1024 * 1024
BACKUP_COUNT = 3


def _rotating_handler(path: Path, level: int, formatter: logging.Formatter) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(log_dir: Optional[Path] = None, level: Optional[str] = None) -> logging.Logger:
    """Attach file and console handlers to the ``dsmovie`` logger, not the root logger.

    Calling this again is a no-op.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    log_dir = Path(log_dir or LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT)

    logger.setLevel((level or LOG_LEVEL).upper())
    logger.addHandler(_rotating_handler(log_dir / APP_LOG_FILE, logging.NOTSET, formatter))
    logger.addHandler(_rotating_handler(log_dir / ERROR_LOG_FILE, logging.ERROR, formatter))

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)
    logger.propagate = False

    logger.debug(f"Logging to {log_dir.resolve()} at {logging.getLevelName(logger.level)}")
    return logger
