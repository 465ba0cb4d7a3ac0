import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from habits.utilities.config import LOG_BACKUP_COUNT, LOG_FILE, LOG_LEVEL, LOG_MAX_BYTES


def setup_logger(log_file: Path = LOG_FILE, level: str = LOG_LEVEL,
                 max_bytes: int = LOG_MAX_BYTES, backup_count: int = LOG_BACKUP_COUNT):
    """Send application logs to a rotating file; the terminal belongs to the UI.

    Calling it again for the same file only updates the level.
    """
    log_file = Path(log_file).expanduser().resolve()
    log_file.parent.mkdir(exist_ok=True, parents=True)
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level, logging.INFO))
    for existing in logger.handlers:
        if isinstance(existing, RotatingFileHandler) and Path(existing.baseFilename) == log_file:
            return logger
    handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
    formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
