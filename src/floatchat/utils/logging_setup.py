import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
MAX_LOG_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 2


def configure_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> logging.Logger:
    """Console logging at `level`, plus a rotating debug log when `log_file` is set."""
    root_logger = logging.getLogger("floatchat")
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    formatter = logging.Formatter(LOG_FORMAT)

    console_level = logging.getLevelName(level.upper())
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(formatter)
    root_logger.addHandler(console)

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(formatter)
            root_logger.addHandler(fh)
        except OSError as e:
            root_logger.error("Failed to set up file logger at %s: %s", log_file, e)

    return root_logger
