# src/floatchat/core/config.py
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "ChatGPT"
DEFAULT_REPLY_DELAY = 1.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class AppConfig:
    """Runtime configuration for FloatChat."""

    title: str = DEFAULT_TITLE
    reply_delay: float = DEFAULT_REPLY_DELAY
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls, dotenv_path: Optional[Path] = None) -> "AppConfig":
        """Load configuration from a .env file (if any) and environment variables."""
        if dotenv_path is None and getattr(sys, 'frozen', False):
            dotenv_path = Path(sys.executable).parent / ".env"
        if dotenv_path is not None and dotenv_path.exists():
            load_dotenv(dotenv_path=dotenv_path)
            logger.info("[AppConfig] Loaded .env file from: %s", dotenv_path)

        log_file = os.getenv("FLOATCHAT_LOG_FILE")
        return cls(
            title=os.getenv("FLOATCHAT_TITLE", DEFAULT_TITLE).strip() or DEFAULT_TITLE,
            reply_delay=_parse_delay(os.getenv("FLOATCHAT_REPLY_DELAY")),
            log_level=os.getenv("FLOATCHAT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
            log_file=Path(log_file) if log_file else None,
        )


def _parse_delay(raw: Optional[str]) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_REPLY_DELAY
    try:
        value = float(raw)
    except ValueError:
        logger.warning("[AppConfig] Invalid FLOATCHAT_REPLY_DELAY %r, using %.1fs.", raw, DEFAULT_REPLY_DELAY)
        return DEFAULT_REPLY_DELAY
    if value < 0:
        logger.warning("[AppConfig] Negative FLOATCHAT_REPLY_DELAY %r, using %.1fs.", raw, DEFAULT_REPLY_DELAY)
        return DEFAULT_REPLY_DELAY
    return value
