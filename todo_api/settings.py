from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
DEFAULT_DB_PATH = "gotodo.db"
DEFAULT_DB_TIMEOUT = 5.0
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    db_path: Path
    db_timeout: float = DEFAULT_DB_TIMEOUT
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    environment: str = ""

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def _env_int(name: str, default: int) -> int:
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return default
    try:
        return int(raw_value)
    except ValueError:
        logger.warning("Invalid %s value '%s'; defaulting to %s", name, raw_value, default)
        return default


def _env_float(name: str, default: float) -> float:
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return default
    try:
        return float(raw_value)
    except ValueError:
        logger.warning("Invalid %s value '%s'; defaulting to %s", name, raw_value, default)
        return default


def _env_log_level(name: str, default: str) -> str:
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return default
    level = raw_value.strip().upper()
    if level not in LOG_LEVELS:
        logger.warning("Invalid %s value '%s'; defaulting to %s", name, raw_value, default)
        return default
    return level


@lru_cache
def get_settings() -> Settings:
    db_path = Path(os.getenv("TODO_DB_PATH") or DEFAULT_DB_PATH)
    db_timeout = _env_float("TODO_DB_TIMEOUT", DEFAULT_DB_TIMEOUT)
    host = os.getenv("HOST", "0.0.0.0")
    port = _env_int("PORT", DEFAULT_PORT)
    log_level = _env_log_level("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    environment = os.getenv("ENVIRONMENT", "").lower()

    return Settings(
        db_path=db_path,
        db_timeout=db_timeout,
        host=host,
        port=port,
        log_level=log_level,
        environment=environment,
    )
