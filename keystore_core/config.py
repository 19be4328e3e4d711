# keystore_core/config.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging
import os

from .errors import InvalidArgumentError

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.INFO
    log_file: Optional[str] = None


def load_settings(config: dict | None = None, strict: bool = True) -> Settings:
    """
    Resolve runtime settings.

    Lookup order per key: explicit ``config`` entry, then environment
    (KEYSTORE_LOG_LEVEL, KEYSTORE_LOG_FILE), then defaults.

    An unknown level name raises InvalidArgumentError, or falls back to INFO
    when ``strict`` is False.
    """
    config = config or {}
    level_name = config.get("log_level") or os.getenv("KEYSTORE_LOG_LEVEL", "INFO")
    level = _LEVELS.get(str(level_name).upper())
    if level is None and not strict:
        level = logging.INFO
    if level is None:
        raise InvalidArgumentError(f"Unknown log level: {level_name}")

    log_file = config.get("log_file") or os.getenv("KEYSTORE_LOG_FILE") or None
    return Settings(log_level=level, log_file=log_file)
