"""Настройка логгеров: журнал действий и журнал обращений к API."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict

from valuta_picker.infra.settings import SettingsLoader

_LOGGERS: Dict[str, logging.Logger] = {}
ACTION_LOGGER_NAME = "valuta_picker.actions"
API_LOGGER_NAME = "valuta_picker.api"
MAX_BYTES = 1_000_000
BACKUP_COUNT = 3
DEFAULT_LEVEL = logging.INFO
ENV_LOG_LEVEL = "VALUTA_PICKER_LOG_LEVEL"


def _ensure_log_path(path: Path) -> Path:
    path = path.resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _resolve_level() -> int:
    name = os.getenv(ENV_LOG_LEVEL, "").strip().upper()
    if not name:
        return DEFAULT_LEVEL
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else DEFAULT_LEVEL


def _build_logger(name: str, setting_key: str, fmt: str) -> logging.Logger:
    if name in _LOGGERS:
        return _LOGGERS[name]

    settings = SettingsLoader()
    log_file = _ensure_log_path(Path(settings.get(setting_key)))

    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(_resolve_level())
        handler = RotatingFileHandler(
            log_file,
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
        logger.propagate = False
    _LOGGERS[name] = logger
    return logger


def get_action_logger() -> logging.Logger:
    """Вернуть логгер действий, создавая его один раз."""
    return _build_logger(ACTION_LOGGER_NAME, "LOG_PATH", "%(message)s")


def get_api_logger() -> logging.Logger:
    """Вернуть логгер HTTP-клиентов, создавая его один раз."""
    return _build_logger(
        API_LOGGER_NAME,
        "API_LOG_PATH",
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
