"""Настройки проекта и Singleton для работы с конфигурацией."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict

PROJECT_ROOT = Path(__file__).resolve().parents[2]
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"
ENV_PYPROJECT_PATH = "VALUTA_PICKER_PYPROJECT_PATH"

DEFAULTS: Dict[str, Any] = {
    "API_BASE_URL": "https://api.freecurrencyapi.com/v1",
    "API_KEY_ENV": "API_KEY",
    "REQUEST_TIMEOUT": None,
    "AMOUNT_CHAR_LIMIT": 156,
    "DEFAULT_MODE": "amount",
    "LOG_PATH": "logs/actions.log",
    "API_LOG_PATH": "logs/api.log",
}


class SingletonMeta(type):
    """Простой метакласс Singleton: один экземпляр на класс."""

    _instances: Dict[type, Any] = {}

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


class SettingsLoader(metaclass=SingletonMeta):
    """Загружает конфиг из pyproject и предоставляет доступ через get()."""

    def __init__(self) -> None:
        if hasattr(self, "_config"):
            return
        self._config: Dict[str, Any] = {}
        self.reload()

    def get(self, key: str, default: Any = None) -> Any:
        """Вернуть значение настройки (если нет — default)."""
        return self._config.get(key, default)

    def reload(self) -> None:
        """Перечитывает pyproject и обновляет словарь настроек."""
        data = self._read_pyproject()
        section = data.get("tool", {}).get("valuta_picker", {})
        if not isinstance(section, dict):
            raise RuntimeError("Секция [tool.valuta_picker] должна быть таблицей")

        raw: Dict[str, Any] = dict(DEFAULTS)
        raw.update({key.upper(): value for key, value in section.items()})

        config: Dict[str, Any] = {}
        for key, value in raw.items():
            if key.endswith("_FILE") or key.endswith("_DIR") or key.endswith("_PATH"):
                path_value = Path(value)
                if not path_value.is_absolute():
                    path_value = PROJECT_ROOT / path_value
                config[key] = path_value.resolve()
            else:
                config[key] = value

        limit = config["AMOUNT_CHAR_LIMIT"]
        if not isinstance(limit, int) or limit <= 0:
            raise RuntimeError("AMOUNT_CHAR_LIMIT должен быть положительным целым")

        self._config = config

    def _read_pyproject(self) -> Dict[str, Any]:
        """
        Читает pyproject.toml из:
        - пути из переменной окружения VALUTA_PICKER_PYPROJECT_PATH
        - корня проекта
        - текущей директории
        Если файл не найден, используются значения по умолчанию.
        """
        candidates = []
        env_override = os.getenv(ENV_PYPROJECT_PATH)
        if env_override:
            candidates.append(Path(env_override).expanduser())
        candidates.extend([PYPROJECT_PATH, Path.cwd() / "pyproject.toml"])

        target_path = next((path for path in candidates if path.exists()), None)
        if target_path is None:
            return {}

        with target_path.open("rb") as file:
            return tomllib.load(file)

