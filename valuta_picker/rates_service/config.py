"""Конфигурация клиента freecurrencyapi."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from valuta_picker.core.exceptions import ConfigurationError
from valuta_picker.infra.settings import SettingsLoader


@dataclass(frozen=True)
class ApiConfig:
    """Ключ и адреса API; передаётся клиенту при создании."""

    api_key: str
    base_url: str = "https://api.freecurrencyapi.com/v1"
    request_timeout: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError(
                "Error. No API key found in environment variables. "
                "Set it in the API_KEY variable.",
            )

    @property
    def currencies_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/currencies"

    @property
    def latest_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/latest"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ApiConfig":
        """Прочитать ключ из окружения, остальное из настроек проекта."""
        settings = SettingsLoader()
        env = os.environ if environ is None else environ
        env_name = settings.get("API_KEY_ENV", "API_KEY")
        api_key = env.get(env_name, "")
        if not api_key.strip():
            raise ConfigurationError(
                "Error. No API key found in environment variables. "
                f"Set it in the {env_name} variable.",
            )
        return cls(
            api_key=api_key.strip(),
            base_url=settings.get("API_BASE_URL"),
            request_timeout=settings.get("REQUEST_TIMEOUT"),
        )
