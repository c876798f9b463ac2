"""Клиент обращения к freecurrencyapi.com (/currencies и /latest)."""

from __future__ import annotations

import time
from typing import Any, Dict, Iterable

import requests

from valuta_picker.core.currencies import CurrencyCatalog
from valuta_picker.core.exceptions import (
    ApiRequestError,
    ApiResponseError,
    ApiStatusError,
)
from valuta_picker.logging_config import get_api_logger
from valuta_picker.rates_service.config import ApiConfig

MASKED_KEY = "***"


class FreeCurrencyApiClient:
    """Один GET на каждый вызов: без повторов и без кеша."""

    source_name = "freecurrencyapi"

    def __init__(self, config: ApiConfig) -> None:
        self.config = config
        self.logger = get_api_logger().getChild(f"client.{self.source_name}")

    def _display_url(self, url: str, params: Dict[str, str]) -> str:
        """URL запроса для логов и сообщений, ключ скрыт."""
        safe_params = {"apikey": MASKED_KEY, **params}
        return requests.Request("GET", url, params=safe_params).prepare().url

    def _get_json(self, url: str, params: Dict[str, str]) -> Any:
        full_params = {"apikey": self.config.api_key, **params}
        display_url = self._display_url(url, params)
        start = time.perf_counter()
        self.logger.info("Запрос: %s", display_url)
        try:
            response = requests.get(
                url,
                params=full_params,
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as exc:
            self.logger.error("Ошибка запроса %s: %s", display_url, exc)
            raise ApiRequestError(str(exc), url=display_url) from exc

        elapsed_ms = (time.perf_counter() - start) * 1000
        self.logger.info(
            "Ответ %s за %.2f мс",
            response.status_code,
            elapsed_ms,
        )
        if response.status_code != 200:
            self.logger.error(
                "Неуспешный код ответа %s: %s",
                response.status_code,
                display_url,
            )
            raise ApiStatusError(response.status_code, url=display_url)

        try:
            return response.json()
        except ValueError as exc:
            self.logger.error("Некорректный JSON от %s: %s", display_url, exc)
            raise ApiResponseError(
                f"Error unmarshalling: {exc}",
                url=display_url,
            ) from exc

    def fetch_currencies(self) -> CurrencyCatalog:
        """Загрузить каталог поддерживаемых валют."""
        url = self.config.currencies_url
        payload = self._get_json(url, {})
        try:
            catalog = CurrencyCatalog.from_response(payload)
        except ApiResponseError as exc:
            raise ApiResponseError(exc.reason, url=self._display_url(url, {})) from exc
        self.logger.info("Каталог: %d валют", len(catalog))
        return catalog

    def fetch_latest(self, base: str, targets: Iterable[str]) -> Dict[str, float]:
        """Загрузить курсы base -> target: {"USD": 1.1, ...}."""
        params = {
            "base_currency": base,
            "currencies": ",".join(targets),
        }
        payload = self._get_json(self.config.latest_url, params)
        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise ApiResponseError(
                "ожидался объект с полем 'data'",
                url=self._display_url(self.config.latest_url, params),
            )

        rates: Dict[str, float] = {}
        for code, value in data.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ApiResponseError(
                    f"курс '{code}' не является числом: {value!r}",
                    url=self._display_url(self.config.latest_url, params),
                )
            rates[code] = float(value)
        return rates
