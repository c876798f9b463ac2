"""Валюты, загруженные из API, и каталог для списка выбора."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping

from valuta_picker.core.exceptions import ApiResponseError


@dataclass(frozen=True)
class Currency:
    """Описание валюты из ответа /currencies.

    Код берётся из ключа поля data как есть. Символ и число знаков после
    запятой загружаются, но дальше не используются.
    """

    code: str
    name: str
    symbol: str = ""
    symbol_native: str = ""
    decimal_digits: int = 2
    rounding: int = 0
    name_plural: str = ""

    @property
    def label(self) -> str:
        """Строка для списка выбора: "CODE (Name)"."""
        return f"{self.code} ({self.name})"

    @classmethod
    def from_payload(cls, code: str, payload: Mapping[str, Any]) -> "Currency":
        """Собрать валюту из элемента поля data."""
        name = payload.get("name")
        if not isinstance(name, str):
            raise ApiResponseError(f"у валюты '{code}' нет строкового поля 'name'")
        try:
            decimal_digits = int(payload.get("decimal_digits", 2))
            rounding = int(payload.get("rounding", 0))
        except (TypeError, ValueError) as exc:
            raise ApiResponseError(
                f"некорректное описание валюты '{code}': {exc}",
            ) from exc
        return cls(
            code=code,
            name=name,
            symbol=payload.get("symbol", ""),
            symbol_native=payload.get("symbol_native", ""),
            decimal_digits=decimal_digits,
            rounding=rounding,
            name_plural=payload.get("name_plural", ""),
        )


class CurrencyCatalog:
    """Неизменяемый упорядоченный набор валют.

    Порядок задаётся сортировкой строк "CODE (Name)" и не меняется за сессию,
    поэтому индекс курсора всегда указывает на одну и ту же валюту.
    """

    def __init__(self, currencies: Iterable[Currency]) -> None:
        ordered = sorted(currencies, key=lambda item: item.label)
        self._codes: List[str] = [item.code for item in ordered]
        self._choices: List[str] = [item.label for item in ordered]

    @classmethod
    def from_response(cls, payload: Any) -> "CurrencyCatalog":
        """Разобрать тело ответа {"data": {code: {...}}}: одна строка на ключ."""
        if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
            raise ApiResponseError("ожидался объект с полем 'data'")
        currencies = []
        for code, entry in payload["data"].items():
            if not isinstance(entry, dict):
                raise ApiResponseError(f"некорректное описание валюты '{code}'")
            currencies.append(Currency.from_payload(code, entry))
        return cls(currencies)

    @property
    def choices(self) -> List[str]:
        return list(self._choices)

    @property
    def codes(self) -> List[str]:
        return list(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def code_at(self, index: int) -> str:
        return self._codes[index]
