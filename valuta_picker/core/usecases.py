"""Бизнес-логика Valuta Picker: загрузка каталога и конвертация."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from valuta_picker.core.currencies import CurrencyCatalog
from valuta_picker.decorators import log_action
from valuta_picker.rates_service.api_clients import FreeCurrencyApiClient


@dataclass(frozen=True)
class ConversionLine:
    """Одна строка результата: quantity base = value target."""

    base: str
    target: str
    rate: float
    quantity: Optional[float] = None

    @property
    def value(self) -> float:
        return (1.0 if self.quantity is None else self.quantity) * self.rate

    def format(self) -> str:
        if self.quantity is None:
            return f"1 {self.base} = {self.rate:f} {self.target}"
        return f"{self.quantity:f} {self.base} = {self.value:f} {self.target}"


def _extract_value(args: tuple, kwargs: dict, key: str, index: int) -> Any:
    """Возвращает значение аргумента из kwargs или args."""
    if key in kwargs:
        return kwargs[key]
    if len(args) > index:
        return args[index]
    return None


def _build_convert_context(
    args: tuple,
    kwargs: dict,
    result: Optional[List[ConversionLine]],
) -> dict[str, Any]:
    """Контекст лога для конвертации."""
    context: dict[str, Any] = {
        "base": _extract_value(args, kwargs, "base", 1),
        "targets": _extract_value(args, kwargs, "targets", 2),
        "quantity": _extract_value(args, kwargs, "quantity", 3),
    }
    if result is not None:
        context["lines"] = len(result)
    return {k: v for k, v in context.items() if v is not None}


def _build_catalog_context(
    args: tuple,
    kwargs: dict,
    result: Optional[CurrencyCatalog],
) -> dict[str, Any]:
    return {"currencies": len(result)} if result is not None else {}


@log_action("load_catalog", context_getter=_build_catalog_context)
def load_catalog(client: FreeCurrencyApiClient) -> CurrencyCatalog:
    """Загрузить каталог валют для списка выбора."""
    return client.fetch_currencies()


def build_conversion_lines(
    base: str,
    targets: Sequence[str],
    rates: Mapping[str, float],
    quantity: Optional[float] = None,
) -> List[ConversionLine]:
    """Посчитать строки результата в порядке targets.

    Код, которого нет в ответе, получает курс 0.0 вместо ошибки.
    """
    return [
        ConversionLine(
            base=base,
            target=target,
            rate=rates.get(target, 0.0),
            quantity=quantity,
        )
        for target in targets
    ]


@log_action("convert", context_getter=_build_convert_context)
def convert(
    client: FreeCurrencyApiClient,
    base: str,
    targets: Sequence[str],
    quantity: Optional[float] = None,
) -> List[ConversionLine]:
    """Запросить курсы base -> targets и посчитать результат.

    Порядок строк совпадает с порядком targets, повторы отбрасываются.
    """
    ordered = list(dict.fromkeys(targets))
    rates = client.fetch_latest(base, ordered)
    return build_conversion_lines(base, ordered, rates, quantity)


@log_action("latest", context_getter=_build_convert_context)
def latest_values(
    client: FreeCurrencyApiClient,
    base: str,
    targets: Sequence[str],
) -> Dict[str, float]:
    """Курсы в порядке запроса; отсутствующие в ответе коды дают 0.0."""
    rates = client.fetch_latest(base, targets)
    return {code: rates.get(code, 0.0) for code in targets}
