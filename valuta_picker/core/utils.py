"""Вспомогательные функции для core-модуля."""

from __future__ import annotations

import re
from typing import Iterable, List

from valuta_picker.core.exceptions import AmountParseError

DIGITS_RE = re.compile(r"\d+")


def normalize_currency_code(code: str) -> str:
    """Нормализация кода валюты в верхний регистр без пробелов."""
    if not isinstance(code, str) or not code.strip():
        raise ValueError("Код валюты должен быть непустой строкой")
    normalized = code.strip().upper()
    if " " in normalized or not 2 <= len(normalized) <= 5:
        raise ValueError("Код валюты должен быть 2-5 символов без пробелов")
    return normalized


def split_codes(raw: str) -> List[str]:
    """Разбить строку вида "usd, eur" на нормализованные коды без повторов."""
    codes: List[str] = []
    for part in raw.split(","):
        if not part.strip():
            continue
        code = normalize_currency_code(part)
        if code not in codes:
            codes.append(code)
    return codes


def sorted_unique(codes: Iterable[str]) -> List[str]:
    return sorted(set(codes))


def extract_amount(text: str, placeholder: str = "1") -> float:
    """Склеивает все группы цифр из поля ввода и превращает их в число.

    Точка и минус в шаблон не входят, поэтому "12.5" даёт 125.0.
    Пустое поле означает значение-подсказку.
    """
    raw = text if text.strip() else placeholder
    digits = "".join(DIGITS_RE.findall(raw))
    try:
        return float(digits)
    except ValueError as exc:
        raise AmountParseError(text) from exc
