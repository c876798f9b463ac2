"""Пользовательские исключения Valuta Picker."""


class ValutaPickerError(Exception):
    """Базовая ошибка приложения: любая из них завершает программу с кодом 1."""


class ConfigurationError(ValutaPickerError):
    """Не задан API-ключ или конфигурация повреждена."""


class ApiRequestError(ValutaPickerError):
    """Ошибки обращения к внешнему API (запрос не ушёл или ответ не прочитан)."""

    def __init__(self, reason: str, *, url: str | None = None) -> None:
        message = f"Ошибка при обращении к внешнему API: {reason}"
        if url:
            message = f"{message} (url={url})"
        super().__init__(message)
        self.reason = reason
        self.url = url


class ApiStatusError(ApiRequestError):
    """API ответил кодом, отличным от 200."""

    def __init__(self, status_code: int, *, url: str | None = None) -> None:
        super().__init__(f"HTTP response code: {status_code}", url=url)
        self.status_code = status_code


class ApiResponseError(ApiRequestError):
    """Тело ответа не является JSON ожидаемой формы."""


class AmountParseError(ValutaPickerError):
    """Введённую сумму не удалось превратить в число."""

    def __init__(self, raw_value: str) -> None:
        super().__init__(f"Не удалось преобразовать сумму в число: '{raw_value}'")
        self.raw_value = raw_value
