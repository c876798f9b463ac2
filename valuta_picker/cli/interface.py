"""Командный интерфейс Valuta Picker."""

import sys
from typing import NoReturn, Sequence

from valuta_picker.cli import constants
from valuta_picker.cli.command_parser import build_parser
from valuta_picker.cli.picker import CurrencyPicker
from valuta_picker.core import usecases
from valuta_picker.core.exceptions import ValutaPickerError
from valuta_picker.core.selection import PickerMode, SelectionState, resolve
from valuta_picker.core.utils import normalize_currency_code, split_codes
from valuta_picker.infra.settings import SettingsLoader
from valuta_picker.logging_config import get_action_logger
from valuta_picker.rates_service.api_clients import FreeCurrencyApiClient
from valuta_picker.rates_service.config import ApiConfig

EXIT_FAILURE = 1
HANDLED_ERRORS = (
    ValueError,
    ValutaPickerError,
)


def _fail(error: Exception) -> NoReturn:
    """Сообщить об ошибке в stderr и завершить процесс с кодом 1."""
    get_action_logger().info("FATAL %s: %s", error.__class__.__name__, error)
    print(error, file=sys.stderr)
    sys.exit(EXIT_FAILURE)


def _make_client() -> FreeCurrencyApiClient:
    return FreeCurrencyApiClient(ApiConfig.from_env())


def pick_command(mode_name: str | None) -> None:
    """Обработчик команды pick: список, затем конвертация."""
    settings = SettingsLoader()
    mode = PickerMode(mode_name or settings.get("DEFAULT_MODE"))
    client = _make_client()
    catalog = usecases.load_catalog(client)

    state = SelectionState(
        catalog=catalog,
        mode=mode,
        char_limit=settings.get("AMOUNT_CHAR_LIMIT"),
    )
    final_state = CurrencyPicker(state).run()

    result = resolve(final_state, constants.AMOUNT_PLACEHOLDER)
    if result is None or not result.targets:
        return

    lines = usecases.convert(client, result.base, result.targets, result.quantity)
    for line in lines:
        print(line.format())


def currencies_command() -> None:
    """Обработчик команды currencies."""
    catalog = usecases.load_catalog(_make_client())
    for choice in catalog.choices:
        print(choice)


def latest_command(currencies: str, base: str) -> None:
    """Обработчик команды latest."""
    targets = split_codes(currencies)
    if not targets:
        raise ValueError("Ошибка: не указаны целевые валюты")
    client = _make_client()
    values = usecases.latest_values(client, normalize_currency_code(base), targets)
    for code, value in values.items():
        print(f"Value {code}: {value:f}")


def _dispatch_command(args) -> None:
    """Вызвать функцию-обработчик в зависимости от команды."""
    match args.command:
        case "pick" | None:
            pick_command(getattr(args, "mode", None))
        case "currencies":
            currencies_command()
        case "latest":
            latest_command(args.currencies, args.base)
        case _:
            raise ValueError(f"Неизвестная команда: {args.command}")


def run_cli(argv: Sequence[str] | None = None) -> None:
    """Разобрать аргументы и выполнить команду; любая ошибка даёт код 1."""
    parser = build_parser()
    try:
        parsed = parser.parse_args(list(argv) if argv else [])
        _dispatch_command(parsed)
    except HANDLED_ERRORS as error:
        _fail(error)

