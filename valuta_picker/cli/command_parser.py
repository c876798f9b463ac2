"""Определение парсера команд Valuta Picker."""

from argparse import SUPPRESS, ArgumentParser

from valuta_picker.core.selection import PickerMode


class RuArgumentParser(ArgumentParser):
    """Парсер, выводящий сообщения об ошибках и help на русском языке."""

    ERROR_REPLACEMENTS = (
        ("the following arguments are required", "требуются аргументы"),
        ("unrecognized arguments", "неизвестные аргументы"),
        ("invalid choice", "неизвестное значение"),
        ("expected one argument", "ожидается одно значение"),
        (" (choose from ", " (доступно: "),
    )

    HELP_REPLACEMENTS = (
        ("usage:", "использование:"),
        ("options:", "опции:"),
        ("optional arguments:", "необязательные аргументы:"),
        ("positional arguments:", "позиционные аргументы:"),
    )

    def error(self, message: str) -> None:  # type: ignore[override]
        localized = message
        for english, russian in self.ERROR_REPLACEMENTS:
            localized = localized.replace(english, russian)
        raise ValueError(f"Ошибка: {localized}")

    def format_help(self) -> str:  # type: ignore[override]
        help_text = super().format_help()
        for english, russian in self.HELP_REPLACEMENTS:
            help_text = help_text.replace(english, russian)
        return help_text

    def format_usage(self) -> str:  # type: ignore[override]
        usage_text = super().format_usage()
        return usage_text.replace("usage:", "использование:")


def _add_help_argument(parser: ArgumentParser) -> None:
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=SUPPRESS,
        help="показать справку и выйти",
    )


def build_parser() -> ArgumentParser:
    """Создать парсер аргументов CLI с подкомандами."""
    parser = RuArgumentParser(prog="valuta-picker", add_help=False)
    _add_help_argument(parser)
    subparsers = parser.add_subparsers(dest="command")

    pick_parser = subparsers.add_parser(
        "pick",
        help="Выбрать валюты и выполнить конвертацию",
        add_help=False,
        prog="valuta-picker pick",
    )
    _add_help_argument(pick_parser)
    pick_parser.add_argument(
        "--mode",
        choices=[mode.value for mode in PickerMode],
        help="Вариант списка: basic, base или amount",
    )

    currencies_parser = subparsers.add_parser(
        "currencies",
        help="Показать список поддерживаемых валют",
        add_help=False,
        prog="valuta-picker currencies",
    )
    _add_help_argument(currencies_parser)

    latest_parser = subparsers.add_parser(
        "latest",
        help="Показать курсы без выбора из списка",
        add_help=False,
        prog="valuta-picker latest",
    )
    _add_help_argument(latest_parser)
    latest_parser.add_argument(
        "--currencies",
        required=True,
        help="Целевые валюты через запятую (например USD,EUR)",
    )
    latest_parser.add_argument("--base", required=True, help="Базовая валюта")

    return parser
