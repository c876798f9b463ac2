#!/usr/bin/env python3

"""Точка входа Valuta Picker CLI."""

import sys

from valuta_picker.cli.interface import run_cli


def main() -> None:
    """Запустить консольный интерфейс с аргументами из командной строки."""
    argv = sys.argv[1:] or None
    run_cli(argv)


if __name__ == "__main__":
    main()
