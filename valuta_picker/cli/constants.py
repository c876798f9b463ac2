"""Константы CLI Valuta Picker."""

HEADERS: dict[str, str] = {
    "basic": (
        "* Use the Space bar or the Enter key to select currencies\n"
        "* To exit the program press q\n"
    ),
    "base": (
        "* Please select the base currency with the Enter key\n"
        "* To select the target currencies use the Space bar\n"
        "* To exit the program and process the conversion press q\n"
    ),
    "amount": (
        "* Please select the base currency with the Enter key\n"
        "* To select the target currencies use the Space bar\n"
        "* To exit the program and process the conversion press q\n"
    ),
}

CURSOR_MARK = ">"
BASE_MARK = "•"
SELECTED_MARK = "x"

AMOUNT_PROMPT = "Please enter the amount of money you want to convert: "
AMOUNT_FIELD_PROMPT = "> "
AMOUNT_PLACEHOLDER = "1"
QUIT_HINT = "Press q to quit."
