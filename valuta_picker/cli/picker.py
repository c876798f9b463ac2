"""Интерактивный список выбора валют на prompt_toolkit."""

from __future__ import annotations

from typing import Any, Optional

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import Window
from prompt_toolkit.layout.controls import FormattedTextControl

from valuta_picker.cli import constants
from valuta_picker.core.selection import Event, EventType, SelectionState, update


def render(state: SelectionState) -> str:
    """Полная перерисовка экрана по текущему состоянию."""
    lines = [constants.HEADERS[state.mode.value]]
    for index, choice in enumerate(state.catalog.choices):
        code = state.catalog.code_at(index)
        cursor = constants.CURSOR_MARK if index == state.cursor else " "
        checked = " "
        if state.base == code:
            checked = constants.BASE_MARK
        elif code in state.selected:
            checked = constants.SELECTED_MARK
        lines.append(f"{cursor} [{checked}] {choice}")

    if state.mode.has_amount:
        text = state.amount.text or constants.AMOUNT_PLACEHOLDER
        lines.append("")
        lines.append(constants.AMOUNT_PROMPT)
        lines.append(f"{constants.AMOUNT_FIELD_PROMPT}{text}")

    lines.append("")
    lines.append(constants.QUIT_HINT)
    return "\n".join(lines) + "\n"


KEY_EVENTS = {
    ("up",): EventType.MOVE_UP,
    ("k",): EventType.MOVE_UP,
    ("down",): EventType.MOVE_DOWN,
    ("j",): EventType.MOVE_DOWN,
    ("space",): EventType.TOGGLE,
    ("enter",): EventType.ENTER,
    ("q",): EventType.QUIT,
    ("c-c",): EventType.QUIT,
    ("escape",): EventType.QUIT,
    ("backspace",): EventType.BACKSPACE,
    ("delete",): EventType.DELETE,
    ("left",): EventType.CARET_LEFT,
    ("right",): EventType.CARET_RIGHT,
    ("home",): EventType.CARET_HOME,
    ("end",): EventType.CARET_END,
}


class CurrencyPicker:
    """Связывает клавиши с функцией update и перерисовывает экран."""

    def __init__(
        self,
        state: SelectionState,
        *,
        input: Optional[Any] = None,
        output: Optional[Any] = None,
    ) -> None:
        self.state = state
        self.app: Application = Application(
            layout=Layout(Window(FormattedTextControl(lambda: render(self.state)))),
            key_bindings=self._create_key_bindings(),
            full_screen=False,
            input=input,
            output=output,
        )

    def dispatch(self, event: Event) -> None:
        self.state = update(self.state, event)
        if self.state.done and self.app.is_running:
            self.app.exit()

    def _create_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        for keys, event_type in KEY_EVENTS.items():

            @kb.add(*keys)
            def _(event, event_type=event_type):
                self.dispatch(Event(event_type))

        @kb.add("<any>")
        def _(event):
            """Остальные печатные символы идут в поле суммы."""
            if event.data and event.data.isprintable():
                self.dispatch(Event(EventType.INSERT, event.data))

        return kb

    def run(self) -> SelectionState:
        """Запустить цикл обработки клавиш и вернуть финальное состояние."""
        self.app.run()
        return self.state
