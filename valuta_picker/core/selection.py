"""Состояние выбора валют и функция перехода (state, event) -> state."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import FrozenSet, List, Optional

from prompt_toolkit.document import Document

from valuta_picker.core.currencies import CurrencyCatalog
from valuta_picker.core.utils import extract_amount, sorted_unique


class PickerMode(str, Enum):
    """Варианты поведения списка.

    basic  — Enter и пробел одинаково отмечают валюту, базовой нет;
    base   — Enter назначает базовую валюту, пробел отмечает целевые;
    amount — как base, плюс поле ввода суммы.
    """

    BASIC = "basic"
    BASE = "base"
    AMOUNT = "amount"

    @property
    def has_base(self) -> bool:
        return self is not PickerMode.BASIC

    @property
    def has_amount(self) -> bool:
        return self is PickerMode.AMOUNT


class EventType(str, Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    TOGGLE = "toggle"
    ENTER = "enter"
    QUIT = "quit"
    INSERT = "insert"
    BACKSPACE = "backspace"
    DELETE = "delete"
    CARET_LEFT = "caret_left"
    CARET_RIGHT = "caret_right"
    CARET_HOME = "caret_home"
    CARET_END = "caret_end"


@dataclass(frozen=True)
class Event:
    type: EventType
    text: str = ""


@dataclass(frozen=True)
class SelectionState:
    """Текущее состояние выбора.

    Отмеченные и базовая валюты хранятся по коду, курсор — по индексу
    в неизменном списке каталога.
    """

    catalog: CurrencyCatalog
    mode: PickerMode = PickerMode.AMOUNT
    cursor: int = 0
    selected: FrozenSet[str] = frozenset()
    base: Optional[str] = None
    amount: Document = field(default_factory=Document)
    char_limit: int = 156
    done: bool = False

    @property
    def current_code(self) -> Optional[str]:
        if not len(self.catalog):
            return None
        return self.catalog.code_at(self.cursor)


@dataclass(frozen=True)
class PickerResult:
    """Итог работы списка: база, отсортированные цели и сумма."""

    base: str
    targets: List[str]
    quantity: Optional[float]


def move_cursor(state: SelectionState, delta: int) -> SelectionState:
    if not len(state.catalog):
        return state
    cursor = min(max(state.cursor + delta, 0), len(state.catalog) - 1)
    return replace(state, cursor=cursor)


def toggle(state: SelectionState) -> SelectionState:
    code = state.current_code
    if code is None:
        return state
    return replace(state, selected=state.selected ^ {code})


def set_base(state: SelectionState) -> SelectionState:
    """Назначить валюту под курсором базовой, убрав её из целевых."""
    code = state.current_code
    if code is None:
        return state
    return replace(state, selected=state.selected - {code}, base=code)


def edit_amount(state: SelectionState, event: Event) -> SelectionState:
    doc = state.amount
    text, pos = doc.text, doc.cursor_position

    if event.type is EventType.INSERT:
        room = state.char_limit - len(text)
        if room <= 0 or not event.text:
            return state
        chunk = event.text[:room]
        new_doc = Document(text[:pos] + chunk + text[pos:], pos + len(chunk))
    elif event.type is EventType.BACKSPACE:
        if pos == 0:
            return state
        new_doc = Document(text[: pos - 1] + text[pos:], pos - 1)
    elif event.type is EventType.DELETE:
        if pos >= len(text):
            return state
        new_doc = Document(text[:pos] + text[pos + 1 :], pos)
    elif event.type is EventType.CARET_LEFT:
        new_doc = Document(text, pos + doc.get_cursor_left_position())
    elif event.type is EventType.CARET_RIGHT:
        new_doc = Document(text, pos + doc.get_cursor_right_position())
    elif event.type is EventType.CARET_HOME:
        new_doc = Document(text, 0)
    elif event.type is EventType.CARET_END:
        new_doc = Document(text, len(text))
    else:
        return state
    return replace(state, amount=new_doc)


def update(state: SelectionState, event: Event) -> SelectionState:
    """Применить одно событие клавиатуры к состоянию."""
    if state.done:
        return state

    match event.type:
        case EventType.QUIT:
            return replace(state, done=True)
        case EventType.MOVE_UP:
            return move_cursor(state, -1)
        case EventType.MOVE_DOWN:
            return move_cursor(state, 1)
        case EventType.TOGGLE:
            return toggle(state)
        case EventType.ENTER:
            if state.mode.has_base:
                return set_base(state)
            return toggle(state)
        case _:
            if state.mode.has_amount:
                return edit_amount(state, event)
            return state


def resolve(state: SelectionState, placeholder: str = "1") -> Optional[PickerResult]:
    """Превратить финальное состояние в параметры конвертации.

    Без базовой валюты возвращает None: конвертировать нечего.
    """
    if state.base is None:
        return None
    quantity = None
    if state.mode.has_amount:
        quantity = extract_amount(state.amount.text, placeholder)
    return PickerResult(
        base=state.base,
        targets=sorted_unique(state.selected),
        quantity=quantity,
    )
