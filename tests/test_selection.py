import pytest
from prompt_toolkit.document import Document

from valuta_picker.core.exceptions import AmountParseError
from valuta_picker.core.selection import (
    Event,
    EventType,
    PickerMode,
    SelectionState,
    resolve,
    update,
)


def apply(state, *event_types):
    for event_type in event_types:
        state = update(state, Event(event_type))
    return state


def type_text(state, text):
    for char in text:
        state = update(state, Event(EventType.INSERT, char))
    return state


@pytest.fixture
def state(catalog):
    return SelectionState(catalog=catalog)


def test_cursor_is_floored_at_zero(state):
    assert apply(state, EventType.MOVE_UP).cursor == 0


def test_cursor_is_capped_at_last_index(state):
    moved = apply(state, *[EventType.MOVE_DOWN] * 5)
    assert moved.cursor == len(state.catalog) - 1


def test_cursor_moves_both_ways(state):
    moved = apply(state, EventType.MOVE_DOWN, EventType.MOVE_DOWN, EventType.MOVE_UP)
    assert moved.cursor == 1


def test_toggle_twice_restores_selection(state):
    once = apply(state, EventType.TOGGLE)
    assert once.selected == {"EUR"}
    twice = apply(once, EventType.TOGGLE)
    assert twice.selected == state.selected


def test_enter_designates_base_and_removes_target(state):
    marked = apply(state, EventType.TOGGLE)
    based = apply(marked, EventType.ENTER)
    assert based.base == "EUR"
    assert "EUR" not in based.selected


def test_only_one_base_at_a_time(state):
    based = apply(state, EventType.ENTER, EventType.MOVE_DOWN, EventType.ENTER)
    assert based.base == "GBP"


def test_toggle_does_not_touch_base(state):
    based = apply(state, EventType.ENTER, EventType.TOGGLE)
    assert based.base == "EUR"
    assert based.selected == {"EUR"}


def test_basic_mode_enter_toggles(catalog):
    state = SelectionState(catalog=catalog, mode=PickerMode.BASIC)
    toggled = apply(state, EventType.ENTER)
    assert toggled.selected == {"EUR"}
    assert toggled.base is None
    assert apply(toggled, EventType.ENTER).selected == frozenset()


def test_quit_keeps_state(state):
    final = apply(state, EventType.MOVE_DOWN, EventType.TOGGLE, EventType.QUIT)
    assert final.done
    assert final.selected == {"GBP"}
    assert apply(final, EventType.MOVE_DOWN).cursor == final.cursor


def test_amount_editing(state):
    typed = type_text(state, "125")
    typed = apply(typed, EventType.CARET_LEFT, EventType.CARET_LEFT)
    typed = type_text(typed, ".")
    assert typed.amount.text == "1.25"
    typed = apply(typed, EventType.BACKSPACE)
    assert typed.amount.text == "125"
    typed = apply(typed, EventType.CARET_HOME, EventType.DELETE)
    assert typed.amount.text == "25"
    typed = apply(typed, EventType.CARET_END)
    assert typed.amount.cursor_position == 2


def test_caret_stays_in_bounds(state):
    typed = type_text(state, "7")
    typed = apply(typed, EventType.CARET_RIGHT, EventType.CARET_RIGHT)
    assert typed.amount.cursor_position == 1
    typed = apply(typed, EventType.CARET_LEFT, EventType.CARET_LEFT, EventType.BACKSPACE)
    assert typed.amount == Document("7", 0)


def test_amount_respects_char_limit(catalog):
    state = SelectionState(catalog=catalog, char_limit=3)
    typed = type_text(state, "12345")
    assert typed.amount.text == "123"


def test_text_is_ignored_without_amount_field(catalog):
    state = SelectionState(catalog=catalog, mode=PickerMode.BASE)
    assert type_text(state, "12").amount.text == ""


def test_empty_catalog_is_safe():
    from valuta_picker.core.currencies import CurrencyCatalog

    state = SelectionState(catalog=CurrencyCatalog([]))
    final = apply(state, EventType.MOVE_DOWN, EventType.TOGGLE, EventType.ENTER)
    assert final.cursor == 0
    assert final.base is None
    assert final.selected == frozenset()


def test_resolve_without_base_is_none(state):
    assert resolve(apply(state, EventType.TOGGLE)) is None


def test_resolve_sorts_targets_and_parses_amount(state):
    final = apply(
        state,
        EventType.MOVE_DOWN,
        EventType.MOVE_DOWN,
        EventType.TOGGLE,
        EventType.MOVE_UP,
        EventType.TOGGLE,
        EventType.MOVE_UP,
        EventType.ENTER,
    )
    final = type_text(final, "12.5")
    result = resolve(final)
    assert result.base == "EUR"
    assert result.targets == ["GBP", "USD"]
    assert result.quantity == 125.0


def test_resolve_uses_placeholder_for_empty_amount(state):
    result = resolve(apply(state, EventType.ENTER))
    assert result.quantity == 1.0
    assert result.targets == []


def test_resolve_rejects_amount_without_digits(state):
    final = type_text(apply(state, EventType.ENTER), "abc")
    with pytest.raises(AmountParseError):
        resolve(final)


def test_base_mode_has_no_quantity(catalog):
    state = SelectionState(catalog=catalog, mode=PickerMode.BASE)
    assert resolve(apply(state, EventType.ENTER)).quantity is None
