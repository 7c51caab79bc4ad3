import pytest

from blogr.keys import Key, KeyEvent, KeyModifiers


def test_char_event_holds_character():
    event = KeyEvent.char("a")
    assert event.key is Key.CHAR
    assert event.character == "a"
    assert event.modifiers == KeyModifiers.NONE


def test_has_control_false_without_modifier():
    assert KeyEvent.char("k").has_control() is False


def test_has_control_true_with_control():
    assert KeyEvent.char("k", KeyModifiers.CONTROL).has_control() is True


def test_has_control_with_combined_modifiers():
    event = KeyEvent.char("k", KeyModifiers.CONTROL | KeyModifiers.SHIFT)
    assert event.has_control() is True
    assert KeyEvent.char("k", KeyModifiers.ALT | KeyModifiers.SHIFT).has_control() is False


def test_special_key_has_no_character():
    event = KeyEvent(Key.ENTER)
    assert event.character is None
    assert event.has_control() is False


@pytest.mark.parametrize("bad", ["", "ab"])
def test_char_requires_single_character(bad):
    with pytest.raises(ValueError):
        KeyEvent.char(bad)


def test_special_key_rejects_character():
    with pytest.raises(ValueError):
        KeyEvent(Key.TAB, "x")


def test_events_compare_by_value():
    assert KeyEvent.char("z") == KeyEvent(Key.CHAR, "z")