import pytest

from sheetdb.textinput import BACKSPACE, BLINK_INTERVAL, Cursor, TextInput


def typed(text, max_length=100):
    box = TextInput(max_length)
    for char in text:
        box.process_input(char)
    return box


def test_typing_appends_and_moves_cursor():
    box = typed("abc")
    assert box.text == "abc"
    assert box.cursor.position == len("abc")


def test_insert_in_the_middle():
    box = typed("ac")
    box.cursor.move_left()
    box.process_input("b")
    assert box.text == "abc"


def test_backspace_deletes_before_cursor():
    box = typed("abc")
    box.process_input(BACKSPACE)
    assert box.text == "ab"
    assert box.cursor.position == len("ab")


def test_backspace_at_start_does_nothing():
    box = typed("ab")
    box.cursor.position = 0
    box.process_input(BACKSPACE)
    assert box.text == "ab"
    assert box.cursor.position == 0


def test_max_length_is_respected():
    box = typed("abcd", max_length=3)
    assert box.text == "abc"


def test_non_ascii_is_ignored():
    box = typed("aé")
    assert box.text == "a"


def test_undo_restores_previous_state():
    box = typed("abc")
    box.undo()
    assert box.text == "ab"
    assert box.cursor.position == len("ab")


def test_undo_after_backspace():
    box = typed("abc")
    box.process_input(BACKSPACE)
    box.undo()
    assert box.text == "abc"


def test_undo_never_restores_empty_content():
    box = typed("a")
    box.undo()
    assert box.text == "a"


def test_undo_without_history_keeps_text():
    box = TextInput()
    box.undo()
    assert box.text == ""


def test_clear_resets_content_and_cursor():
    box = typed("query")
    box.clear()
    assert box.text == ""
    assert box.cursor.position == 0


def test_type_text_only_when_active():
    box = TextInput()
    box.type_text("abc")
    assert box.text == ""
    box.active = True
    box.type_text("abc")
    assert box.text == "abc"


def test_cursor_visible_requires_active():
    box = TextInput()
    assert box.cursor_visible is False
    box.active = True
    assert box.cursor_visible is True


def test_cursor_move_left_stops_at_zero():
    cursor = Cursor()
    cursor.move_left()
    assert cursor.position == 0
    cursor.move_right()
    cursor.move_right()
    cursor.move_left()
    assert cursor.position == 1


@pytest.mark.parametrize("steps", [1, 2, 3])
def test_cursor_blinks_after_interval(steps):
    cursor = Cursor()
    for _ in range(steps):
        cursor.update(BLINK_INTERVAL)
    assert cursor.visible is (steps % 2 == 0)
    assert cursor.blink_time == 0.0


def test_cursor_stays_visible_before_interval():
    cursor = Cursor()
    cursor.update(BLINK_INTERVAL / 2)
    assert cursor.visible is True
    assert cursor.blink_time == BLINK_INTERVAL / 2


def test_text_input_update_drives_cursor():
    box = TextInput()
    box.update(BLINK_INTERVAL)
    assert box.cursor.visible is False