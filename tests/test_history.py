import pytest

from sheetdb.history import UndoStack


def test_undo_on_empty_stack_returns_empty_string():
    stack = UndoStack()
    assert stack.undo() == ""


def test_undo_returns_states_last_in_first_out():
    stack = UndoStack()
    stack.save_state("a")
    stack.save_state("ab")
    assert stack.undo() == "ab"
    assert stack.undo() == "a"
    assert stack.undo() == ""


@pytest.mark.parametrize(
    "states",
    [["one"], ["x", "xy", "xyz"], ["", "same", "same", "other"]],
)
def test_undo_replays_saved_states_in_reverse(states):
    stack = UndoStack()
    for state in states:
        stack.save_state(state)
    assert len(stack) == len(states)
    restored = [stack.undo() for _ in states]
    assert restored == list(reversed(states))
    assert len(stack) == 0


def test_saving_after_undo_continues_from_remaining_states():
    stack = UndoStack()
    stack.save_state("first")
    stack.save_state("second")
    assert stack.undo() == "second"
    stack.save_state("third")
    assert stack.undo() == "third"
    assert stack.undo() == "first"