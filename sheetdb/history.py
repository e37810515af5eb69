"""Undo history for edited text."""

from __future__ import annotations


class UndoStack:
    """A last-in, first-out store of earlier text states."""

    def __init__(self) -> None:
        self._states: list[str] = []

    def __len__(self) -> int:
        return len(self._states)

    def save_state(self, state: str) -> None:
        """Remember ``state`` so that it can be restored later."""
        self._states.append(state)

    def undo(self) -> str:
        """Return the most recently saved state, or ``""`` when there is none."""
        if self._states:
            return self._states.pop()
        return ""