"""A single-line text input with a blinking cursor and undo."""

from __future__ import annotations

from dataclasses import dataclass, field

from sheetdb.history import UndoStack

BLINK_INTERVAL = 0.5
DEFAULT_MAX_LENGTH = 100
BACKSPACE = "\b"


@dataclass
class Cursor:
    """The insertion point of a text input, blinking while it is shown."""

    position: int = 0
    visible: bool = True
    blink_time: float = 0.0

    def update(self, elapsed: float) -> None:
        """Advance the blink timer by ``elapsed`` seconds."""
        self.blink_time += elapsed
        if self.blink_time >= BLINK_INTERVAL:
            self.visible = not self.visible
            self.blink_time = 0.0

    def move_left(self) -> None:
        """Move one character to the left, stopping at the start."""
        if self.position > 0:
            self.position -= 1

    def move_right(self) -> None:
        """Move one character to the right."""
        self.position += 1


@dataclass
class TextInput:
    """Editable text of at most ``max_length`` ASCII characters."""

    max_length: int = DEFAULT_MAX_LENGTH
    active: bool = False
    content: str = ""
    cursor: Cursor = field(default_factory=Cursor)
    history: UndoStack = field(default_factory=UndoStack)

    @property
    def text(self) -> str:
        """The current content."""
        return self.content

    @property
    def cursor_visible(self) -> bool:
        """Whether the cursor should be drawn right now."""
        return self.active and self.cursor.visible

    def type_text(self, text: str) -> None:
        """Feed typed characters, ignored unless the input is active."""
        if not self.active:
            return
        for char in text:
            self.process_input(char)

    def process_input(self, char: str) -> None:
        """Insert ``char`` at the cursor; a backspace deletes the character before it."""
        if char == BACKSPACE:
            self._delete_character()
        elif ord(char) < 128 and len(self.content) < self.max_length:
            self.history.save_state(self.content)
            position = self.cursor.position
            self.content = self.content[:position] + char + self.content[position:]
            self.cursor.move_right()

    def _delete_character(self) -> None:
        position = self.cursor.position
        if self.content and position > 0:
            self.history.save_state(self.content)
            self.content = self.content[: position - 1] + self.content[position:]
            self.cursor.move_left()

    def undo(self) -> None:
        """Restore the previous non-empty content and put the cursor at its end."""
        previous = self.history.undo()
        if previous:
            self.content = previous
            self.cursor.position = len(previous)

    def clear(self) -> None:
        """Empty the input and move the cursor to the start."""
        self.content = ""
        self.cursor.position = 0

    def update(self, elapsed: float) -> None:
        """Advance the cursor's blink timer."""
        self.cursor.update(elapsed)