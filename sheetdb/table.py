"""In-memory table storage."""

from __future__ import annotations

import bisect
from collections.abc import Iterable


class Table:
    """A table with named columns holding (column, value) entries.

    Entries are kept ordered by column name; entries for the same column
    keep the order in which they were inserted.
    """

    def __init__(self, columns: Iterable[str]) -> None:
        self._columns = list(columns)
        self._entries: list[tuple[str, str]] = []

    @property
    def columns(self) -> list[str]:
        """The column names, in declaration order."""
        return list(self._columns)

    def has_column(self, column: str) -> bool:
        """Return whether the table declares ``column``."""
        return column in self._columns

    def insert(self, column: str, value: str) -> None:
        """Store ``value`` under ``column``; raise ValueError for an unknown column."""
        if not self.has_column(column):
            raise ValueError(f"Invalid column name: {column}")
        keys = [key for key, _ in self._entries]
        position = bisect.bisect_right(keys, column)
        self._entries.insert(position, (column, value))

    def column_index(self, column: str) -> int:
        """Return the position of ``column``; raise ValueError if it does not exist."""
        try:
            return self._columns.index(column)
        except ValueError:
            raise ValueError(f"Column '{column}' does not exist.") from None

    def rows(self) -> list[dict[str, str]]:
        """Return every stored entry as a one-item mapping."""
        return [{column: value} for column, value in self._entries]

    def __str__(self) -> str:
        return "\n".join(f"{column}: {value}" for column, value in self._entries)