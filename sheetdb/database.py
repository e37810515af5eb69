"""A database of tables, each shown through a spreadsheet."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from sheetdb.query import QueryParser
from sheetdb.sheet import Cell, Header, Row, Spreadsheet
from sheetdb.table import Table

logger = logging.getLogger(__name__)


class DatabaseError(ValueError):
    """Raised when a query cannot be carried out."""


def parse_columns(columns: str) -> list[str]:
    """Split a comma separated list and strip all whitespace from each item."""
    if not columns:
        return []
    parts = columns.split(",")
    if columns.endswith(","):
        parts.pop()
    result = ["".join(part.split()) for part in parts]
    logger.debug("Parsed columns: %s", " ".join(result))
    return result


def _require(tokens: Mapping[str, str], key: str) -> str:
    try:
        return tokens[key]
    except KeyError:
        raise DatabaseError(f"Query missing '{key}' key.") from None


class Database:
    """Executes queries against named tables and their spreadsheets."""

    def __init__(self) -> None:
        self._tables: dict[str, Table] = {}
        self._spreadsheets: dict[str, Spreadsheet] = {}
        self._has_new_results = False
        self.last_table = ""
        self.last_query_results: dict[str, list[str]] = {}

    def has_results(self) -> bool:
        """Whether a SELECT has produced results."""
        return self._has_new_results

    def results(self) -> dict[str, list[str]]:
        """The results of the last query."""
        return self.last_query_results

    def table(self, name: str) -> Table:
        """Return the table called ``name``."""
        try:
            return self._tables[name]
        except KeyError:
            raise DatabaseError(f"Table '{name}' does not exist.") from None

    def spreadsheet(self, name: str) -> Spreadsheet:
        """Return the spreadsheet of the table called ``name``."""
        try:
            return self._spreadsheets[name]
        except KeyError:
            raise DatabaseError(f"Spreadsheet for table '{name}' does not exist.") from None

    def query(self, query_string: str) -> None:
        """Parse and execute one query."""
        tokens = QueryParser().parse(query_string)
        command = tokens.get("command", "")
        logger.debug("Executing command: %s", command)
        handlers = {
            "CREATE": self.create_table,
            "INSERT": self.insert_into_table,
            "SELECT": self.select_from_table,
            "DELETE": self.delete_table,
        }
        handler = handlers.get(command)
        if handler is None:
            raise DatabaseError(f"Invalid command: {command}")
        handler(tokens)

    def create_table(self, tokens: Mapping[str, str]) -> None:
        """Create a table and its spreadsheet from parsed tokens."""
        if "table" not in tokens or "columns" not in tokens:
            raise DatabaseError("CREATE query missing 'table' or 'columns' key.")
        name = tokens["table"]
        self.last_table = name
        columns = parse_columns(tokens["columns"])
        if name in self._tables:
            raise DatabaseError(f"Table '{name}' already exists.")
        self._tables[name] = Table(columns)
        sheet = Spreadsheet(0, len(columns))
        for column in columns:
            sheet.add_header(Header(column))
        self._spreadsheets[name] = sheet

    def insert_into_table(self, tokens: Mapping[str, str]) -> None:
        """Insert one row of values into a table."""
        name = _require(tokens, "table")
        columns = parse_columns(_require(tokens, "columns"))
        values = parse_columns(_require(tokens, "values"))
        if len(columns) != len(values):
            raise DatabaseError("Number of columns and values do not match.")
        table = self.table(name)
        sheet = self.spreadsheet(name)
        for column, value in zip(columns, values):
            table.insert(column, value)
        sheet.add_row(Row([Cell(value) for value in values]))

    def select_from_table(self, tokens: Mapping[str, str]) -> None:
        """Highlight the selected columns of a table's spreadsheet."""
        if not tokens.get("columns"):
            raise DatabaseError("SELECT query missing 'columns' key.")
        name = _require(tokens, "table")
        columns = parse_columns(tokens["columns"])
        table = self.table(name)
        sheet = self.spreadsheet(name)
        sheet.clear_highlights()
        for column in columns:
            if not table.has_column(column):
                raise DatabaseError(f"Column '{column}' does not exist in table '{name}'.")
            index = table.column_index(column)
            logger.debug("Highlighting column: %s at index %d", column, index)
            sheet.highlight_column(index)
        self._has_new_results = True

    def delete_table(self, tokens: Mapping[str, str]) -> None:
        """Remove a table and its spreadsheet."""
        name = _require(tokens, "table")
        if name not in self._tables:
            raise DatabaseError(f"Table '{name}' does not exist.")
        del self._tables[name]
        self._spreadsheets.pop(name, None)