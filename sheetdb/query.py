"""Tokenizing and parsing of the small SQL-like query language."""

from __future__ import annotations

import logging

from sheetdb.statemachine import StateMachine

logger = logging.getLogger(__name__)

COMMANDS = ("CREATE", "INSERT", "SELECT", "DELETE")

_GRAMMAR = {
    "START": {"SELECT", "DELETE", "INSERT", "CREATE"},
    "SELECT": {"*COLUMNS"},
    "*COLUMNS": {"FROM"},
    "FROM": {"*TABLE"},
    "*TABLE": {"END"},
    "WHERE": {"*CONDITION"},
    "*CONDITION": {"*CONDITION", "END"},
    "INSERT": {"INTO"},
    "INTO": {"*TABLE"},
    "VALUES": {"*VALUES"},
    "*VALUES": {"*VALUES", "END"},
    "CREATE": {"TABLE"},
    "TABLE": {"*TABLE"},
    "*CREATE_COLUMNS": {"*CREATE_COLUMNS", "END"},
    "DELETE": {"TABLE"},
}


class QueryError(ValueError):
    """Raised when a query cannot be parsed."""


def tokenize(query: str) -> list[str]:
    """Split a query on whitespace, making a trailing comma its own token."""
    tokens: list[str] = []
    for word in query.split():
        if word.endswith(","):
            tokens.extend((word[:-1], ","))
        else:
            tokens.append(word)
    return tokens


def _between_parens(text: str) -> str | None:
    """Return the text between the first ``(`` and the last ``)``, if both exist."""
    opening = text.find("(")
    closing = text.rfind(")")
    if opening == -1 or closing == -1:
        return None
    if closing > opening:
        return text[opening + 1 : closing]
    return text[opening + 1 :]


class QueryParser:
    """Turns a query string into a mapping of its parts."""

    def __init__(self) -> None:
        self._machine = StateMachine(_GRAMMAR)

    def parse(self, query: str) -> dict[str, str]:
        """Parse ``query`` into keys such as command, table, columns and values.

        Raises :class:`QueryError` for a query the grammar rejects, or a
        DELETE without a table name.
        """
        tokens = tokenize(query)
        if not self._machine.validate(tokens):
            raise QueryError("SQL query is invalid")

        parsed: dict[str, str] = {}
        section = ""
        columns = ""

        for token in tokens:
            command = parsed.get("command", "")
            if token in COMMANDS:
                parsed["command"] = token
                section = "command"
            elif token == "TABLE" and command in ("CREATE", "DELETE"):
                section = "table"
            elif token == "INTO" and command == "INSERT":
                section = "table"
            elif token == "VALUES" and command == "INSERT":
                section = "values"
            elif token == "FROM" and command == "SELECT":
                section = "table"
            elif section == "command" and command == "SELECT":
                columns += token + " "
            elif section == "table" and command in COMMANDS:
                parsed["table"] = token
                section = "columns" if command in ("INSERT", "CREATE") else ""
            elif section == "columns":
                columns += token + " "
            elif section == "values":
                previous = parsed.get("values", "")
                parsed["values"] = previous + (" " if previous else "") + token

        command = parsed.setdefault("command", "")

        if columns and command == "SELECT":
            parsed["columns"] = columns.rstrip(" ")
        elif columns:
            inner = _between_parens(columns)
            parsed["columns"] = columns if inner is None else inner

        if command == "INSERT":
            values = parsed.setdefault("values", "")
            if values:
                inner = _between_parens(values)
                if inner is not None:
                    parsed["values"] = inner

        if command == "DELETE" and "table" not in parsed:
            raise QueryError("DELETE query missing table name.")

        result = dict(sorted(parsed.items()))
        for key, value in result.items():
            logger.debug("key: %s, value: %s", key, value)
        return result