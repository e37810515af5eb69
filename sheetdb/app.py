"""Line-oriented front end: type queries, see the current table's spreadsheet."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import TextIO

from sheetdb.database import Database
from sheetdb.game import run_tetris
from sheetdb.sheet import Spreadsheet

QUERY_BOX_X = 50
QUERY_BOX_Y = 50
QUERY_BOX_HEIGHT = 40
SHEET_GAP = 10
GAME_COMMAND = "/"


def _format_sheet(sheet: Spreadsheet) -> str:
    """Lay out a spreadsheet as aligned text; highlighted headers are bracketed."""
    highlighted = set(sheet.highlighted_columns)
    headers = [
        f"[{header.name}]" if index in highlighted else header.name
        for index, header in enumerate(sheet.headers)
    ]
    rows = [[cell.value for cell in row.cells] for row in sheet.rows]
    column_total = max([len(headers), *(len(row) for row in rows)], default=0)
    widths = [0] * column_total
    for line in [headers, *rows]:
        for index, text in enumerate(line):
            widths[index] = max(widths[index], len(text))

    def _line(items: list[str]) -> str:
        return " | ".join(text.ljust(widths[i]) for i, text in enumerate(items)).rstrip()

    lines = [_line(headers)]
    if headers:
        lines.append("-+-".join("-" * width for width in widths))
    lines.extend(_line(row) for row in rows)
    return "\n".join(lines)


class DatabaseApp:
    """Runs queries against a database and shows the current spreadsheet."""

    def __init__(self, database: Database | None = None, output: TextIO | None = None) -> None:
        self.database = database if database is not None else Database()
        self.output = output if output is not None else sys.stdout
        self.current_table = ""
        self.current_sheet: Spreadsheet | None = None

    def _write(self, text: str) -> None:
        print(text, file=self.output)

    def process_query(self, query: str) -> bool:
        """Execute ``query``; report any error to the output and return whether it succeeded."""
        try:
            self.database.query(query)
            if "CREATE TABLE" in query:
                start = query.find("TABLE") + 6
                end = query.find(" ", start)
                self.current_table = query[start:] if end == -1 else query[start:end]
                self.current_sheet = self.database.spreadsheet(self.current_table)
            if "SELECT" in query:
                self.current_sheet = self.database.spreadsheet(self.current_table)
            if "DELETE" in query:
                self.current_sheet = None
        except (ValueError, IndexError) as error:
            self._write(f"Error: {error}")
            return False
        return True

    def show(self) -> None:
        """Write the current spreadsheet, if there is one, to the output."""
        if self.current_sheet is None:
            return
        self.current_sheet.set_offset(QUERY_BOX_X, QUERY_BOX_Y + QUERY_BOX_HEIGHT + SHEET_GAP)
        self._write(_format_sheet(self.current_sheet))

    def run(self, lines: Iterable[str] | None = None) -> None:
        """Process each line as a query; a line holding only ``/`` starts the game."""
        source = sys.stdin if lines is None else lines
        for raw in source:
            query = raw.rstrip("\r\n")
            if not query.strip():
                continue
            if query.strip() == GAME_COMMAND:
                try:
                    run_tetris()
                except Exception as error:  # the game must never end the session
                    self._write(f"Error: {error}")
                continue
            self.process_query(query)
            self.show()


def main(argv: list[str] | None = None) -> int:
    """Read queries from a file, or from standard input, and run them."""
    parser = argparse.ArgumentParser(prog="sheetdb", description="Run table queries.")
    parser.add_argument("file", nargs="?", help="file of queries, one per line")
    args = parser.parse_args(argv)
    app = DatabaseApp()
    if args.file:
        with open(args.file, encoding="utf-8") as handle:
            app.run(handle)
    else:
        app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())