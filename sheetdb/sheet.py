"""Spreadsheet model: headers, cells, rows and the grid that displays a table."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
BLUE: Color = (0, 0, 255)
CELL_FILL: Color = (255, 255, 194)
HIGHLIGHT_FILL: Color = (200, 200, 255)

CELL_WIDTH = 200
CELL_HEIGHT = 60.0


@dataclass
class Header:
    """The name shown at the top of a column."""

    name: str = ""


@dataclass
class Cell:
    """A single cell: its stored value, displayed text, geometry and style."""

    value: str = ""
    text: str | None = None
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    fill_color: Color = CELL_FILL
    outline_color: Color = BLACK
    outline_thickness: float = 1.0

    def __post_init__(self) -> None:
        if self.text is None:
            self.text = self.value


@dataclass
class Row:
    """An ordered collection of cells."""

    cells: list[Cell] = field(default_factory=list)

    def add_cell(self, cell: Cell) -> None:
        """Append ``cell`` to the row."""
        self.cells.append(cell)

    def cell(self, index: int) -> Cell:
        """Return the cell at ``index``; raise IndexError when there is none."""
        if not 0 <= index < len(self.cells):
            raise IndexError("Invalid column index.")
        return self.cells[index]

    def __len__(self) -> int:
        return len(self.cells)


def _styled(cell: Cell, highlighted: bool) -> Cell:
    if highlighted:
        return replace(cell, outline_color=BLUE, outline_thickness=2.0, fill_color=HIGHLIGHT_FILL)
    return replace(cell, outline_color=BLACK, outline_thickness=1.0)


class Spreadsheet:
    """A grid of cells with headers, data rows and column highlighting."""

    def __init__(self, rows: int, columns: int) -> None:
        self._rows = rows
        self._columns = columns
        self.cell_width = CELL_WIDTH
        self.cell_height = CELL_HEIGHT
        self.offset: tuple[float, float] = (0.0, 0.0)
        self.headers: list[Header] = []
        self.rows: list[Row] = []
        self.highlighted_rows: list[int] = []
        self.highlighted_columns: list[int] = []
        self.grid: list[list[Cell]] = [
            [
                Cell(
                    x=j * self.cell_width,
                    y=i * self.cell_height,
                    width=self.cell_width,
                    height=self.cell_height,
                )
                for j in range(columns)
            ]
            for i in range(rows)
        ]

    @classmethod
    def from_grid(cls, data: Sequence[Sequence[str]]) -> Spreadsheet:
        """Build a sheet sized to ``data`` whose grid cells show its text."""
        if not data:
            raise ValueError("grid data must have at least one row")
        sheet = cls(len(data), len(data[0]))
        for i, line in enumerate(data):
            for j, text in enumerate(line[: sheet._columns]):
                sheet.set_cell_text(i, j, text)
        return sheet

    def add_header(self, header: Header) -> None:
        """Append a column header."""
        self.headers.append(header)

    def add_row(self, row: Row) -> None:
        """Append a data row."""
        self.rows.append(row)

    def row(self, index: int) -> Row:
        """Return the data row at ``index``; raise IndexError when there is none."""
        if not 0 <= index < len(self.rows):
            raise IndexError("Row index out of range")
        return self.rows[index]

    def row_count(self) -> int:
        """Number of data rows."""
        return len(self.rows)

    def column_count(self) -> int:
        """Number of headers."""
        return len(self.headers)

    def header_name(self, index: int) -> str:
        """Return the name of the header at ``index``."""
        if not 0 <= index < len(self.headers):
            raise IndexError("Column index out of range")
        return self.headers[index].name

    def set_cell_text(self, row: int, column: int, text: str) -> None:
        """Set the displayed text of a grid cell."""
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            raise IndexError("Cell position out of range")
        self.grid[row][column].text = text

    def load(self, data: Iterable[Sequence[str]]) -> None:
        """Replace headers and rows: the first line names headers, the rest are rows."""
        lines = list(data)
        if not lines:
            return
        self.headers = [Header(name) for name in lines[0]]
        self.rows = [Row([Cell(value) for value in line]) for line in lines[1:]]

    def set_offset(self, x: float, y: float) -> None:
        """Set where the sheet is drawn."""
        self.offset = (x, y)

    def highlight_row(self, index: int) -> None:
        """Mark a row as highlighted."""
        self.highlighted_rows.append(index)

    def highlight_column(self, index: int) -> None:
        """Mark a column as highlighted; raise IndexError beyond the grid's columns."""
        if not 0 <= index < self._columns:
            raise IndexError("Column index out of range for highlighting.")
        self.highlighted_columns.append(index)
        for line in self.grid:
            line[index].outline_color = BLUE
            line[index].outline_thickness = 2.0

    def clear_highlights(self) -> None:
        """Forget every highlighted row and column."""
        self.highlighted_rows.clear()
        self.highlighted_columns.clear()

    def render(self) -> list[Cell]:
        """Return the header cells followed by the data cells, placed and styled."""
        left, top = self.offset
        drawn: list[Cell] = []
        for col, header in enumerate(self.headers):
            cell = Cell(
                header.name,
                x=left + col * self.cell_width,
                y=top,
                width=self.cell_width,
                height=self.cell_height,
            )
            drawn.append(_styled(cell, col in self.highlighted_columns))
        for row_number, row in enumerate(self.rows, start=1):
            for col, source in enumerate(row.cells):
                cell = replace(
                    source,
                    x=left + col * self.cell_width,
                    y=top + row_number * self.cell_height,
                    width=self.cell_width,
                    height=self.cell_height,
                )
                drawn.append(_styled(cell, col in self.highlighted_columns))
        return drawn