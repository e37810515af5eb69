import pytest

from sheetdb.sheet import (
    BLACK,
    BLUE,
    CELL_FILL,
    CELL_HEIGHT,
    CELL_WIDTH,
    HIGHLIGHT_FILL,
    Cell,
    Header,
    Row,
    Spreadsheet,
)


def test_cell_text_follows_value():
    cell = Cell("hello")
    assert cell.text == "hello"
    assert cell.value == "hello"
    assert cell.fill_color == CELL_FILL
    assert cell.outline_color == BLACK


def test_row_cell_access():
    row = Row()
    row.add_cell(Cell("a"))
    row.add_cell(Cell("b"))
    assert row.cell(1).value == "b"
    assert len(row) == 2
    with pytest.raises(IndexError):
        row.cell(2)


def test_grid_positions():
    sheet = Spreadsheet(2, 3)
    assert len(sheet.grid) == 2
    assert all(len(line) == 3 for line in sheet.grid)
    cell = sheet.grid[1][2]
    assert cell.x == 2 * CELL_WIDTH
    assert cell.y == 1 * CELL_HEIGHT
    assert cell.width == CELL_WIDTH


def test_from_grid_sets_text():
    data = [["a", "b"], ["c", "d"]]
    sheet = Spreadsheet.from_grid(data)
    assert [[c.text for c in line] for line in sheet.grid] == data


def test_from_grid_empty_raises():
    with pytest.raises(ValueError):
        Spreadsheet.from_grid([])


def test_headers_and_rows():
    sheet = Spreadsheet(0, 2)
    sheet.add_header(Header("name"))
    sheet.add_header(Header("age"))
    sheet.add_row(Row([Cell("ann"), Cell("30")]))
    assert sheet.column_count() == 2
    assert sheet.row_count() == 1
    assert sheet.header_name(1) == "age"
    assert sheet.row(0).cell(0).value == "ann"
    with pytest.raises(IndexError):
        sheet.header_name(2)
    with pytest.raises(IndexError):
        sheet.row(1)


def test_load_replaces_content():
    sheet = Spreadsheet(0, 0)
    sheet.add_header(Header("old"))
    sheet.load([["x", "y"], ["1", "2"], ["3", "4"]])
    assert [h.name for h in sheet.headers] == ["x", "y"]
    assert sheet.row_count() == 2
    assert sheet.row(1).cell(0).value == "3"


def test_load_empty_keeps_content():
    sheet = Spreadsheet(0, 0)
    sheet.add_header(Header("keep"))
    sheet.load([])
    assert sheet.header_name(0) == "keep"


def test_highlight_column_bounds_and_grid():
    sheet = Spreadsheet(2, 2)
    sheet.highlight_column(1)
    assert sheet.highlighted_columns == [1]
    assert all(line[1].outline_color == BLUE for line in sheet.grid)
    assert all(line[0].outline_color == BLACK for line in sheet.grid)
    with pytest.raises(IndexError):
        sheet.highlight_column(2)


def test_clear_highlights():
    sheet = Spreadsheet(1, 2)
    sheet.highlight_column(0)
    sheet.highlight_row(0)
    sheet.clear_highlights()
    assert sheet.highlighted_columns == []
    assert sheet.highlighted_rows == []


def test_render_places_and_styles_cells():
    sheet = Spreadsheet(0, 2)
    sheet.load([["a", "b"], ["1", "2"]])
    sheet.set_offset(10, 20)
    sheet.highlight_column(1)
    drawn = sheet.render()
    assert [c.text for c in drawn] == ["a", "b", "1", "2"]
    header_b = drawn[1]
    assert (header_b.x, header_b.y) == (10 + CELL_WIDTH, 20)
    assert header_b.fill_color == HIGHLIGHT_FILL
    assert header_b.outline_color == BLUE
    body_1 = drawn[2]
    assert (body_1.x, body_1.y) == (10, 20 + CELL_HEIGHT)
    assert body_1.outline_color == BLACK
    assert body_1.fill_color == CELL_FILL


def test_render_does_not_change_stored_cells():
    sheet = Spreadsheet(0, 1)
    sheet.load([["h"], ["v"]])
    sheet.highlight_column(0)
    sheet.render()
    assert sheet.row(0).cell(0).fill_color == CELL_FILL