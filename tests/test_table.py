import pytest

from sheetdb.table import Table


@pytest.fixture
def table():
    return Table(["name", "age", "city"])


def test_has_column(table):
    assert table.has_column("age") is True
    assert table.has_column("height") is False


def test_column_index_matches_declaration_order(table):
    assert [table.column_index(c) for c in table.columns] == [0, 1, 2]


def test_column_index_of_missing_column_raises(table):
    with pytest.raises(ValueError, match="height"):
        table.column_index("height")


def test_insert_into_unknown_column_raises(table):
    with pytest.raises(ValueError, match="Invalid column name: height"):
        table.insert("height", "180")
    assert table.rows() == []


def test_rows_are_ordered_by_column_then_insertion(table):
    table.insert("name", "bob")
    table.insert("age", "42")
    table.insert("name", "amy")
    table.insert("city", "paris")
    assert table.rows() == [
        {"age": "42"},
        {"city": "paris"},
        {"name": "bob"},
        {"name": "amy"},
    ]


def test_columns_returns_a_copy(table):
    columns = table.columns
    columns.append("extra")
    assert table.columns == ["name", "age", "city"]
    assert table.has_column("extra") is False


def test_str_lists_entries(table):
    table.insert("name", "bob")
    table.insert("age", "42")
    assert str(table).splitlines() == ["age: 42", "name: bob"]