import pytest

from sheetdb.database import Database, DatabaseError, parse_columns
from sheetdb.query import QueryError


@pytest.fixture
def db():
    database = Database()
    database.query("CREATE TABLE people (name, age)")
    return database


def test_parse_columns_strips_whitespace():
    assert parse_columns("a , b,c") == ["a", "b", "c"]
    assert parse_columns("") == []
    assert parse_columns("a,") == ["a"]
    assert parse_columns("a,,b") == ["a", "", "b"]


def test_create_builds_table_and_sheet(db):
    assert db.table("people").columns == ["name", "age"]
    sheet = db.spreadsheet("people")
    assert [h.name for h in sheet.headers] == ["name", "age"]
    assert db.last_table == "people"


def test_create_duplicate_raises(db):
    with pytest.raises(DatabaseError):
        db.query("CREATE TABLE people (x)")


def test_insert_adds_row(db):
    db.query("INSERT INTO people (name, age) VALUES (ann, 30)")
    sheet = db.spreadsheet("people")
    assert sheet.row_count() == 1
    assert [c.value for c in sheet.row(0).cells] == ["ann", "30"]
    assert db.table("people").rows() == [{"age": "30"}, {"name": "ann"}]


def test_insert_mismatch_raises(db):
    with pytest.raises(DatabaseError):
        db.query("INSERT INTO people (name, age) VALUES (ann)")
    assert db.spreadsheet("people").row_count() == 0


def test_insert_unknown_table_raises(db):
    with pytest.raises(DatabaseError):
        db.query("INSERT INTO nobody (name) VALUES (ann)")


def test_select_highlights_columns(db):
    assert not db.has_results()
    db.query("SELECT age FROM people")
    assert db.has_results()
    assert db.spreadsheet("people").highlighted_columns == [1]


def test_select_replaces_previous_highlights(db):
    db.query("SELECT age FROM people")
    db.query("SELECT name FROM people")
    assert db.spreadsheet("people").highlighted_columns == [0]


def test_select_unknown_column_raises(db):
    with pytest.raises(ValueError):
        db.query("SELECT height FROM people")


def test_delete_removes_table(db):
    db.query("DELETE TABLE people")
    with pytest.raises(DatabaseError):
        db.table("people")
    with pytest.raises(DatabaseError):
        db.spreadsheet("people")


def test_delete_missing_table_raises(db):
    with pytest.raises(DatabaseError):
        db.query("DELETE TABLE ghosts")


def test_empty_query_is_invalid_command():
    with pytest.raises(DatabaseError):
        Database().query("")


def test_invalid_query_raises_query_error():
    with pytest.raises(QueryError):
        Database().query("DROP TABLE people")


def test_results_start_empty(db):
    assert db.results() == {}