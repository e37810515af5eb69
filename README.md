# sheetdb

A small in-memory database that understands a handful of SQL-like
statements and keeps every table as a spreadsheet of headers, rows and
cells. Selecting columns highlights them in the sheet. A falling-blocks
puzzle game that runs in the terminal comes along as a diversion.

## Installing

```
pip install .
```

Python 3.10 or later is needed; there are no third-party dependencies.
The game uses the standard library's `curses` module, so the command
line tool needs a system where `curses` is available (Linux, macOS and
other Unix-like systems).

## The query language

Four statements are understood. Keywords are upper case and tokens are
separated by whitespace.

```
CREATE TABLE people (name, age)
INSERT INTO people (name, age) VALUES (alice, 30)
SELECT name FROM people
DELETE TABLE people
```

- `CREATE TABLE` makes a table and an empty spreadsheet with one header
  per column. Creating a table that already exists is an error.
- `INSERT INTO` adds one row to the table's spreadsheet. The number of
  columns must match the number of values, and every column must belong
  to the table.
- `SELECT` clears earlier highlights and highlights the named columns of
  the table's spreadsheet. Naming a column that does not exist is an
  error.
- `DELETE TABLE` removes the table and its spreadsheet.

Queries that the grammar rejects raise `sheetdb.query.QueryError`.
Well-formed queries that refer to missing tables or columns, or whose
column and value counts differ, raise `sheetdb.database.DatabaseError`;
inserting into a column the table does not have raises `ValueError`.
Both error classes are subclasses of `ValueError`.

## Command line

```
sheetdb [FILE]
```

reads one query per line from `FILE`, or from standard input when no file
is given, and runs each one. Blank lines are skipped. After every query
the current spreadsheet is printed as aligned text, with the headers of
highlighted columns in square brackets. Errors are printed as
`Error: ...` and the session carries on.

The spreadsheet shown is the one of the table most recently created with
`CREATE TABLE`; a `SELECT` shows that sheet again, and a `DELETE` hides
it until the next `CREATE TABLE`.

A line holding only `/` starts the game in the terminal; quitting the
game returns to the query session.

## Using it from Python

```python
from sheetdb.database import Database

db = Database()
db.query("CREATE TABLE people (name, age)")
db.query("INSERT INTO people (name, age) VALUES (alice, 30)")
db.query("SELECT age FROM people")

sheet = db.spreadsheet("people")
print(sheet.header_name(1))        # age
print(sheet.row_count())           # 1
print(sheet.highlighted_columns)   # [1]
cells = sheet.render()             # header cells, then data cells, placed and styled
```

`sheetdb.app.DatabaseApp` wraps a database for line-by-line use:
`process_query()` runs one query and returns whether it succeeded, and
`run()` processes an iterable of lines.

Parsing can be used on its own:

```python
from sheetdb.query import QueryParser, tokenize

tokenize("SELECT a, b FROM t")        # ['SELECT', 'a', ',', 'b', 'FROM', 't']
QueryParser().parse("SELECT a, b FROM t")
# {'columns': 'a , b', 'command': 'SELECT', 'table': 't'}
```

`sheetdb.statemachine.StateMachine` is the transition table that decides
which token sequences are valid. `sheetdb.table.Table` stores the
inserted (column, value) entries, and `sheetdb.sheet` holds the
`Header`, `Cell`, `Row` and `Spreadsheet` classes.

`sheetdb.textinput.TextInput` is a single-line editor model with a
blinking `Cursor`, a length limit, backspace and undo through
`sheetdb.history.UndoStack`. It is a standalone component; the command
line tool reads plain lines and does not use it.

## The game

`sheetdb.blocks` holds the seven block shapes with their rotations and
colours and the field settings. `sheetdb.field.Field` is the 10 by 20
playing field that drops, moves, rotates and settles blocks, clears full
rows, keeps a queue of the next ten blocks, and starts over when a block
settles partly above the top. `sheetdb.game.Game` adds the start screen
and the timing that moves the block down every 0.2 seconds, four times
faster while down (or `s`) is held, and `Game.render()` returns the
rectangles of the current screen.

`sheetdb.game.run_tetris()` plays it in the terminal: Enter starts,
the arrow keys or `w`, `a`, `d` rotate and move, down or `s` drops
faster, and `q` quits. Terminals report no key releases, so each press
of down speeds up a single frame only.

## What it does not do

- Nothing is stored on disk; tables live only as long as the process.
- `WHERE` clauses are accepted by the grammar but not applied, and
  `SELECT` highlights columns rather than returning rows:
  `Database.results()` stays empty.
- There is no graphical window; the spreadsheet is printed as text and
  the game draws with `curses`.

## Running the tests

```
pip install .[test]
pytest
```