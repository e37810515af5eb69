[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sheetdb"
version = "0.1.0"
description = "A tiny SQL-like in-memory database shown as spreadsheets, with a falling-blocks game in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "sql", "spreadsheet", "query-parser", "state-machine", "tetris", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sheetdb = "sheetdb.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sheetdb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
