"""An in-memory SQL-like database shown as spreadsheets, with a terminal block-dropping game."""

__version__ = "0.1.0"