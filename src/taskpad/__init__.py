"""taskpad: local SQLite task list with duplicate-safe import from a remote collection."""

__version__ = "0.1.0"
