"""taskman: a small command-line task manager backed by SQLite."""

__version__ = "0.1.0"
