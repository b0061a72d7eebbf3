"""Time-series charts drawn from JSON and SQLite data files."""

__version__ = "0.1.0"