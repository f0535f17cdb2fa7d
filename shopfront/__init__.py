"""Product catalogue with SQLite storage and purchase use cases."""

__version__ = "0.1.0"