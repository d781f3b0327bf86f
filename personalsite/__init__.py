"""Configuration, SQLite data access and WSGI middleware for a personal CV website."""

__version__ = "0.1.0"