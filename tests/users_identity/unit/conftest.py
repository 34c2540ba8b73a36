"""Unit test fixtures: SQLite engine for the SQLAlchemy backend."""

from tests.shared.fixtures.sqlite import sqlite_engine, sqlite_session_maker

__all__ = [
    "sqlite_engine",
    "sqlite_session_maker",
]
