"""Test fixtures for schemagen tests."""

from .fake_db import FakeConnection, FakeCursor, mysql_column, postgres_column

__all__ = [
    "FakeConnection",
    "FakeCursor",
    "mysql_column",
    "postgres_column",
]
