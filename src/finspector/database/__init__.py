"""Database layer for finspector application."""

from finspector.database.base import Database
from finspector.database.factories import create_sqlite_database, create_memory_database

__all__ = ["Database", "create_sqlite_database", "create_memory_database"]
