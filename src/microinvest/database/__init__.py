"""Database layer for microinvest application."""

from microinvest.database.base import Database
from microinvest.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
