"""Persistent storage for sleep nights."""

from sleeptracker.core.database.dao import SleepDatabaseDao, SqlSleepDatabaseDao
from sleeptracker.core.database.engine import get_engine, init_db, sqlite_url

__all__ = ["SleepDatabaseDao", "SqlSleepDatabaseDao", "get_engine", "init_db", "sqlite_url"]
