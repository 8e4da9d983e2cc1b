"""Database engine and session helpers.

This centralizes engine creation so both the app and tests can share the
same configuration. In-memory SQLite URLs share one connection across
threads so the executor-offloaded DAO calls all see the same database.
"""

import logging
import os
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base

logger = logging.getLogger(__name__)

MEMORY_URL = "sqlite:///:memory:"


def get_engine(database_url: Optional[str] = None) -> Engine:
    """Return a SQLAlchemy engine, creating the data dir as needed."""
    url = database_url or MEMORY_URL
    if url in (MEMORY_URL, "sqlite://"):
        return create_engine(
            url,
            echo=False,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    if url.startswith("sqlite:///"):
        db_location = url.replace("sqlite:///", "")
        directory = os.path.dirname(db_location)
        if directory:
            os.makedirs(directory, exist_ok=True)
    return create_engine(
        url, echo=False, future=True, connect_args={"check_same_thread": False}
    )


def sqlite_url(path: os.PathLike) -> str:
    """Build a SQLite URL for a database file."""
    return f"sqlite:///{os.fspath(path)}"


def init_db(engine: Engine) -> None:
    """Create tables if they don't exist."""
    Base.metadata.create_all(engine)
    logger.debug(f"Database schema ready: {engine.url}")


def create_session_factory(engine: Engine) -> sessionmaker:
    """Return a session factory bound to ``engine``."""
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
