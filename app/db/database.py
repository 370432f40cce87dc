"""
app/db/database.py

SQLAlchemy engine / session wiring.

Only the repository layer imports from here — services and controllers
never touch a session directly.
"""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.logger import get_logger

logger = get_logger(__name__)

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    """
    Create an engine for ``database_url``.

    For file-backed SQLite URLs the parent directory is created first,
    since SQLite will not create it on its own.
    """
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(database_url, connect_args={"check_same_thread": False})
    else:
        engine = create_engine(database_url, pool_pre_ping=True)

    logger.info("Database engine created — backend=%s", url.get_backend_name())
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
