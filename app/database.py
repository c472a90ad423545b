# app/database.py
"""
Database connection, session management, and table creation.
Uses SQLAlchemy with an in-memory SQLite database by default, so every
registration and notification disappears when the process exits.
All models are auto-imported here so create_tables() creates every table in one call.
"""

import threading
from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.config import settings


def build_engine(url: str):
    """In-memory SQLite needs one shared connection, otherwise each session sees an empty DB."""
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )
    return create_engine(url, pool_pre_ping=True, echo=False)


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# Every session shares one SQLite connection, so only one may use it at a time
db_lock = threading.Lock()


def get_db():
    """FastAPI dependency — yields a DB session and closes it after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def exclusive(db):
    """
    Sole use of the shared connection for one unit of work.
    The session is closed before the lock is released, so build response
    data inside the block: instances are detached afterwards.
    """
    with db_lock:
        try:
            yield db
        finally:
            db.close()


def create_tables(bind=None):
    """
    Creates all DB tables on startup. Safe to call multiple times.
    Import all models here so SQLAlchemy knows about them.
    """
    from app.models.registration import Registration      # noqa
    from app.models.notification import Notification      # noqa

    Base.metadata.create_all(bind=bind or engine)
