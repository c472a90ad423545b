"""Shared fixtures: a fresh in-memory database per test."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from sqlalchemy.orm import sessionmaker
from app.database import build_engine, create_tables


@pytest.fixture
def session_factory():
    engine = build_engine("sqlite://")
    create_tables(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()
