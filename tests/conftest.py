"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import database
from database.models import Base
from database.repository import HiringRepository
from tests import TEST_DB_URL


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def db_engine():
    """
    Engine bound to a fresh schema, also installed as the global SessionLocal bind
    so hiring_uow() sees the same database.
    """
    if TEST_DB_URL.startswith("sqlite"):
        engine = database.configure_engine(
            TEST_DB_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = database.configure_engine(TEST_DB_URL)

    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    session = sessionmaker(bind=db_engine, autoflush=False)()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def hiring_repo(db_session):
    """HiringRepository on a plain session; call db_session.commit() to publish rows."""
    return HiringRepository(db_session)
