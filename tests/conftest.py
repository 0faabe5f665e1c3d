"""
Shared test fixtures.

The database-backed record store runs against SQLite so tests need
no database server. Each test gets fresh tables and a session that
rolls back afterwards.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from payment_ledger.api.dependencies import get_ledger
from payment_ledger.logging_config import reset_logging
from payment_ledger.main import app
from payment_ledger.models import Base
from payment_ledger.services.ledger_engine import LedgerEngine


TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def plain_logging():
    """Let log records reach pytest's caplog handler."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def db_session():
    """Provide a database session on freshly created tables."""
    Base.metadata.create_all(bind=engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def ledger():
    return LedgerEngine()


@pytest.fixture
def client(ledger):
    """
    Provide a test client bound to a fresh ledger.

    The get_ledger dependency is overridden so each test starts
    from an empty ledger instead of the process-wide one.
    """
    app.dependency_overrides[get_ledger] = lambda: ledger
    yield TestClient(app)
    app.dependency_overrides.clear()
