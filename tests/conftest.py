"""
Shared fixtures

Tests run against a throwaway SQLite file. DATABASE_URL must be set before
any apps.* module is imported, because the engine is built at import time.
"""
import os
import tempfile

_TEST_DB_DIR = tempfile.mkdtemp(prefix="portfolio-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DB_DIR, 'portfolio.db')}"
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient

from apps.shared.database import Base, SessionLocal, engine
from app.main import app


@pytest.fixture(autouse=True)
def tables():
    """Fresh tables for every test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
