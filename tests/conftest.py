"""
Shared test fixtures: throwaway SQLite database, test client, PO payloads.
"""

import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# settings is read at import time, so the URL must be set first
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from backend.database import Base, get_db
from backend.main import app


TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_database():
    """Every test starts from empty PO tables."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """Client bound to the app with the test session override."""
    return TestClient(app)


@pytest.fixture
def db():
    """Session on the test database for checking what the routes stored."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def round_tube_po():
    """Customer PO for a round tube, 373 OD, 4.5 wall."""
    return {
        "po_number": "SS-2025-0001",
        "customer_name": "Mehta Infra",
        "date": "2025-10-03",
        "size": "373ODx4.5mm",
        "quantity": 10,
        "rate": 100,
    }


@pytest.fixture
def square_tube_po():
    """Customer PO for a square tube, 400x400, 12 wall."""
    return {
        "po_number": "SS-2025-0002",
        "customer_name": "Patel Structures",
        "date": "2025-11-14",
        "size": "400x400x12mm",
        "quantity": 5,
        "rate": 200,
    }
