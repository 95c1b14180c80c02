"""Shared fixtures for the bus feedback service tests."""

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.core.database import Database
from app.main import create_app
from app.repository import FeedbackRepository


@pytest.fixture
def database():
    """A gateway over a private in-memory SQLite database."""

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db = Database(engine, database_name="feedback_test")
    db.create_schema()
    yield db
    db.dispose()

@pytest.fixture
def repository(database):
    return FeedbackRepository(database)

@pytest.fixture
def app(database):
    return create_app(database)

@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client

@pytest.fixture
def valid_payload() -> Dict[str, Any]:
    return {
        "busNumber": "XYZ-123",
        "busLine": "101",
        "overallRating": 4,
        "safetyRating": 5,
    }

