import logging
import os
import uuid

# Settings are read once at import time; point them at a throwaway database first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from pomodoro.core.database import SessionLocal, engine
from pomodoro.core.security import create_access_token
from pomodoro.models import Base


@pytest.fixture(autouse=True)
def database():
    """Create all tables before each test and drop them afterwards."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def configure_logging_for_tests(caplog):
    """Let caplog see records from the service loggers."""
    caplog.set_level(logging.DEBUG)
    yield


@pytest.fixture
def db():
    """A database session independent of the ones used by requests."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user_a():
    return uuid.uuid4()


@pytest.fixture
def user_b():
    return uuid.uuid4()


@pytest.fixture
def client():
    from pomodoro.main import app
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Build an Authorization header for a user id."""
    def _headers(user_id):
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}
    return _headers
