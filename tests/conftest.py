"""
Shared pytest fixtures — in-memory SQLite + FastAPI TestClient.
"""
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from compliance.auth import AccessGate, get_access_gate
from compliance.config import Settings
from compliance.database import Base, get_db
from compliance import models  # noqa: F401  — register models
from compliance.dependencies import get_classifier
from compliance.main import app
from compliance.pipeline.due_dates import DueDateClassifier

TODAY = date(2025, 1, 15)
ACCESS_CODE = "demo-123"

# StaticPool ensures all connections share the same in-memory database
_ENGINE = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
_Session = sessionmaker(autocommit=False, autoflush=False, bind=_ENGINE)


@pytest.fixture(autouse=True)
def _reset_tables():
    Base.metadata.create_all(bind=_ENGINE)
    yield
    Base.metadata.drop_all(bind=_ENGINE)


@pytest.fixture()
def db():
    session = _Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def classifier():
    return DueDateClassifier(anniversary_month=8, clock=lambda: TODAY)


@pytest.fixture()
def client(db, classifier):
    def _override():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = _override
    app.dependency_overrides[get_classifier] = lambda: classifier
    app.dependency_overrides[get_access_gate] = lambda: AccessGate(
        Settings(ACCESS_CODE=ACCESS_CODE, ENVIRONMENT="test")
    )
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def auth_client(client):
    resp = client.post("/api/auth/login", json={"accessCode": ACCESS_CODE})
    assert resp.status_code == 200
    return client
