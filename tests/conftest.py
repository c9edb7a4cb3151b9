import os

# main.py builds a module-level app on import; keep it off the real database file
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app

JANE = {"name": "Jane", "email": "jane@x.com", "password": "secret1"}
BOB = {"name": "Bob", "email": "bob@x.com", "password": "hunter22"}

SERVICE_REQUEST = {
    "serviceName": "AC Repair",
    "customerName": "John Doe",
    "phone": "555-1234",
    "email": "john@acme.io",
    "companyName": "ABC Corp",
    "scheduledDateTime": "2024-01-15T10:00:00Z",
    "assignedTo": "Tech Smith",
}


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        SECRET_KEY="test-secret",
        ACCESS_TOKEN_EXPIRE_MINUTES=30,
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    yield app
    app.state.engine.dispose()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


def signup(client, user) -> dict:
    response = client.post("/api/auth/signup", json=user)
    assert response.status_code == 200, response.text
    return response.json()


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def jane(client) -> dict:
    """Signed-up user; returns the signup body plus ready-made headers."""
    body = signup(client, JANE)
    body["headers"] = auth_headers(body["token"])
    return body


@pytest.fixture
def bob(client) -> dict:
    body = signup(client, BOB)
    body["headers"] = auth_headers(body["token"])
    return body
