# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from blogapp.core.config import Settings
from blogapp.main import create_app


@pytest.fixture
def settings(tmp_path):
    """Isolated settings: in-memory SQLite and a temporary upload directory."""
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_SECRET="test-secret-0123456789abcdef0123456789",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(settings):
    # context manager runs the startup hook, which creates the tables
    with TestClient(create_app(settings)) as c:
        yield c


def register(client, username="alice", email="alice@x.com", password="secret1"):
    return client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
    )


def login(client, email="alice@x.com", password="secret1"):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client):
    register(client, "alice", "alice@x.com", "secret1")
    return login(client, "alice@x.com", "secret1").json()


@pytest.fixture
def bob(client):
    register(client, "bob", "bob@x.com", "hunter22")
    return login(client, "bob@x.com", "hunter22").json()


@pytest.fixture
def alice_post(client, alice):
    resp = client.post(
        "/api/posts",
        json={"title": "Hello", "content": "First post"},
        headers=bearer(alice["token"]),
    )
    assert resp.status_code == 201
    return resp.json()
