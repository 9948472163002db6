# tests/test_app.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError

from blogapp.main import create_app


def test_rest_routes_registered(client) -> None:
    paths = client.app.openapi()["paths"]
    assert "post" in paths["/api/auth/register"]
    assert "post" in paths["/api/auth/login"]
    assert "get" in paths["/api/auth/me"]
    assert "post" in paths["/api/upload"]
    assert {"get", "post"} <= set(paths["/api/posts"])
    assert {"get", "put", "delete"} <= set(paths["/api/posts/{post_id}"])
    assert "post" in paths["/api/posts/{post_id}/comments"]


def test_healthz(client) -> None:
    assert client.get("/healthz").json() == {"status": "ok"}


def test_client_page_is_served(client) -> None:
    resp = client.get("/")
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert "/api/posts" in resp.text


def test_malformed_json_is_a_validation_error(client) -> None:
    resp = client.post(
        "/api/auth/login",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert "message" in resp.json()


def test_unreachable_database_aborts_startup(settings) -> None:
    broken = settings.model_copy(update={"DATABASE_URL": "sqlite:////nonexistent/dir/blog.db"})
    app = create_app(broken)

    with pytest.raises(SQLAlchemyError):
        with TestClient(app):
            pass


def test_upload_dir_is_created_on_startup_not_on_build(settings, tmp_path) -> None:
    app = create_app(settings)
    assert not (tmp_path / "uploads").exists()

    with TestClient(app):
        assert (tmp_path / "uploads").is_dir()
