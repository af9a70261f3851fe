"""Tests for the HTTP API."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from clipkeep.api.config import ServerConfig, get_server_config
from clipkeep.api.main import _exit_on_unhandled_error, create_app
from clipkeep.clip_store import StoreUnavailable
from clipkeep.mongodb import MongoDBClient, MongoDBConfig


def _create(client: TestClient, title: str = "A", content: str = "1") -> dict:
    response = client.post("/api/clips", json={"title": title, "content": content})
    assert response.status_code == 201
    return response.json()


# --- CRUD ---

def test_list_empty(client: TestClient):
    response = client.get("/api/clips")
    assert response.status_code == 200
    assert response.json() == []


def test_create_returns_clip_shape(client: TestClient):
    body = _create(client, "Greeting", "hello")

    assert set(body) == {"id", "title", "content", "createdAt"}
    assert ObjectId.is_valid(body["id"])
    assert body["title"] == "Greeting"
    assert body["content"] == "hello"
    assert body["createdAt"].startswith("2024-01-01T")


def test_create_missing_fields_is_bad_request(client: TestClient):
    response = client.post("/api/clips", json={"title": "only title"})
    assert response.status_code == 400
    assert response.json() == {"detail": "Title and content are required"}
    assert client.get("/api/clips").json() == []


def test_create_malformed_body_is_bad_request(client: TestClient):
    response = client.post("/api/clips", content=b"not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400


def test_update_clip(client: TestClient):
    created = _create(client)

    response = client.put(f"/api/clips/{created['id']}", json={"title": "B", "content": "2"})

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == created["id"]
    assert body["title"] == "B"
    assert body["content"] == "2"
    assert body["createdAt"] == created["createdAt"]


def test_update_unknown_clip_is_not_found(client: TestClient):
    response = client.put(f"/api/clips/{ObjectId()}", json={"title": "B", "content": "2"})
    assert response.status_code == 404
    assert response.json() == {"detail": "Clip not found"}


def test_update_empty_fields_is_bad_request(client: TestClient):
    created = _create(client)
    response = client.put(f"/api/clips/{created['id']}", json={"title": "", "content": "2"})
    assert response.status_code == 400


def test_delete_clip(client: TestClient):
    created = _create(client)

    response = client.delete(f"/api/clips/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Clip deleted successfully", "clip_id": created["id"]}

    assert client.get("/api/clips").json() == []
    assert client.delete(f"/api/clips/{created['id']}").status_code == 404


def test_end_to_end_flow(client: TestClient):
    created = _create(client, "A", "1")
    listed = client.get("/api/clips").json()
    assert [(c["title"], c["content"]) for c in listed] == [("A", "1")]

    client.put(f"/api/clips/{created['id']}", json={"title": "B", "content": "2"})
    listed = client.get("/api/clips").json()
    assert [(c["id"], c["title"], c["content"], c["createdAt"]) for c in listed] == [
        (created["id"], "B", "2", created["createdAt"])
    ]

    client.delete(f"/api/clips/{created['id']}")
    assert client.get("/api/clips").json() == []


def test_store_error_is_server_error(client: TestClient, repository):
    repository.error = ServerSelectionTimeoutError("no servers")

    response = client.get("/api/clips")
    assert response.status_code == 500
    assert response.json() == {"detail": "Database not connected"}


# --- Connection lifecycle ---

def test_unopened_client_fails_fast():
    mongodb_client = MongoDBClient(MongoDBConfig(connection_string="mongodb://localhost:27017"))
    app = create_app(mongodb_client=mongodb_client, server_config=ServerConfig())

    response = TestClient(app).get("/api/clips")

    assert response.status_code == 500
    assert response.json() == {"detail": "Database not connected"}


def test_missing_client_fails_fast():
    app = create_app(server_config=ServerConfig())

    response = TestClient(app).post("/api/clips", json={"title": "A", "content": "1"})

    assert response.status_code == 500


# --- Health ---

def test_health_reports_disconnected():
    app = create_app(server_config=ServerConfig())

    response = TestClient(app).get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["database"] == "disconnected"
    assert "timestamp" in body


# --- Startup ---

def test_startup_without_connection_string_fails(monkeypatch):
    monkeypatch.delenv("MONGODB_CONNECTION_STRING", raising=False)
    monkeypatch.delenv("MONGODB_URI", raising=False)
    app = create_app(server_config=ServerConfig())

    with pytest.raises(ValueError, match="MONGODB_CONNECTION_STRING"):
        with TestClient(app):
            pass


def test_startup_with_unreachable_database_fails(monkeypatch):
    monkeypatch.setenv("MONGODB_CONNECTION_STRING", "mongodb://localhost:27017")
    app = create_app(server_config=ServerConfig())

    with patch("clipkeep.mongodb.client.AsyncIOMotorClient") as motor_cls:
        motor_cls.return_value.admin.command = AsyncMock(side_effect=ServerSelectionTimeoutError("timed out"))

        with pytest.raises(StoreUnavailable):
            with TestClient(app):
                pass


def test_startup_opens_and_shutdown_closes_connection(monkeypatch):
    monkeypatch.setenv("MONGODB_CONNECTION_STRING", "mongodb://localhost:27017")
    app = create_app(server_config=ServerConfig())

    with patch("clipkeep.mongodb.client.AsyncIOMotorClient") as motor_cls:
        motor = motor_cls.return_value
        motor.admin.command = AsyncMock(return_value={"ok": 1})

        with TestClient(app) as client:
            assert client.get("/api/health").json()["database"] == "connected"

        motor.close.assert_called_once()
        assert app.state.mongodb_client.is_connected is False


def test_unhandled_loop_error_exits_process():
    with patch("clipkeep.api.main.os._exit") as exit_process:
        _exit_on_unhandled_error(MagicMock(), {"message": "Task exception was never retrieved"})

    exit_process.assert_called_once_with(1)


def test_log_level_comes_from_server_config():
    with patch("clipkeep.api.main.logging.basicConfig") as basic_config:
        create_app(server_config=ServerConfig(log_level="DEBUG"))

    assert basic_config.call_args.kwargs["level"] == "DEBUG"


def test_server_config_reads_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

    config = get_server_config()

    assert config.log_level == "WARNING"
    assert config.cors_origins == ["http://a.test", "http://b.test"]
