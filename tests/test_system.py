import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from tests.conftest import create_admin, create_volunteer


def test_health_endpoint(app_client: TestClient):
    response = app_client.get("/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload.get("status") == "ok"
    assert isinstance(payload.get("version"), str)


def test_system_info_counts_records(app_client: TestClient):
    create_admin(app_client)
    create_volunteer(app_client, "v@example.com")

    response = app_client.get("/system/info")
    assert response.status_code == 200
    payload = response.json()
    assert isinstance(payload.get("app_name"), str)
    assert payload["records"] == {"admins": 1, "volunteers": 1, "events": 0, "registrations": 0, "feedbacks": 0}


def test_storage_failure_returns_generic_500(app_client: TestClient, monkeypatch):
    from sqlalchemy.orm import Session

    def broken_scalars(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(Session, "scalars", broken_scalars)

    response = app_client.get("/events")
    assert response.status_code == 500
    assert response.json() == {"error": "Server error occurred while retrieving events."}


@pytest.fixture()
def bootstrap_client(database, monkeypatch: pytest.MonkeyPatch):
    from app.core.config import clear_settings_cache
    from app.main import create_app

    monkeypatch.setenv("AUTO_CREATE_ADMIN", "true")
    monkeypatch.setenv("BOOTSTRAP_ADMIN_EMAIL", "root@example.com")
    clear_settings_cache()

    with TestClient(create_app()) as client:
        yield client


def test_bootstrap_admin_created_on_startup(bootstrap_client: TestClient):
    response = bootstrap_client.post("/admins", json={"name": "R", "email": "root@example.com", "password": "p"})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid input: Admin with the same email already exists."
