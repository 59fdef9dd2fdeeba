from pathlib import Path

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+pysqlite:///{db_file.as_posix()}")
    monkeypatch.setenv("AUTO_CREATE_SCHEMA", "false")
    monkeypatch.setenv("AUTO_CREATE_ADMIN", "false")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    from app import models  # noqa: F401
    from app.core.config import clear_settings_cache
    from app.db.base import Base
    from app.db.session import get_engine, reset_engine

    clear_settings_cache()
    reset_engine()
    Base.metadata.create_all(bind=get_engine())

    yield get_engine()

    Base.metadata.drop_all(bind=get_engine())
    reset_engine()
    clear_settings_cache()


@pytest.fixture()
def db_session(database):
    from app.db.session import get_session_factory

    with get_session_factory()() as db:
        yield db


@pytest.fixture()
def app_client(database):
    from app.main import create_app

    app = create_app()
    with TestClient(app) as client:
        yield client


def create_admin(client: TestClient, email: str = "admin@example.com", name: str = "Admin") -> dict:
    response = client.post("/admins", json={"name": name, "email": email, "password": "secret"})
    assert response.status_code == 201, response.text
    return response.json()["admin"]


def create_volunteer(client: TestClient, email: str, name: str = "Volunteer", skills: list[str] | None = None) -> dict:
    response = client.post(
        "/volunteers",
        json={"name": name, "email": email, "contact": "+1 555 0100", "skills": skills or ["first aid"]},
    )
    assert response.status_code == 201, response.text
    return response.json()["volunteer"]
