from datetime import UTC, datetime, timedelta
from uuid import uuid4

from fastapi.testclient import TestClient

from tests.conftest import create_admin


def _event_payload(admin_id: str, **overrides) -> dict:
    payload = {
        "adminId": admin_id,
        "title": "Park clean-up",
        "description": "Litter picking along the river path.",
        "dateTime": "2026-11-01T09:30:00",
        "location": "Riverside park",
        "organizerId": "organizer-1",
    }
    payload.update(overrides)
    return payload


def test_create_event_for_existing_admin(app_client: TestClient):
    admin = create_admin(app_client)
    response = app_client.post("/events", json=_event_payload(admin["id"]))
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["message"] == "Event created successfully"
    event = body["event"]
    assert event["adminId"] == admin["id"]
    assert event["organizerId"] == "organizer-1"
    assert event["dateTime"].startswith("2026-11-01T09:30:00")
    assert event["createdAt"]

    listing = app_client.get("/events")
    assert listing.status_code == 200
    assert listing.json() == {"message": "Events retrieved successfully", "events": [event]}


def test_create_event_unknown_admin(app_client: TestClient):
    response = app_client.post("/events", json=_event_payload(str(uuid4())))
    assert response.status_code == 404
    assert response.json() == {"error": "Admin with the provided ID does not exist."}
    assert app_client.get("/events").json()["events"] == []


def test_create_event_missing_field(app_client: TestClient):
    admin = create_admin(app_client)
    payload = _event_payload(admin["id"])
    del payload["location"]
    response = app_client.post("/events", json=payload)
    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid input: Ensure 'adminId', 'title'")


def test_create_event_invalid_datetime(app_client: TestClient):
    admin = create_admin(app_client)
    response = app_client.post("/events", json=_event_payload(admin["id"], dateTime="next tuesday"))
    assert response.status_code == 400


def test_organizer_id_is_not_checked(app_client: TestClient):
    admin = create_admin(app_client)
    response = app_client.post("/events", json=_event_payload(admin["id"], organizerId=str(uuid4())))
    assert response.status_code == 201


def test_list_events_empty(app_client: TestClient):
    response = app_client.get("/events")
    assert response.status_code == 200
    assert response.json() == {"message": "Events retrieved successfully", "events": []}


def test_event_datetime_is_stored_as_utc_instant(app_client: TestClient):
    admin = create_admin(app_client)
    response = app_client.post("/events", json=_event_payload(admin["id"], dateTime="2026-11-01T09:30:00+02:00"))
    assert response.status_code == 201, response.text
    event = response.json()["event"]

    expected = datetime(2026, 11, 1, 7, 30, tzinfo=UTC)
    assert datetime.fromisoformat(event["dateTime"]) == expected
    assert datetime.fromisoformat(event["createdAt"]).utcoffset() == timedelta(0)

    listed = app_client.get("/events").json()["events"][0]
    assert datetime.fromisoformat(listed["dateTime"]) == expected


def test_naive_event_datetime_is_taken_as_utc(app_client: TestClient):
    admin = create_admin(app_client)
    response = app_client.post("/events", json=_event_payload(admin["id"]))
    assert response.status_code == 201, response.text
    assert datetime.fromisoformat(response.json()["event"]["dateTime"]) == datetime(2026, 11, 1, 9, 30, tzinfo=UTC)
