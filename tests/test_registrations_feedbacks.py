from datetime import datetime, timedelta

from fastapi.testclient import TestClient


def test_create_registration_and_list(app_client: TestClient):
    response = app_client.post(
        "/registrations",
        json={"eventId": "any-event", "volunteerId": "any-volunteer", "status": "Registered"},
    )
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["message"] == "Registration created successfully"
    registration = body["registration"]
    assert registration["status"] == "Registered"
    assert registration["attendedAt"] is None
    assert registration["registeredAt"]

    listing = app_client.get("/registrations")
    assert listing.status_code == 200
    assert listing.json()["registrations"] == [registration]


def test_registration_status_is_free_text_and_duplicates_allowed(app_client: TestClient):
    payload = {"eventId": "e", "volunteerId": "v", "status": "Maybe later"}
    first = app_client.post("/registrations", json=payload)
    second = app_client.post("/registrations", json=payload)
    assert first.status_code == second.status_code == 201
    assert first.json()["registration"]["id"] != second.json()["registration"]["id"]
    assert len(app_client.get("/registrations").json()["registrations"]) == 2


def test_registration_requires_status(app_client: TestClient):
    response = app_client.post("/registrations", json={"eventId": "e", "volunteerId": "v", "status": ""})
    assert response.status_code == 400
    assert response.json()["error"] == (
        "Invalid input: Ensure 'eventId', 'volunteerId', and 'status' are provided and are of the correct types."
    )


def test_create_feedback_and_list(app_client: TestClient):
    response = app_client.post(
        "/feedbacks",
        json={"volunteerId": "v", "eventId": "e", "feedback": "Well organised.", "rating": 4},
    )
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["message"] == "Feedback created successfully"
    assert body["feedback"]["rating"] == 4
    assert body["feedback"]["feedback"] == "Well organised."

    listing = app_client.get("/feedbacks")
    assert listing.status_code == 200
    assert listing.json() == {"message": "Feedback retrieved successfully", "feedbacks": [body["feedback"]]}


def test_feedback_rating_range_is_unrestricted(app_client: TestClient):
    for rating in (0, -3, 11.5):
        response = app_client.post(
            "/feedbacks",
            json={"volunteerId": "v", "eventId": "e", "feedback": "ok", "rating": rating},
        )
        assert response.status_code == 201, (rating, response.text)
        assert response.json()["feedback"]["rating"] == rating


def test_feedback_rating_must_be_number(app_client: TestClient):
    for rating in ("5", True, None):
        response = app_client.post(
            "/feedbacks",
            json={"volunteerId": "v", "eventId": "e", "feedback": "ok", "rating": rating},
        )
        assert response.status_code == 400, rating
        assert "'rating'" in response.json()["error"]


def test_feedback_rating_must_be_finite(app_client: TestClient):
    for token in ("NaN", "Infinity", "-Infinity"):
        body = '{"volunteerId": "v", "eventId": "e", "feedback": "ok", "rating": %s}' % token
        response = app_client.post("/feedbacks", content=body.encode(), headers={"Content-Type": "application/json"})
        assert response.status_code == 400, (token, response.text)
        assert "'rating'" in response.json()["error"]
    assert app_client.get("/feedbacks").json()["feedbacks"] == []


def test_registration_timestamp_is_utc(app_client: TestClient):
    response = app_client.post("/registrations", json={"eventId": "e", "volunteerId": "v", "status": "Registered"})
    assert response.status_code == 201, response.text
    registered_at = datetime.fromisoformat(response.json()["registration"]["registeredAt"])
    assert registered_at.utcoffset() == timedelta(0)
