from datetime import datetime

import pytest

from medtrack.controllers import schedule_controller


@pytest.fixture
def medication(client):
    resp = client.post("/api/v1/medications", json={
        "name": "Lisinopril",
        "dosage": "10mg",
        "frequency": "twice daily",
        "times": ["08:00", "20:00"],
    })
    return resp.get_json()["data"]


def test_generate_schedule_is_idempotent(client, medication):
    resp = client.post("/api/v1/generate-schedule", json={"date": "2024-01-15"})
    assert resp.status_code == 200
    body = resp.get_json()["data"]
    assert body["dosesCreated"] == 2
    assert [d["scheduledTime"] for d in body["doses"]] == ["2024-01-15T08:00:00Z", "2024-01-15T20:00:00Z"]

    resp = client.post("/api/v1/generate-schedule", json={"date": "2024-01-15"})
    assert resp.get_json()["data"]["dosesCreated"] == 0

    doses = client.get("/api/v1/doses?date=2024-01-15").get_json()["data"]
    assert len(doses) == 2


def test_generate_schedule_defaults_to_today(client, medication):
    resp = client.post("/api/v1/generate-schedule")
    assert resp.status_code == 200
    assert resp.get_json()["data"]["dosesCreated"] == 2


def test_generate_schedule_rejects_bad_date(client):
    resp = client.post("/api/v1/generate-schedule", json={"date": "Jan 15"})
    assert resp.status_code == 400


def test_mark_dose_taken(client, medication):
    client.post("/api/v1/generate-schedule", json={"date": "2024-01-15"})
    dose = client.get("/api/v1/doses?date=2024-01-15").get_json()["data"][0]

    resp = client.put(f"/api/v1/doses/{dose['id']}", json={
        "status": "taken",
        "takenTime": "2024-01-15T08:03:00.000Z",
    })
    assert resp.status_code == 200
    updated = resp.get_json()["data"]
    assert updated["status"] == "taken"
    assert updated["takenTime"] == "2024-01-15T08:03:00Z"
    assert updated["id"] == dose["id"]
    assert updated["medicationId"] == medication["id"]


def test_mark_dose_late_stamps_taken_time(client, medication):
    client.post("/api/v1/generate-schedule", json={"date": "2024-01-15"})
    dose = client.get("/api/v1/doses?date=2024-01-15").get_json()["data"][1]

    updated = client.put(f"/api/v1/doses/{dose['id']}", json={"status": "late"}).get_json()["data"]
    assert updated["status"] == "late"
    assert updated["takenTime"] is not None


def test_update_dose_errors(client, medication):
    assert client.put("/api/v1/doses/missing", json={"status": "taken"}).status_code == 404

    client.post("/api/v1/generate-schedule", json={"date": "2024-01-15"})
    dose = client.get("/api/v1/doses").get_json()["data"][0]
    resp = client.put(f"/api/v1/doses/{dose['id']}", json={"status": "forgotten"})
    assert resp.status_code == 400


def test_create_and_get_dose(client, medication):
    resp = client.post("/api/v1/doses", json={
        "medicationId": medication["id"],
        "scheduledTime": "2024-01-15T12:00:00Z",
        "date": "2024-01-15",
    })
    assert resp.status_code == 201
    dose = resp.get_json()["data"]
    assert dose["status"] == "pending"
    assert dose["takenTime"] is None

    fetched = client.get(f"/api/v1/doses/{dose['id']}").get_json()["data"]
    assert fetched == dose
    assert client.get("/api/v1/doses/missing").status_code == 404


def test_create_dose_for_unknown_medication(client):
    resp = client.post("/api/v1/doses", json={
        "medicationId": "missing",
        "scheduledTime": "2024-01-15T12:00:00Z",
        "date": "2024-01-15",
    })
    assert resp.status_code == 404


def test_list_doses_rejects_bad_date(client):
    assert client.get("/api/v1/doses?date=yesterday").status_code == 400


def test_dose_summary(client, medication):
    client.post("/api/v1/generate-schedule", json={"date": "2024-01-15"})
    dose = client.get("/api/v1/doses?date=2024-01-15").get_json()["data"][0]
    client.put(f"/api/v1/doses/{dose['id']}", json={"status": "taken"})

    summary = client.get("/api/v1/doses/summary?date=2024-01-15").get_json()["data"]
    assert summary["total"] == 2
    assert summary["taken"] == 1
    assert summary["pending"] == 1
    assert summary["adherenceRate"] == 50.0

    assert client.get("/api/v1/doses/summary").status_code == 400


def test_reminders(client, medication):
    resp = client.get("/api/v1/reminders?now=2024-01-15T07:00:00")
    assert resp.status_code == 200
    reminders = resp.get_json()["data"]
    assert [r["fireAt"] for r in reminders] == ["2024-01-15T08:00:00Z", "2024-01-15T20:00:00Z"]

    client.put("/api/v1/settings", json={"notificationsEnabled": False})
    assert client.get("/api/v1/reminders?now=2024-01-15T07:00:00").get_json()["data"] == []


def test_generate_schedule_default_date_is_utc(client, medication, monkeypatch):
    monkeypatch.setattr(schedule_controller, "utcnow", lambda: datetime(2024, 3, 1, 23, 30))

    body = client.post("/api/v1/generate-schedule").get_json()["data"]
    assert body["date"] == "2024-03-01"
    assert [d["date"] for d in body["doses"]] == ["2024-03-01", "2024-03-01"]
