def test_settings_empty_before_first_write(client):
    resp = client.get("/api/v1/settings")
    assert resp.status_code == 200
    assert resp.get_json()["data"] == {}


def test_settings_upsert_keeps_single_record(client):
    first = client.put("/api/v1/settings", json={
        "emergencyContactName": "Ana",
        "emergencyContactPhone": "555-0100",
    }).get_json()["data"]
    assert first["notificationsEnabled"] is True

    second = client.put("/api/v1/settings", json={
        "emergencyContactName": "Luis",
        "doctorName": "Dr. Ruiz",
    }).get_json()["data"]

    assert second["id"] == first["id"]
    current = client.get("/api/v1/settings").get_json()["data"]
    assert current["emergencyContactName"] == "Luis"
    assert current["emergencyContactPhone"] == "555-0100"
    assert current["doctorName"] == "Dr. Ruiz"


def test_settings_rejects_wrong_types(client):
    resp = client.put("/api/v1/settings", json={"notificationsEnabled": "yes"})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
