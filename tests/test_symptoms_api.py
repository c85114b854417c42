from medtrack.utils.dates import parse_timestamp


def _log(client, description, severity, day):
    resp = client.post("/api/v1/symptoms", json={"description": description, "severity": severity, "date": day})
    assert resp.status_code == 201
    return resp.get_json()["data"]


def test_logged_symptom_is_listed_and_filtered(client):
    _log(client, "nausea", 2, "2024-01-14")
    logged = _log(client, "chest pain", 5, "2024-01-15")
    assert logged["severity"] == 5
    assert logged["timestamp"]

    everything = client.get("/api/v1/symptoms").get_json()["data"]
    assert logged in everything
    stamps = [parse_timestamp(s["timestamp"]) for s in everything]
    assert stamps == sorted(stamps, reverse=True)

    filtered = client.get("/api/v1/symptoms?date=2024-01-15").get_json()["data"]
    assert filtered == [logged]


def test_severity_out_of_range_is_clamped(client):
    assert _log(client, "headache", 8, "2024-01-15")["severity"] == 5
    assert _log(client, "tired", -1, "2024-01-15")["severity"] == 1


def test_recent_symptoms(client):
    for i in range(7):
        _log(client, f"symptom {i}", 3, "2024-01-15")

    assert len(client.get("/api/v1/symptoms?recent=true").get_json()["data"]) == 5
    assert len(client.get("/api/v1/symptoms?recent=true&limit=2").get_json()["data"]) == 2
    assert client.get("/api/v1/symptoms?recent=true&limit=abc").status_code == 400


def test_invalid_symptom(client):
    resp = client.post("/api/v1/symptoms", json={"description": "", "severity": 3, "date": "2024-01-15"})
    assert resp.status_code == 400

    resp = client.post("/api/v1/symptoms", json={"description": "cough", "severity": 3})
    assert resp.status_code == 400
    assert "date" in resp.get_json()["message"]


def test_symptom_summary(client):
    _log(client, "a", 4, "2024-01-15")
    _log(client, "b", 2, "2024-01-16")
    _log(client, "c", 5, "2024-02-01")

    resp = client.get("/api/v1/symptoms/summary?start=2024-01-15&end=2024-01-21")
    summary = resp.get_json()["data"]
    assert summary["count"] == 2
    assert summary["averageSeverity"] == 3.0

    assert client.get("/api/v1/symptoms/summary?start=2024-01-21&end=2024-01-15").status_code == 400
    assert client.get("/api/v1/symptoms/summary").status_code == 400
