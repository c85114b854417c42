def test_search_endpoint(client):
    resp = client.get("/api/v1/medication-database/search?q=lisinopril")
    assert resp.status_code == 200
    assert [m["name"] for m in resp.get_json()["data"]] == ["Lisinopril"]

    assert len(client.get("/api/v1/medication-database/search").get_json()["data"]) == 10


def test_lookup_endpoint(client):
    resp = client.get("/api/v1/medication-database/zoloft")
    assert resp.status_code == 200
    assert resp.get_json()["data"]["name"] == "Sertraline"

    assert client.get("/api/v1/medication-database/unknown").status_code == 404


def test_category_endpoint(client):
    resp = client.get("/api/v1/medication-database/category/cholesterol")
    assert [m["name"] for m in resp.get_json()["data"]] == ["Atorvastatin", "Simvastatin"]


def test_health(client, storage):
    resp = client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"status": "connected", "storage": storage.name}


def test_unknown_route_uses_envelope(client):
    resp = client.get("/api/v1/nope")
    assert resp.status_code == 404
    assert resp.get_json()["success"] is False
