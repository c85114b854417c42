import logging

from medtrack import create_app
from medtrack.services.storage import MemoryStorage


class BrokenStorage(MemoryStorage):
    def list_medications(self):
        raise RuntimeError("connection refused: password=hunter2")


def test_unexpected_error_returns_generic_500(caplog):
    app = create_app({"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite://", "LOG_LEVEL": "ERROR"},
                     storage=BrokenStorage())
    client = app.test_client()

    with caplog.at_level(logging.ERROR):
        resp = client.get("/api/v1/medications")

    assert resp.status_code == 500
    body = resp.get_json()
    assert body == {"success": False, "message": "Internal server error", "data": None}
    assert "hunter2" not in resp.get_data(as_text=True)

    logged = [r for r in caplog.records if r.exc_info]
    assert logged
    assert "hunter2" in str(logged[0].exc_info[1])
