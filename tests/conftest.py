import pytest

from medtrack import create_app
from medtrack.extensions import db
from medtrack.services.storage import get_storage


@pytest.fixture(params=["memory", "database"])
def app(request):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "STORAGE_BACKEND": request.param,
        "LOG_LEVEL": "WARNING",
    })
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def storage(app):
    return get_storage()


@pytest.fixture
def make_medication(storage):
    def make(**overrides):
        fields = {
            "name": "Lisinopril",
            "dosage": "10mg",
            "frequency": "once daily",
            "times": ["08:00"],
        }
        fields.update(overrides)
        return storage.create_medication(fields)
    return make
