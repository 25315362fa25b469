import pytest
from fastapi.testclient import TestClient

from mentorship_api.app.core.config import settings
from mentorship_api.app.main import app


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "mentorship-test.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    return path


@pytest.fixture
def client(db_path):
    # Entering the client runs startup/shutdown, which opens and closes the db.
    with TestClient(app) as c:
        yield c


@pytest.fixture
def mentor_factory(client):
    def _create(name: str = "Mentor"):
        r = client.post("/api/mentor", json={"name": name})
        assert r.status_code == 200
        return r.json()
    return _create


@pytest.fixture
def student_factory(client):
    def _create(name: str = "Student"):
        r = client.post("/api/student", json={"name": name})
        assert r.status_code == 200
        return r.json()
    return _create
