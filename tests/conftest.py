import pytest
from fastapi.testclient import TestClient

from exercise_tracker_api.app.core.config import Settings
from exercise_tracker_api.app.main import create_app


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data.json"


@pytest.fixture
def app(data_file):
    return create_app(Settings(data_file=str(data_file)))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_user(client):
    def _make_user(username="alice"):
        response = client.post("/api/users", json={"username": username})
        assert response.status_code == 200
        return response.json()

    return _make_user
