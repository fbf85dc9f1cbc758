import pytest
from fastapi.testclient import TestClient
from inventory_service.infrastructure.config.settings import Settings
from inventory_service.main import create_app


@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / "cache"


@pytest.fixture
def app_settings(cache_dir):
    return Settings(CACHE_DIR=str(cache_dir))


@pytest.fixture
def client(app_settings):
    return TestClient(create_app(app_settings))


@pytest.fixture
def restart(app_settings):
    """Build a fresh app over the same cache directory"""
    def _restart():
        return TestClient(create_app(app_settings))
    return _restart


def register(client, name="Laptop", description=None, photo=None):
    data = {"inventory_name": name}
    if description is not None:
        data["description"] = description
    files = None
    if photo is not None:
        files = {"photo": photo}
    return client.post("/register", data=data, files=files)
