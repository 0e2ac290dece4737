import pytest
from fastapi.testclient import TestClient

from christmas_tree_api.app.core.config import settings
from christmas_tree_api.app.core.db import init_db
from christmas_tree_api.app.main import app


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "messages.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def client(db_path):
    with TestClient(app) as test_client:
        yield test_client
