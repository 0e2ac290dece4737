from christmas_tree_api.app.core.db import MAX_DESCRIPTION_LENGTH
from christmas_tree_api.app.main import app
from christmas_tree_api.app.repositories.message_repository import MessageRepository, StorageError
from christmas_tree_api.app.services.message_service import MessageService, get_message_service


def test_create_then_list(client):
    response = client.post("/api/message?description=Merry%20Christmas")
    assert response.status_code == 200
    assert response.json() == {"id": 1, "description": "Merry Christmas"}

    response = client.get("/api/message")
    assert response.status_code == 200
    assert response.json() == [{"id": 1, "description": "Merry Christmas"}]


def test_list_empty(client):
    response = client.get("/api/message")
    assert response.status_code == 200
    assert response.json() == []


def test_missing_description_is_bad_request(client):
    response = client.post("/api/message")
    assert response.status_code == 400

    assert client.get("/api/message").json() == []


def test_empty_description_is_accepted(client):
    response = client.post("/api/message", params={"description": ""})
    assert response.status_code == 200
    assert response.json()["description"] == ""


def test_two_creates_get_distinct_ids(client):
    first = client.post("/api/message", params={"description": "snow"}).json()
    second = client.post("/api/message", params={"description": "bells"}).json()

    assert first["id"] != second["id"]
    listed = client.get("/api/message").json()
    assert first in listed
    assert second in listed


def test_over_long_description_is_server_error(client):
    response = client.post("/api/message", params={"description": "x" * (MAX_DESCRIPTION_LENGTH + 1)})
    assert response.status_code == 500
    assert response.json() == {"detail": "Storage error"}
    assert client.get("/api/message").json() == []


class BrokenRepository(MessageRepository):
    def save(self, message):
        raise StorageError("store unavailable")

    def find_all(self):
        raise StorageError("store unavailable")


def test_unavailable_store_is_server_error(client):
    app.dependency_overrides[get_message_service] = lambda: MessageService(BrokenRepository())
    try:
        assert client.get("/api/message").status_code == 500
        assert client.post("/api/message", params={"description": "hi"}).status_code == 500
    finally:
        app.dependency_overrides.clear()


def test_other_verbs_not_allowed(client):
    assert client.delete("/api/message").status_code == 405
    assert client.put("/api/message").status_code == 405
