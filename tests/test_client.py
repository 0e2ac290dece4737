import json

import requests

from christmas_tree_api.client import MessageBoardAPI


def make_response(status_code, payload=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://testserver/api/message"
    if payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
    elif text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = b""
    return response


class StubSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def test_list_messages():
    session = StubSession(make_response(200, [{"id": 1, "description": "Merry Christmas"}]))
    api = MessageBoardAPI(base_url="http://testserver/", session=session)

    messages, error = api.list_messages()

    assert error is None
    assert messages == [{"id": 1, "description": "Merry Christmas"}]
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == "http://testserver/api/message"


def test_create_message_sends_query_parameter():
    session = StubSession(make_response(200, {"id": 7, "description": "snow"}))
    api = MessageBoardAPI(base_url="http://testserver", session=session)

    message, error = api.create_message("snow")

    assert error is None
    assert message == {"id": 7, "description": "snow"}
    assert session.calls[0]["method"] == "POST"
    assert session.calls[0]["params"] == {"description": "snow"}


def test_http_error_is_reported():
    session = StubSession(make_response(400, {"detail": "Query parameter 'description' is required"}))
    api = MessageBoardAPI(base_url="http://testserver", session=session)

    message, error = api.create_message("")

    assert message is None
    assert error == {"status_code": 400, "message": "Query parameter 'description' is required"}


def test_non_json_error_body_is_reported_as_text():
    session = StubSession(make_response(500, text="Internal Server Error"))
    api = MessageBoardAPI(base_url="http://testserver", session=session)

    messages, error = api.list_messages()

    assert messages == []
    assert error == {"status_code": 500, "message": "Internal Server Error"}


def test_connection_error_is_reported():
    session = StubSession(error=requests.ConnectionError("connection refused"))
    api = MessageBoardAPI(base_url="http://testserver", session=session)

    messages, error = api.list_messages()

    assert messages == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]
