import datetime as dt
import json

import requests

from exercise_tracker_client import ExerciseTrackerAPI


class FakeSession:
    """Records requests and answers with canned responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def make_response(status_code, body):
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode("utf-8")
    response.encoding = "utf-8"
    response.url = "http://tracker.test"
    return response


def test_create_user():
    session = FakeSession(make_response(200, {"username": "alice", "id": "u1"}))
    api = ExerciseTrackerAPI(base_url="http://tracker.test/", session=session)

    user, error = api.create_user("alice")

    assert error is None
    assert user == {"username": "alice", "id": "u1"}
    assert session.calls[0]["method"] == "POST"
    assert session.calls[0]["url"] == "http://tracker.test/api/users"
    assert session.calls[0]["json"] == {"username": "alice"}


def test_list_users():
    session = FakeSession(make_response(200, [{"username": "alice", "id": "u1"}]))
    api = ExerciseTrackerAPI(base_url="http://tracker.test", session=session)

    users, error = api.list_users()

    assert error is None
    assert users == [{"username": "alice", "id": "u1"}]


def test_add_exercise_sends_iso_date():
    session = FakeSession(make_response(200, {"id": "u1", "username": "alice", "description": "run",
                                              "duration": 30, "date": "Sun Jan 15 2023"}))
    api = ExerciseTrackerAPI(base_url="http://tracker.test", session=session)

    exercise, error = api.add_exercise("u1", "run", 30, dt.date(2023, 1, 15))

    assert error is None
    assert exercise["date"] == "Sun Jan 15 2023"
    assert session.calls[0]["url"] == "http://tracker.test/api/users/u1/exercises"
    assert session.calls[0]["json"] == {"description": "run", "duration": 30, "date": "2023-01-15"}


def test_get_log_query_parameters():
    session = FakeSession(make_response(200, {"id": "u1", "username": "alice", "count": 0, "log": []}))
    api = ExerciseTrackerAPI(base_url="http://tracker.test", session=session)

    log, error = api.get_log("u1", date_from=dt.date(2023, 1, 1), date_to="2023-01-31", limit=5)

    assert error is None
    assert log["count"] == 0
    assert session.calls[0]["params"] == {"from": "2023-01-01", "to": "2023-01-31", "limit": 5}


def test_http_error_uses_error_message():
    session = FakeSession(make_response(404, {"error": "User not found"}))
    api = ExerciseTrackerAPI(base_url="http://tracker.test", session=session)

    log, error = api.get_log("ghost")

    assert log is None
    assert error == {"status_code": 404, "message": "User not found"}


def test_connection_error():
    session = FakeSession(requests.ConnectionError("refused"))
    api = ExerciseTrackerAPI(base_url="http://tracker.test", session=session)

    users, error = api.list_users()

    assert users == []
    assert error["status_code"] is None
    assert "refused" in error["message"]
