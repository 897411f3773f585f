import pytest
import requests
from fastapi.testclient import TestClient

from health_records_api.app.main import app
from health_records_client import HealthRecordsAPI


@pytest.fixture
def api():
    with TestClient(app) as test_client:
        yield HealthRecordsAPI(base_url="http://testserver", session=test_client)


class _FailingSession:
    def request(self, **kwargs):
        raise requests.ConnectionError("connection refused")


class _RecordingSession:
    def __init__(self):
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        raise AssertionError("no request expected")


def test_user_round_trip(api):
    user, error = api.create_user({"name": "Ana", "age": 30, "location": "NYC"})
    assert error is None
    assert user["updatedAt"] is None

    fetched, error = api.get_user(user["id"])
    assert error is None
    assert fetched == user

    updated, error = api.update_user(user["id"], {"name": "Ana", "age": 31, "location": "NYC"})
    assert error is None
    assert updated["age"] == 31
    assert updated["createdAt"] == user["createdAt"]

    users, error = api.list_users()
    assert error is None
    assert users == [updated]

    removed, error = api.delete_user(user["id"])
    assert error is None
    assert removed == updated


def test_errors_are_returned_not_raised(api):
    data, error = api.create_user({"name": "Ana", "age": 0, "location": "NYC"})
    assert data is None
    assert error == {"status_code": 400, "message": "Age must be greater than zero."}

    data, error = api.get_user("missing")
    assert data is None
    assert error["status_code"] == 404


def test_health_record_operations(api):
    record, error = api.create_health_record({"userId": "ghost", "allergies": ["nuts"]})
    assert error is None

    for_user, error = api.list_health_records_for_user("ghost")
    assert error is None
    assert for_user == [record]

    updated, error = api.update_health_record(record["id"], {"userId": "ghost", "allergies": []})
    assert error is None
    assert updated["allergies"] == []

    fetched, _ = api.get_health_record(record["id"])
    assert fetched == updated
    assert api.list_health_records() == ([updated], None)

    removed, error = api.delete_health_record(record["id"])
    assert error is None
    assert removed == updated
    assert api.list_health_records_for_user("ghost") == ([], None)


def test_transport_failure_is_reported():
    api = HealthRecordsAPI(base_url="http://localhost:1", session=_FailingSession())
    users, error = api.list_users()
    assert users == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


@pytest.mark.parametrize(
    "operation, args",
    [
        ("get_user", ("",)),
        ("delete_user", ("",)),
        ("update_user", ("", {"name": "Ana", "age": 30, "location": "NYC"})),
        ("get_health_record", ("",)),
        ("delete_health_record", ("",)),
        ("update_health_record", ("", {"userId": "u1"})),
    ],
)
def test_empty_id_is_not_found_without_a_request(operation, args):
    session = _RecordingSession()
    api = HealthRecordsAPI(base_url="http://localhost:1", session=session)
    data, error = getattr(api, operation)(*args)
    assert data is None
    assert error == {"status_code": 404, "message": "Invalid id=''."}
    assert session.calls == []


def test_empty_id_does_not_reach_list_routes(api):
    api.create_user({"name": "Ana", "age": 30, "location": "NYC"})
    api.create_health_record({"userId": "u1"})
    assert api.get_user("")[1]["status_code"] == 404
    assert api.delete_user("")[1]["status_code"] == 404
    assert api.get_health_record("") == (None, {"status_code": 404, "message": "Invalid id=''."})
    assert api.list_health_records_for_user("") == ([], None)
    users, _ = api.list_users()
    assert len(users) == 1


def test_ids_are_quoted_as_one_path_segment(api):
    api.create_user({"name": "Ana", "age": 30, "location": "NYC"})
    data, error = api.get_user("a?b")
    assert data is None
    assert error["status_code"] == 404
    assert "a?b" in error["message"]
