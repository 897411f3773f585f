import sqlite3

import pytest

from health_records_api.app.core.db import get_connection
from health_records_api.app.core.errors import StorageError
from health_records_api.app.core.store import OrderedStore
from health_records_api.app.schemas.health_record import HealthRecord
from health_records_api.app.schemas.user import User


def _store(region_id: int = 0, **kwargs) -> OrderedStore[User]:
    kwargs.setdefault("max_key_size", 44)
    kwargs.setdefault("max_value_size", 1024)
    return OrderedStore(region_id, User, **kwargs)


def _user(user_id: str, name: str = "Ana", updated_at=None) -> User:
    return User(id=user_id, name=name, age=30, location="NYC", created_at=1, updated_at=updated_at)


def test_insert_returns_previous_value():
    store = _store()
    assert store.insert("a", _user("a")) is None
    previous = store.insert("a", _user("a", name="Bea"))
    assert previous == _user("a")
    assert store.get("a").name == "Bea"


def test_repeated_identical_insert_is_idempotent():
    store = _store()
    store.insert("a", _user("a"))
    store.insert("a", _user("a"))
    assert len(store) == 1
    assert store.values() == [_user("a")]


def test_get_missing_key_returns_none():
    assert _store().get("missing") is None


def test_values_are_in_ascending_key_order():
    store = _store()
    for key in ["b", "c", "a"]:
        store.insert(key, _user(key))
    assert [user.id for user in store.values()] == ["a", "b", "c"]


def test_values_is_a_snapshot():
    store = _store()
    store.insert("a", _user("a"))
    snapshot = store.values()
    store.insert("b", _user("b"))
    assert len(snapshot) == 1
    assert len(store.values()) == 2


def test_remove_returns_removed_value():
    store = _store()
    store.insert("a", _user("a"))
    assert store.remove("a") == _user("a")
    assert store.get("a") is None
    assert store.remove("a") is None
    assert store.remove("never-there") is None


def test_regions_are_independent():
    users = _store(0)
    other = _store(7)
    users.insert("a", _user("a"))
    assert other.get("a") is None
    assert other.values() == []
    assert len(users) == 1


def test_data_survives_new_store_instance():
    _store().insert("a", _user("a", updated_at=42))
    reopened = _store()
    assert reopened.get("a") == _user("a", updated_at=42)


def test_optional_timestamp_round_trips():
    store = _store()
    store.insert("none", _user("none"))
    store.insert("some", _user("some", updated_at=123))
    assert store.get("none").updated_at is None
    assert store.get("some").updated_at == 123


def test_values_are_stored_with_camel_case_fields():
    store = OrderedStore(1, HealthRecord, max_key_size=44, max_value_size=1024)
    store.insert("r", HealthRecord(id="r", user_id="u", created_at=5))
    conn = get_connection()
    try:
        raw = conn.execute("SELECT value FROM kv_entries WHERE region_id = 1 AND key = 'r'").fetchone()["value"]
    finally:
        conn.close()
    assert '"userId":"u"' in raw
    assert '"updatedAt":null' in raw


def test_oversized_key_is_a_storage_error():
    store = _store(max_key_size=4)
    with pytest.raises(StorageError):
        store.insert("too-long", _user("too-long"))
    assert len(store) == 0


def test_oversized_value_is_a_storage_error():
    store = _store(max_value_size=64)
    with pytest.raises(StorageError):
        store.insert("a", _user("a", name="x" * 100))
    assert store.get("a") is None


def test_corrupt_value_is_a_storage_error():
    conn = get_connection()
    try:
        conn.execute("INSERT INTO kv_entries (region_id, key, value) VALUES (0, 'bad', '{not json')")
        conn.commit()
    finally:
        conn.close()
    store = _store()
    with pytest.raises(StorageError):
        store.get("bad")
    with pytest.raises(StorageError):
        store.values()


def test_failed_overwrite_leaves_previous_value():
    conn = get_connection()
    try:
        conn.execute("INSERT INTO kv_entries (region_id, key, value) VALUES (0, 'a', 'garbage')")
        conn.commit()
    finally:
        conn.close()
    store = _store()
    with pytest.raises(StorageError):
        store.insert("a", _user("a"))
    conn = get_connection()
    try:
        row = conn.execute("SELECT value FROM kv_entries WHERE region_id = 0 AND key = 'a'").fetchone()
    finally:
        conn.close()
    assert row["value"] == "garbage"


def test_unavailable_database_is_a_storage_error():
    def broken_connection():
        raise sqlite3.OperationalError("unable to open database file")

    store = _store(connection_factory=broken_connection)
    with pytest.raises(StorageError):
        store.get("a")
    with pytest.raises(StorageError):
        store.insert("a", _user("a"))


def test_missing_table_is_a_storage_error(tmp_path):
    def empty_database():
        conn = sqlite3.connect(str(tmp_path / "empty.db"))
        conn.row_factory = sqlite3.Row
        return conn

    store = _store(connection_factory=empty_database)
    with pytest.raises(StorageError):
        store.values()
