import asyncio
import json
import logging

import pytest

from exercise_tracker_api.app.core.store import Dataset, JsonStore, StoreError
from exercise_tracker_api.app.schemas.user import UserCreate
from exercise_tracker_api.app.services.user_service import UserService


def test_missing_file_gives_empty_dataset(tmp_path):
    dataset = JsonStore(tmp_path / "data.json").load()

    assert dataset.users == {}
    assert dataset.exercises == []


@pytest.mark.parametrize("content", ["{broken", "[]", '{"users": {}}', '{"users": [{"username": "x"}]}'])
def test_corrupt_file_gives_empty_dataset(tmp_path, caplog, content):
    path = tmp_path / "data.json"
    path.write_text(content)

    with caplog.at_level(logging.WARNING):
        dataset = JsonStore(path).load()

    assert dataset.to_dict() == {"users": [], "exercises": []}
    assert "Could not read data file" in caplog.text


def test_save_then_load(tmp_path):
    path = tmp_path / "data.json"
    store = JsonStore(path)
    dataset = Dataset()
    dataset.add_user({"username": "alice", "id": "u1"})
    dataset.add_exercise({"userId": "u1", "description": "run", "duration": 30, "date": "Sun Jan 15 2023"})

    store.save(dataset)

    assert json.loads(path.read_text()) == {
        "users": [{"username": "alice", "id": "u1"}],
        "exercises": [{"userId": "u1", "description": "run", "duration": 30, "date": "Sun Jan 15 2023"}],
    }
    assert store.load().to_dict() == dataset.to_dict()
    assert list(tmp_path.iterdir()) == [path]


def test_legacy_underscore_id_is_accepted(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({
        "users": [{"username": "alice", "_id": "1700000000000"}],
        "exercises": [{"userId": "1700000000000", "description": "run", "duration": None, "date": "Invalid Date"}],
    }))

    dataset = JsonStore(path).load()

    assert dataset.get_user("1700000000000") == {"username": "alice", "id": "1700000000000"}
    assert len(dataset.exercises_for("1700000000000")) == 1


def test_duplicate_ids_in_file_keep_first(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({
        "users": [{"username": "alice", "id": "u1"}, {"username": "bob", "id": "u1"}],
        "exercises": [],
    }))

    dataset = JsonStore(path).load()

    assert list(dataset.users.values()) == [{"username": "alice", "id": "u1"}]


def test_add_user_refuses_duplicate_id():
    dataset = Dataset()
    dataset.add_user({"username": "alice", "id": "u1"})

    with pytest.raises(ValueError):
        dataset.add_user({"username": "bob", "id": "u1"})


def test_add_exercise_refuses_unknown_user():
    with pytest.raises(ValueError):
        Dataset().add_exercise({"userId": "ghost", "description": "run", "duration": 1, "date": "Sun Jan 15 2023"})


def test_save_failure_raises_store_error(tmp_path, monkeypatch):
    store = JsonStore(tmp_path / "data.json")

    def fail(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr("exercise_tracker_api.app.core.store.os.replace", fail)

    with pytest.raises(StoreError):
        store.save(Dataset())
    assert list(tmp_path.iterdir()) == []


def test_transaction_does_not_save_on_error(tmp_path):
    path = tmp_path / "data.json"
    store = JsonStore(path)

    async def scenario():
        with pytest.raises(RuntimeError):
            async with store.transaction() as dataset:
                dataset.add_user({"username": "alice", "id": "u1"})
                raise RuntimeError("boom")

    asyncio.run(scenario())

    assert not path.exists()


def test_concurrent_creates_are_not_lost(tmp_path):
    store = JsonStore(tmp_path / "data.json")

    async def scenario():
        await asyncio.gather(*(UserService.create_user(store, UserCreate(username=f"user{i}")) for i in range(20)))

    asyncio.run(scenario())

    assert len(store.load().users) == 20


def test_legacy_records_are_cleaned_on_load(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({
        "users": [{"_id": "1700000000000"}, {"username": 42, "id": "u2"}],
        "exercises": [
            {"userId": "1700000000000", "duration": None, "date": "Invalid Date"},
            {"userId": "u2", "description": 7, "duration": 12.5, "date": "Sun Jan 15 2023"},
            {"userId": "u2", "description": "run", "duration": "30", "date": None},
            {"userId": "u2", "description": "swim", "duration": "lots"},
        ],
    }))

    dataset = JsonStore(path).load()

    assert dataset.get_user("1700000000000") == {"username": "", "id": "1700000000000"}
    assert dataset.get_user("u2")["username"] == "42"
    assert dataset.exercises_for("1700000000000") == [
        {"userId": "1700000000000", "description": None, "duration": None, "date": "Invalid Date"},
    ]
    assert [(e["description"], e["duration"], e["date"]) for e in dataset.exercises_for("u2")] == [
        ("7", 12, "Sun Jan 15 2023"),
        ("run", 30, None),
        ("swim", None, None),
    ]
