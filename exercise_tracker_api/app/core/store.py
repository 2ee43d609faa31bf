"""
JSON file persistence for the whole dataset.

The dataset (users and their exercises) lives in a single JSON file
which is read in full and rewritten in full.  ``JsonStore`` guards
every read-modify-write sequence with one ``asyncio.Lock`` so that
concurrent requests served by the same process cannot overwrite each
other's changes.  Writes go to a temporary file first and then replace
the target, so a crash mid-write never leaves a truncated file behind.

File layout::

    {
      "users": [{"username": "alice", "id": "..."}],
      "exercises": [{"userId": "...", "description": "run",
                     "duration": 30, "date": "Sun Jan 15 2023"}]
    }
"""

import asyncio
import json
import logging
import math
import os
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Dict, List, Optional, Union


logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the backing file cannot be written."""


# Older data files may hold missing fields (dropped ``undefined``
# values), ``null`` durations (``NaN``) or hand-edited values.
def _clean_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _clean_duration(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


class Dataset:
    """In-memory copy of the backing file.

    Users are indexed by id; insertion order is preserved so listings
    come back in creation order.
    """

    def __init__(self) -> None:
        self.users: Dict[str, Dict[str, Any]] = {}
        self.exercises: List[Dict[str, Any]] = []

    @classmethod
    def from_dict(cls, raw: Any) -> "Dataset":
        """Build a dataset from decoded JSON.

        Raises ``ValueError`` when the document does not have the
        expected shape.  Users saved under the legacy ``_id`` key are
        accepted.
        """
        if not isinstance(raw, dict):
            raise ValueError("dataset must be a JSON object")
        users = raw.get("users", [])
        exercises = raw.get("exercises", [])
        if not isinstance(users, list) or not isinstance(exercises, list):
            raise ValueError("'users' and 'exercises' must be lists")

        dataset = cls()
        for entry in users:
            if not isinstance(entry, dict):
                raise ValueError("user entries must be objects")
            user_id = entry.get("id", entry.get("_id"))
            if user_id is None:
                raise ValueError("user entry without id")
            user_id = str(user_id)
            if user_id in dataset.users:
                logger.warning("Duplicate user id %s in data file, keeping the first", user_id)
                continue
            dataset.users[user_id] = {"username": _clean_text(entry.get("username")) or "", "id": user_id}
        for entry in exercises:
            if not isinstance(entry, dict) or "userId" not in entry:
                raise ValueError("exercise entries must be objects with a userId")
            dataset.exercises.append({
                "userId": str(entry["userId"]),
                "description": _clean_text(entry.get("description")),
                "duration": _clean_duration(entry.get("duration")),
                "date": _clean_text(entry.get("date")),
            })
        return dataset

    def to_dict(self) -> Dict[str, Any]:
        return {"users": list(self.users.values()), "exercises": self.exercises}

    def add_user(self, user: Dict[str, Any]) -> None:
        if user["id"] in self.users:
            raise ValueError(f"User id {user['id']} already exists")
        self.users[user["id"]] = user

    def get_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        return self.users.get(user_id)

    def add_exercise(self, exercise: Dict[str, Any]) -> None:
        if exercise["userId"] not in self.users:
            raise ValueError(f"User {exercise['userId']} does not exist")
        self.exercises.append(exercise)

    def exercises_for(self, user_id: str) -> List[Dict[str, Any]]:
        return [e for e in self.exercises if e["userId"] == user_id]


class JsonStore:
    """Load and save the dataset to a single JSON file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._lock = asyncio.Lock()

    def init(self) -> None:
        """Make sure the data directory exists and report the dataset size."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        dataset = self.load()
        logger.info(
            "Using data file %s (%d users, %d exercises)",
            self.path,
            len(dataset.users),
            len(dataset.exercises),
        )

    def load(self) -> Dataset:
        """Read the dataset from disk.

        A missing file gives an empty dataset.  So does an unreadable or
        malformed one, after logging a warning; the next save replaces it.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            dataset = Dataset.from_dict(raw)
        except FileNotFoundError:
            logger.debug("Data file %s not found, starting with an empty dataset", self.path)
            return Dataset()
        except (OSError, ValueError) as e:
            logger.warning("Could not read data file %s: %s. Starting with an empty dataset.", self.path, e)
            return Dataset()
        logger.debug("Loaded %d users and %d exercises from %s", len(dataset.users), len(dataset.exercises), self.path)
        return dataset

    def save(self, dataset: Dataset) -> None:
        """Overwrite the backing file with ``dataset``.

        Raises ``StoreError`` if the file cannot be written.
        """
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(dataset.to_dict(), f, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error("Failed to write data file %s: %s", self.path, e)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StoreError(f"Failed to write data file {self.path}") from e
        logger.debug("Saved %d users and %d exercises to %s", len(dataset.users), len(dataset.exercises), self.path)

    async def read(self) -> Dataset:
        """Load the dataset without modifying it."""
        async with self._lock:
            return self.load()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Dataset]:
        """Load, let the caller mutate, then save, all under the store lock.

        Nothing is saved if the block raises.
        """
        async with self._lock:
            dataset = self.load()
            yield dataset
            self.save(dataset)
