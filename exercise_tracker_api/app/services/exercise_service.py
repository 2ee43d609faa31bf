"""
Business logic for exercises and exercise logs.

Exercises are kept in the dataset's shared ``exercises`` collection,
each tagged with the ``userId`` of its owner.  Dates are stored in
their display form (``"Sun Jan 15 2023"``) and parsed back into
calendar dates when a log is filtered.
"""

import datetime as dt
import logging
from typing import Any, Dict, Optional

from ..core.dates import format_date, parse_date
from ..core.store import JsonStore
from ..schemas.exercise import ExerciseCreate, ExerciseLog, ExerciseRead, LogEntry, LogQuery
from .user_service import UserNotFoundError


logger = logging.getLogger(__name__)


def _entry_date(entry: Dict[str, Any]) -> Optional[dt.date]:
    try:
        return parse_date(entry.get("date"))
    except ValueError:
        return None


class ExerciseService:
    """Operations on a user's exercises."""

    @classmethod
    async def add_exercise(cls, store: JsonStore, user_id: str, data: ExerciseCreate) -> ExerciseRead:
        """Log an exercise for ``user_id``.

        The date defaults to today when not supplied.  Raises
        ``UserNotFoundError`` without touching the data file when the
        user does not exist.
        """
        exercise_date = data.date or dt.date.today()
        async with store.transaction() as dataset:
            user = dataset.get_user(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            exercise = {
                "userId": user_id,
                "description": data.description,
                "duration": data.duration,
                "date": format_date(exercise_date),
            }
            # Built before the block exits so a bad record is never saved.
            result = ExerciseRead(
                id=user["id"],
                username=user["username"],
                description=exercise["description"],
                duration=exercise["duration"],
                date=exercise["date"],
            )
            dataset.add_exercise(exercise)
        logger.info("Added exercise %r for user %s", data.description, user_id)
        return result

    @classmethod
    async def get_log(cls, store: JsonStore, user_id: str, query: LogQuery) -> ExerciseLog:
        """Return the user's exercises filtered by date and limited in count.

        Entries keep the order in which they were logged.  When a date
        bound is given, entries whose stored date cannot be parsed are
        excluded.
        """
        dataset = await store.read()
        user = dataset.get_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        entries = dataset.exercises_for(user_id)
        if query.date_from or query.date_to:
            filtered = []
            for entry in entries:
                entry_date = _entry_date(entry)
                if entry_date is None:
                    continue
                if query.date_from and entry_date < query.date_from:
                    continue
                if query.date_to and entry_date > query.date_to:
                    continue
                filtered.append(entry)
            entries = filtered
        if query.limit is not None:
            entries = entries[: query.limit]

        log = [
            LogEntry(description=e.get("description"), duration=e.get("duration"), date=e.get("date"))
            for e in entries
        ]
        return ExerciseLog(id=user["id"], username=user["username"], count=len(log), log=log)
