"""
Pydantic models for exercises and exercise logs.

``ExerciseCreate`` validates the body of a new exercise: ``duration``
must be an integer (numeric strings from HTML forms are accepted) and
``date`` must be a recognisable calendar date.  An empty or missing
date is left as ``None`` and replaced by today's date in the service.
``LogQuery`` validates the filters of the log endpoint the same way.
"""

import datetime as dt
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..core.dates import parse_date


def _optional_date(value: Any) -> Optional[dt.date]:
    if value is None or value == "":
        return None
    return parse_date(value)


class ExerciseCreate(BaseModel):
    """Schema for logging an exercise against a user."""

    description: str = Field(..., examples=["run"])
    duration: int = Field(..., examples=[30], description="Duration in minutes")
    date: Optional[dt.date] = Field(None, examples=["2023-01-15"])

    @field_validator("date", mode="before")
    @classmethod
    def parse_exercise_date(cls, value: Any) -> Optional[dt.date]:
        return _optional_date(value)


class ExerciseRead(BaseModel):
    """A freshly created exercise merged with its owner's identity."""

    id: str
    username: str
    description: str
    duration: int
    date: str = Field(..., examples=["Sun Jan 15 2023"])


class LogEntry(BaseModel):
    # Entries loaded from older data files may lack fields.
    description: Optional[str] = None
    duration: Optional[int] = None
    date: Optional[str] = None


class ExerciseLog(BaseModel):
    """A user's exercise log.

    ``count`` is the number of entries in ``log``, i.e. after the date
    filters and the limit are applied.
    """

    id: str
    username: str
    count: int
    log: List[LogEntry]


class LogQuery(BaseModel):
    """Filters for the log endpoint.

    ``date_from`` and ``date_to`` are inclusive bounds; ``limit`` keeps
    the first N entries that pass the date filters.
    """

    date_from: Optional[dt.date] = None
    date_to: Optional[dt.date] = None
    limit: Optional[int] = Field(None, ge=1)

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def parse_bound(cls, value: Any) -> Optional[dt.date]:
        return _optional_date(value)

    @field_validator("limit", mode="before")
    @classmethod
    def empty_limit(cls, value: Any) -> Any:
        if value == "":
            return None
        return value
