"""
Shared dependencies for API endpoints.

Request bodies may arrive either as JSON or as an HTML form
(``application/x-www-form-urlencoded`` or ``multipart/form-data``), so
bodies are read with :func:`read_payload` and validated explicitly
against the endpoint's schema.  Validation failures are raised as
``RequestValidationError`` and rendered like any other FastAPI
validation error.
"""

from typing import Any, Dict, Optional, Type, TypeVar

from fastapi import Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from ..core.store import JsonStore
from ..schemas.exercise import ExerciseCreate, LogQuery
from ..schemas.user import UserCreate


ModelT = TypeVar("ModelT", bound=BaseModel)


def get_store(request: Request) -> JsonStore:
    return request.app.state.store


async def read_payload(request: Request) -> Dict[str, Any]:
    """Return the request body as a dictionary, whatever its encoding."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            raise RequestValidationError(
                [{"type": "json_invalid", "loc": ("body",), "msg": "Invalid JSON body", "input": None}]
            ) from None
        if not isinstance(data, dict):
            raise RequestValidationError(
                [{"type": "model_type", "loc": ("body",), "msg": "Body must be a JSON object", "input": data}]
            )
        return data
    form = await request.form()
    return {key: value for key, value in form.items()}


def parse_model(model: Type[ModelT], data: Dict[str, Any], location: str = "body") -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = [dict(error, loc=(location,) + tuple(error["loc"])) for error in e.errors(include_url=False)]
        raise RequestValidationError(errors, body=data) from None


async def user_create_body(request: Request) -> UserCreate:
    return parse_model(UserCreate, await read_payload(request))


async def exercise_create_body(request: Request) -> ExerciseCreate:
    return parse_model(ExerciseCreate, await read_payload(request))


def log_query(
    date_from: Optional[str] = Query(None, alias="from", description="Earliest date, inclusive"),
    date_to: Optional[str] = Query(None, alias="to", description="Latest date, inclusive"),
    limit: Optional[str] = Query(None, description="Maximum number of entries"),
) -> LogQuery:
    data = {"date_from": date_from, "date_to": date_to, "limit": limit}
    return parse_model(LogQuery, data, location="query")
