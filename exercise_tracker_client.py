"""Exercise tracker API client.

A thin wrapper around the Exercise Tracker REST API built on the
``requests`` library.  It exposes one method per operation:

* :meth:`create_user` – register a new user.
* :meth:`list_users` – return every registered user.
* :meth:`add_exercise` – log an exercise for a user.
* :meth:`get_log` – fetch a user's exercise log with optional filters.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  The message is taken
from the ``error`` field of the API's JSON error body when present.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Dict, List, Optional, Tuple, Union

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ExerciseTrackerAPI:
    """Client for interacting with the exercise tracker API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/users``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def create_user(self, username: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Register a user.

        Returns:
            A tuple ``(user, error)`` where ``user`` has ``username`` and ``id``.
        """
        return self._request("POST", "/api/users", json_body={"username": username})

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all registered users."""
        data, error = self._request("GET", "/api/users")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    # ------------------------------------------------------------------
    # Exercise operations
    # ------------------------------------------------------------------
    def add_exercise(
        self,
        user_id: str,
        description: str,
        duration: int,
        date: Union[str, dt.date, None] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Log an exercise for a user.

        Args:
            user_id: Identifier of the user.
            description: Free-text description.
            duration: Duration in minutes.
            date: Optional date (``date`` object or ``YYYY-MM-DD``); the
                server uses today's date when omitted.
        Returns:
            A tuple ``(exercise, error)``.
        """
        payload: Dict[str, Any] = {"description": description, "duration": duration}
        if date:
            payload["date"] = date.isoformat() if isinstance(date, dt.date) else date
        return self._request("POST", f"/api/users/{user_id}/exercises", json_body=payload)

    def get_log(
        self,
        user_id: str,
        *,
        date_from: Union[str, dt.date, None] = None,
        date_to: Union[str, dt.date, None] = None,
        limit: Optional[int] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch a user's exercise log.

        Args:
            user_id: Identifier of the user.
            date_from: Earliest date to include.
            date_to: Latest date to include.
            limit: Maximum number of entries to return.
        Returns:
            A tuple ``(log, error)`` where ``log`` has ``id``,
            ``username``, ``count`` and ``log``.
        """
        params: Dict[str, Any] = {}
        for key, value in (("from", date_from), ("to", date_to)):
            if value:
                params[key] = value.isoformat() if isinstance(value, dt.date) else value
        if limit is not None:
            params["limit"] = limit
        return self._request("GET", f"/api/users/{user_id}/logs", params=params or None)
