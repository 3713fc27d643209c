"""Lessons Marketplace API client.

This module defines a small client wrapper around the REST API served
by ``lessons_api``.  The client uses the ``requests`` library
internally to make HTTP calls and exposes one method per operation:

* :meth:`list_lessons` – return all lessons.
* :meth:`create_lessons` – insert several lessons at once.
* :meth:`update_lesson` – change some fields of a lesson.
* :meth:`place_order` – order seats in one or more lessons.
* :meth:`list_orders` – return all orders.
* :meth:`search` – case-insensitive search over lessons.
* :meth:`image_url` – build the URL of a lesson image.

Every request method returns a tuple ``(data, error)``.  On success
``error`` is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with the keys ``status_code`` and ``message``.  The
``{message, results}`` envelopes of the API are unwrapped so callers
get the payload directly.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class LessonsAPI:
    """Client for interacting with the lessons marketplace API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:7000``.
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
            method: HTTP method (``GET``, ``POST``, ``PUT``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/lessons``).
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
                    message = err_json.get("error") or err_json.get("message") or str(err_json)
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
    # Lesson operations
    # ------------------------------------------------------------------
    def list_lessons(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/api/lessons")
        if error:
            return [], error
        return (data or {}).get("results", []), None

    def create_lessons(self, lessons: List[Dict[str, Any]]) -> Tuple[List[str], Optional[Error]]:
        """Create lessons in bulk.

        Returns:
            A tuple ``(ids, error)`` where ``ids`` are the identifiers
            generated for the new lessons, in the order they were sent.
        """
        data, error = self._request("POST", "/api/lessons", json_body=lessons)
        if error:
            return [], error
        return (data or {}).get("result", {}).get("insertedIds", []), None

    def update_lesson(self, lesson_id: str, fields: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Set ``fields`` on the lesson ``lesson_id``.

        Returns:
            A tuple ``(result, error)`` where ``result`` holds the
            ``matchedCount`` and ``modifiedCount`` reported by the API.
        """
        data, error = self._request("PUT", f"/api/lessons/{quote(str(lesson_id), safe='')}", json_body=fields)
        if error:
            return None, error
        return (data or {}).get("result"), None

    # ------------------------------------------------------------------
    # Order operations
    # ------------------------------------------------------------------
    def place_order(
        self,
        name: str,
        phone: str,
        spaces: Dict[str, int],
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Order seats.

        Args:
            name: Customer name.
            phone: Customer phone number.
            spaces: Mapping of lesson identifier to the number of seats
                wanted.  The lesson list of the order is taken from
                its keys.
        Returns:
            A tuple ``(order, error)``.  A lesson without enough seats
            yields an error with status code 400.
        """
        payload = {
            "name": name,
            "phone": phone,
            "lessonIDs": list(spaces),
            "spaces": spaces,
        }
        data, error = self._request("POST", "/api/orders", json_body=payload)
        if error:
            return None, error
        return (data or {}).get("order"), None

    def list_orders(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/api/orders")
        if error:
            return [], error
        return (data or {}).get("results", []), None

    # ------------------------------------------------------------------
    # Search and images
    # ------------------------------------------------------------------
    def search(self, query: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Search lessons; the API returns a bare list of matches."""
        data, error = self._request("GET", "/api/search", params={"query": query})
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def image_url(self, filename: str) -> str:
        return f"{self.base_url}/images/{quote(filename)}"
