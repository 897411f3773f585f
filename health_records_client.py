"""Health Records API client.

This module defines a small client wrapper around the REST API served
by ``health_records_api``.  It uses the ``requests`` library
internally and exposes one method per service operation:

* :meth:`create_user`, :meth:`get_user`, :meth:`list_users`,
  :meth:`update_user`, :meth:`delete_user`
* :meth:`create_health_record`, :meth:`get_health_record`,
  :meth:`list_health_records`, :meth:`update_health_record`,
  :meth:`delete_health_record`
* :meth:`list_health_records_for_user`

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``.  On failure ``data`` is ``None`` (an empty list for list
operations) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  Transport failures are reported with
``status_code`` set to ``None``.

Payloads are plain dictionaries using the wire field names, e.g.
``{"name": "Ana", "age": 30, "location": "NYC"}`` or
``{"userId": "...", "allergies": [], "conditions": [], "medications": []}``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class HealthRecordsAPI:
    """Client for the Health Records API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Path prefix of the versioned API.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and return ``(data, error)``."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            try:
                err_json = response.json()
                message = err_json.get("detail") if isinstance(err_json, dict) else None
                message = message if message is not None else str(err_json)
            except ValueError:
                message = response.text
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        if response.content:
            return response.json(), None
        return None, None

    def _resource_path(self, collection: str, resource_id: str) -> Tuple[Optional[str], Optional[Error]]:
        """Build ``collection/<id>`` with the id quoted as one path segment.

        An empty id never reaches the server: it would otherwise hit the
        collection route instead of a single resource.
        """
        if not resource_id:
            return None, {"status_code": 404, "message": f"Invalid id={resource_id!r}."}
        return f"{collection}/{quote(resource_id, safe='')}", None

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def _request_resource(
        self, method: str, collection: str, resource_id: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        path, error = self._resource_path(collection, resource_id)
        if error:
            return None, error
        return self._request(method, path, json_body=json_body)

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/users/", json_body=payload)

    def get_user(self, user_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request_resource("GET", "/users", user_id)

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/users/")

    def update_user(self, user_id: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace name, age and location of a user."""
        return self._request_resource("PUT", "/users", user_id, json_body=payload)

    def delete_user(self, user_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete a user and return the removed record."""
        return self._request_resource("DELETE", "/users", user_id)

    # ------------------------------------------------------------------
    # Health record operations
    # ------------------------------------------------------------------
    def create_health_record(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/health-records/", json_body=payload)

    def get_health_record(self, record_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request_resource("GET", "/health-records", record_id)

    def list_health_records(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/health-records/")

    def update_health_record(
        self, record_id: str, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request_resource("PUT", "/health-records", record_id, json_body=payload)

    def delete_health_record(self, record_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request_resource("DELETE", "/health-records", record_id)

    def list_health_records_for_user(self, user_id: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return the health records referencing ``user_id``.

        The server does not check that the user exists, so an unknown
        user, or an empty ``user_id``, yields an empty list rather than
        an error.
        """
        if not user_id:
            return [], None
        return self._list(f"/users/{quote(user_id, safe='')}/health-records")
