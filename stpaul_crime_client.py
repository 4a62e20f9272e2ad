"""St. Paul Crime API client.

A thin wrapper around the REST API served by ``stpaul_crime_api``,
for scripts and front ends that consume the incident feed.  The client
uses the ``requests`` library internally and exposes one method per
endpoint:

* :meth:`get_codes` – incident codes, optionally filtered.
* :meth:`get_neighborhoods` – neighborhoods, optionally filtered.
* :meth:`get_incidents` – the incident feed with date, code, grid,
  neighborhood and limit filters.
* :meth:`add_incident` – insert a new incident.
* :meth:`remove_incident` – delete an incident by case number.

Every method returns a tuple ``(result, error)``.  On success
``error`` is ``None``; on failure ``result`` is empty and ``error`` is a
dictionary with keys ``status_code`` and ``message``.  The API reports
failures as plain text, which is passed through as ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import requests


logger = logging.getLogger(__name__)

Identifiers = Union[str, int, Iterable[Union[str, int]]]


def _join(values: Optional[Identifiers]) -> Optional[str]:
    """Render an identifier or a collection of them as a comma list."""
    if values is None:
        return None
    if isinstance(values, (str, int)):
        return str(values)
    return ",".join(str(v) for v in values)


class CrimeAPIClient:
    """Client for the St. Paul Crime API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:8000",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API, e.g. ``http://localhost:8000``.
            timeout: Per‑request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Query parameters whose value is ``None`` are dropped.  JSON
        responses are decoded; plain‑text responses are returned as a
        string.
        """
        url = f"{self.base_url}{path}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        if not response.ok:
            message = response.text or response.reason or ""
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        content_type = response.headers.get("content-type", "")
        if content_type.startswith("application/json"):
            return response.json(), None
        return response.text, None

    # ------------------------------------------------------------------
    # Lookup tables
    # ------------------------------------------------------------------
    def get_codes(self, codes: Optional[Identifiers] = None) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve incident codes, optionally only the given ones."""
        data, error = self._request("GET", "/codes", params={"code": _join(codes)})
        if error:
            return [], error
        return data or [], None

    def get_neighborhoods(self, ids: Optional[Identifiers] = None) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve neighborhoods, optionally only the given numbers."""
        data, error = self._request("GET", "/neighborhoods", params={"id": _join(ids)})
        if error:
            return [], error
        return data or [], None

    # ------------------------------------------------------------------
    # Incidents
    # ------------------------------------------------------------------
    def get_incidents(
        self,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        codes: Optional[Identifiers] = None,
        grids: Optional[Identifiers] = None,
        neighborhoods: Optional[Identifiers] = None,
        limit: Optional[int] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve incidents, newest first.

        Args:
            start_date: Earliest incident date, ``YYYY-MM-DD``.
            end_date: Latest incident date, ``YYYY-MM-DD``.
            codes: Incident codes to include.
            grids: Police grids to include.
            neighborhoods: Neighborhood numbers to include.
            limit: Maximum number of rows; the server defaults to 1000.
        """
        params = {
            "start_date": start_date,
            "end_date": end_date,
            "code": _join(codes),
            "grid": _join(grids),
            "neighborhood": _join(neighborhoods),
            "limit": limit,
        }
        data, error = self._request("GET", "/incidents", params=params)
        if error:
            return [], error
        return data or [], None

    def add_incident(self, incident: Dict[str, Any]) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Insert a new incident.

        ``incident`` must carry ``case_number``, ``date``, ``time``,
        ``code``, ``incident``, ``police_grid``, ``neighborhood_number``
        and ``block``.
        """
        _, error = self._request("PUT", "/new-incident", json_body=incident)
        if error:
            return False, error
        return True, None

    def remove_incident(self, case_number: Union[str, int]) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Delete the incident with ``case_number``."""
        _, error = self._request("DELETE", "/remove-incident", json_body={"case_number": case_number})
        if error:
            return False, error
        return True, None
