"""Invitation API client.

A thin wrapper around the Invitation API's REST surface for scripts and
other services (for example the invitation frontend's server side or
data migration jobs).  The client uses the ``requests`` library
internally.

The client exposes one method per route:

* :meth:`create_client`, :meth:`list_clients`, :meth:`get_client`,
  :meth:`update_client`, :meth:`delete_client`
* :meth:`create_guest`, :meth:`list_guests`, :meth:`get_guest`,
  :meth:`update_guest`, :meth:`delete_guest`
* :meth:`health`

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for the
list methods) and ``error`` is a dictionary with ``status_code``,
``message`` and ``code`` keys.  ``code`` is the machine readable error
code sent by the API, or ``None`` for transport failures.

Any object with a ``requests``‑compatible ``request`` method can be
passed as ``session``; the test suite passes FastAPI's ``TestClient``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class InvitationAPI:
    """Client for interacting with the Invitation API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``https://api.example.com``.
                Include the mount prefix if the server uses one.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
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
    ) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/clients``).
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
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc), "code": None}

        if response.status_code >= 400:
            message = ""
            code = None
            try:
                err_json = response.json()
            except ValueError:
                err_json = None
            if isinstance(err_json, dict):
                detail = err_json.get("detail")
                message = detail if isinstance(detail, str) else str(detail or err_json)
                code = err_json.get("code")
            if not message:
                message = response.text or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message, "code": code}

        if response.content:
            return response.json(), None
        return None, None

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Client operations
    # ------------------------------------------------------------------
    def create_client(self, payload: Dict[str, Any]) -> Result:
        """Create a client.

        Args:
            payload: ``name``, ``contact`` and the required ``invitation_types``.
        Returns:
            ``({"inserted_id": ...}, None)`` on success.
        """
        return self._request("POST", "/clients", json_body=payload)

    def list_clients(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        return self._list("/clients")

    def get_client(self, client_id: str) -> Result:
        return self._request("GET", f"/clients/{client_id}")

    def update_client(self, client_id: str, fields: Dict[str, Any]) -> Result:
        """Patch a client; only the keys in ``fields`` are changed."""
        return self._request("PUT", f"/clients/{client_id}", json_body=fields)

    def delete_client(self, client_id: str) -> Result:
        return self._request("DELETE", f"/clients/{client_id}")

    # ------------------------------------------------------------------
    # Guest operations
    # ------------------------------------------------------------------
    def create_guest(self, payload: Dict[str, Any]) -> Result:
        """Create a guest.  ``payload["client_id"]`` must name an existing client."""
        return self._request("POST", "/guests", json_body=payload)

    def list_guests(self, client_id: str) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Guests of ``client_id``; an empty list when it has none."""
        return self._list("/guests", params={"client_id": client_id})

    def get_guest(self, guest_id: str) -> Result:
        return self._request("GET", f"/guests/{guest_id}")

    def update_guest(self, guest_id: str, payload: Dict[str, Any]) -> Result:
        """Replace a guest's fields.  Omit ``client_id`` to keep the current one."""
        return self._request("PUT", f"/guests/{guest_id}", json_body=payload)

    def delete_guest(self, guest_id: str) -> Result:
        return self._request("DELETE", f"/guests/{guest_id}")

    def health(self) -> Result:
        return self._request("GET", "/health")
