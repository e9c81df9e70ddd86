"""Dating admin API client.

This module defines a small client wrapper around the back-office REST
API, for scripts and integrations that need what the dashboard sees:
statistics, users, moderation queues, transactions, events, messages,
API keys and the API call log.  The client uses the ``requests``
library internally.

Every method returns a tuple ``(data, error)``: on success ``error`` is
``None``; on failure ``data`` is empty (``None`` or ``[]``) and
``error`` is a dictionary with ``status_code`` and ``message``.  The
client never raises for HTTP or network failures.

Authentication is optional.  Call :meth:`login` to obtain a bearer
token, or pass ``token='<token>'`` at construction (for example one
produced by ``create_token.py``).  Pass ``api_key='loveapp_...'`` to
have calls recorded in the API call log under that key.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class DatingAdminAPI:
    """Client for the dating admin back-office API."""

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        api_key: Optional[str] = None,
        api_key_header: str = "X-API-Key",
        prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server root, e.g. ``https://admin.example.com``.
            token: Optional bearer token sent as ``Authorization``.
            api_key: Optional API key sent in ``api_key_header``.
            prefix: Path prefix of the API routes.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + prefix.rstrip("/")
        self.token = token
        self.api_key = api_key
        self.api_key_header = api_key_header
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``PATCH``).
            path: Path relative to the API prefix (e.g. ``/users``).
            params: Query parameters; ``None`` values are dropped.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        if self.api_key:
            headers[self.api_key_header] = self.api_key
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params or None,
                json=json_body,
                headers=headers,
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
                    message = str(err_json.get("detail") or err_json.get("error") or err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def login(self, email: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Log in as an administrator and keep the returned token.

        Returns:
            A tuple ``(admin, error)``.
        """
        data, error = self._request("POST", "/auth/login", json_body={"email": email, "password": password})
        if error:
            return None, error
        self.token = data.get("token")
        return data.get("admin"), None

    def me(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/auth/me")

    # ------------------------------------------------------------------
    # Dashboard and users
    # ------------------------------------------------------------------
    def get_stats(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/stats")

    def list_users(
        self,
        status: Optional[str] = None,
        verification: Optional[str] = None,
        subscription: Optional[str] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """List users, filtered like the dashboard's user table.

        Args:
            status: ``"Active"``, ``"Inactive"`` or ``None`` for all.
            verification: ``"Verified"``, ``"Unverified"`` or ``None``.
            subscription: Forwarded as-is; the server ignores it.
        """
        return self._list(
            "/users",
            params={"status": status, "verification": verification, "subscription": subscription},
        )

    def get_user(self, user_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/users/{user_id}")

    def update_user(self, user_id: str, updates: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/users/{user_id}", json_body=updates)

    # ------------------------------------------------------------------
    # Moderation
    # ------------------------------------------------------------------
    def list_reports(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/reports")

    def update_report_status(self, report_id: str, status: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/reports/{report_id}", json_body={"status": status})

    def list_verifications(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/verifications")

    def update_verification_status(
        self, verification_id: str, status: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/verifications/{verification_id}", json_body={"status": status})

    def list_events(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/events")

    def update_event_status(self, event_id: str, status: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/events/{event_id}", json_body={"status": status})

    # ------------------------------------------------------------------
    # Payments and messages
    # ------------------------------------------------------------------
    def list_transactions(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/transactions")

    def list_messages(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/messages")

    def flag_message(self, message_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", f"/messages/{message_id}/flag")

    # ------------------------------------------------------------------
    # API keys and logs
    # ------------------------------------------------------------------
    def list_api_logs(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/logs")

    def list_api_keys(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/apikeys")

    def create_api_key(self, name: str, email: Optional[str] = None) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/apikeys", json_body={"name": name, "email": email})

    def revoke_api_key(self, key: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", f"/apikeys/{key}/revoke")

    def reactivate_api_key(self, key: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", f"/apikeys/{key}/reactivate")
