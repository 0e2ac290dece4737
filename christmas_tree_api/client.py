"""Message board API client.

A thin wrapper around the ``/api/message`` resource using the
``requests`` library.  It mirrors what the web frontend does: list the
messages hung on the tree and post a new one.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with ``status_code`` and ``message`` keys.  Transport and HTTP errors
are logged and reported through ``error`` rather than raised.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

MESSAGE_PATH = "/api/message"


class MessageBoardAPI:
    """Client for the message board API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``https://example.com``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request and decode the JSON response."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
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
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def list_messages(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve every message.

        Returns:
            A tuple ``(messages, error)``.  ``messages`` is empty on failure.
        """
        data, error = self._request("GET", MESSAGE_PATH)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def create_message(self, description: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Post a new message.

        Args:
            description: Message text, sent as the ``description`` query
                parameter.
        Returns:
            A tuple ``(message, error)`` where ``message`` holds the
            stored ``id`` and ``description``.
        """
        data, error = self._request("POST", MESSAGE_PATH, params={"description": description})
        if error:
            return None, error
        return data, None
