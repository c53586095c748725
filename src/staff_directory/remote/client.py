"""Thin wrapper over the spreadsheet script web app.

Every call names a server-side function through the ``function`` query
parameter. Reads go out as GET with query parameters, writes as POST with a
JSON body labelled ``text/plain;charset=utf-8``. Calls are one-shot: no retry
and no backoff.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

import requests

from ..core.constants import DEFAULT_REQUEST_TIMEOUT, DENIED_MESSAGE
from ..core.exceptions import AuthorizationError, RemoteServiceError

logger = logging.getLogger(__name__)

DENIAL_CODES = frozenset({"FORBIDDEN", "UNAUTHORIZED", "DENIED"})


class ScriptClient:
    def __init__(
        self,
        script_url: str,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        if not script_url:
            raise ValueError("SCRIPT_URL is not configured")
        self._script_url = script_url
        self._timeout = timeout
        self._session = session or requests.Session()

    def _params(self, function: str, token: Optional[str], extra: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        params: Dict[str, Any] = {"function": function}
        for key, value in (extra or {}).items():
            params[key] = value
        if token:
            params["token"] = token
        return params

    def fetch_data(self, function: str, params: Optional[Mapping[str, Any]] = None, *, token: Optional[str] = None) -> Any:
        logger.debug("GET %s", function)
        try:
            response = self._session.get(
                self._script_url,
                params=self._params(function, token, params),
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error("Remote call %s failed: %s", function, e)
            raise RemoteServiceError(f"Could not reach the directory service: {e}") from e
        return self._unwrap(function, response)

    def post_data(self, function: str, payload: Mapping[str, Any], *, token: Optional[str] = None) -> Any:
        logger.debug("POST %s", function)
        try:
            response = self._session.post(
                self._script_url,
                params=self._params(function, token),
                data=json.dumps(payload),
                headers={"Content-Type": "text/plain;charset=utf-8"},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error("Remote call %s failed: %s", function, e)
            raise RemoteServiceError(f"Could not reach the directory service: {e}") from e
        return self._unwrap(function, response)

    def _unwrap(self, function: str, response: requests.Response) -> Dict[str, Any]:
        if response.status_code in (401, 403):
            logger.warning("Remote call %s denied (HTTP %s)", function, response.status_code)
            raise AuthorizationError(DENIED_MESSAGE)
        if response.status_code >= 400:
            raise RemoteServiceError(f"Directory service returned HTTP {response.status_code}")

        try:
            body = response.json()
        except ValueError as e:
            raise RemoteServiceError("Directory service returned an invalid response") from e
        if not isinstance(body, dict):
            raise RemoteServiceError("Directory service returned an invalid response")

        if str(body.get("status", "")).lower() == "error":
            code = str(body.get("code") or "").upper()
            message = body.get("message") or "Directory service error"
            if code in DENIAL_CODES:
                logger.warning("Remote call %s denied: %s", function, message)
                raise AuthorizationError(DENIED_MESSAGE)
            logger.warning("Remote call %s failed: %s", function, message)
            raise RemoteServiceError(str(message))

        return body
