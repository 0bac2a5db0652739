"""HTTP gateway for the roadways ledger REST backend.

Thin wrapper over a shared :class:`requests.Session`. Each call maps transport
failures to :class:`NetworkError` and non-2xx responses to the error kind of
the operation, preferring the backend's ``{"error": "..."}`` message.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Type

import requests
from pydantic import ValidationError

from ..config import BaseConfig
from ..errors import (
    AuthError,
    DeleteError,
    LedgerError,
    LoadError,
    NetworkError,
    SaveError,
    UserCreationError,
)
from ..logging_config import get_logger
from ..models.bilty import BiltyRecord
from ..models.user import User

logger = get_logger(__name__)

CONNECT_FAILED = "Cannot connect to server. Please check your API URL."


def server_error_message(status_code: int) -> str:
    return f"Server Error ({status_code}). Check server logs for details."


def error_message(response: requests.Response, default: str) -> str:
    """Extract the backend's error text, falling back when the body is unusable.

    ``default`` may contain a ``{status}`` placeholder.
    """

    try:
        body = response.json()
    except ValueError:
        return server_error_message(response.status_code)
    if isinstance(body, dict):
        message = body.get("error")
        if isinstance(message, str) and message.strip():
            return message
    return default.format(status=response.status_code)


class BiltyGateway:
    """Issue login, user and bilty CRUD calls against the configured backend."""

    def __init__(
        self,
        config: BaseConfig,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.timeout = config.REQUEST_TIMEOUT
        self.http = session if session is not None else requests.Session()
        self.http.headers.update(
            {"Content-Type": "application/json", "Accept": "application/json"}
        )

    def _send(
        self,
        method: str,
        path: str,
        *,
        payload: Optional[Mapping[str, Any]] = None,
        error_cls: Type[LedgerError],
        default_message: str,
        network_message: str = CONNECT_FAILED,
    ) -> requests.Response:
        url = self.config.endpoint(path)
        logger.debug(f"{method} {url}")
        try:
            response = self.http.request(
                method,
                url,
                json=dict(payload) if payload is not None else None,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error(
                f"{method} {path} failed to reach backend: {exc}",
                extra={"event": "network_error", "url": url},
            )
            raise NetworkError(network_message) from exc

        if not response.ok:
            message = error_message(response, default_message)
            logger.warning(
                f"{method} {path} rejected",
                extra={"event": "http_error", "status": response.status_code, "error_message": message},
            )
            raise error_cls(message, status_code=response.status_code)

        logger.info(f"{method} {path} -> {response.status_code}")
        return response

    def _json(self, response: requests.Response, error_cls: Type[LedgerError], what: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            logger.error(f"Malformed response while {what}", extra={"status": response.status_code})
            raise error_cls(f"Unexpected response from server while {what}.") from exc

    def _record(self, body: Any, error_cls: Type[LedgerError], what: str) -> BiltyRecord:
        if not isinstance(body, dict):
            raise error_cls(f"Unexpected response from server while {what}.")
        try:
            return BiltyRecord.model_validate(body)
        except ValidationError as exc:
            logger.error(f"Invalid record while {what}: {exc}")
            raise error_cls(f"Unexpected response from server while {what}.") from exc

    def login(self, username: str, password: str) -> User:
        response = self._send(
            "POST",
            "/api/login",
            payload={"username": username, "password": password},
            error_cls=AuthError,
            default_message="Error {status}: Failed to process login.",
        )
        body = self._json(response, AuthError, "logging in")
        if not isinstance(body, dict):
            raise AuthError("Unexpected response from server while logging in.")
        try:
            return User.model_validate({**body, "username": body.get("username") or username})
        except ValidationError as exc:
            raise AuthError("Unexpected response from server while logging in.") from exc

    def create_user(self, username: str, password: str) -> None:
        self._send(
            "POST",
            "/api/users",
            payload={"username": username, "password": password},
            error_cls=UserCreationError,
            default_message="Failed to create user.",
            network_message="Error connecting to server for user creation.",
        )

    def list_bilty(self) -> list[BiltyRecord]:
        response = self._send(
            "GET", "/api/bilty", error_cls=LoadError, default_message="Failed to fetch data"
        )
        body = self._json(response, LoadError, "loading records")
        if not isinstance(body, list):
            raise LoadError("Unexpected response from server while loading records.")
        return [self._record(item, LoadError, "loading records") for item in body]

    def create_bilty(self, draft: Mapping[str, str]) -> BiltyRecord:
        response = self._send(
            "POST", "/api/bilty", payload=draft, error_cls=SaveError,
            default_message="Failed to save entry",
        )
        return self._record(self._json(response, SaveError, "saving"), SaveError, "saving")

    def update_bilty(self, record_id: int, draft: Mapping[str, str]) -> BiltyRecord:
        response = self._send(
            "PUT", f"/api/bilty/{record_id}", payload=draft, error_cls=SaveError,
            default_message="Failed to save entry",
        )
        return self._record(self._json(response, SaveError, "saving"), SaveError, "saving")

    def delete_bilty(self, record_id: int) -> None:
        self._send(
            "DELETE", f"/api/bilty/{record_id}", error_cls=DeleteError,
            default_message="Failed to delete record",
        )
