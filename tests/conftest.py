"""Pytest configuration and shared fixtures for the ledger tests.

Provides a recording stand-in for ``requests.Session``, a record payload
factory and a minimal ``flet.Page`` stub so services and views run without a
backend or a Flet window.
"""

from __future__ import annotations

import copy
from collections import deque
from typing import Any, Callable

import flet as ft
import pytest

from roadledger.config import BaseConfig
from roadledger.desktop.context import AppContext, create_app_context

API_URL = "http://ledger.test"

_NO_JSON = object()


class FakeResponse:
    """Just enough of ``requests.Response`` for the gateway."""

    def __init__(self, status_code: int = 200, body: Any = None, *, text: str | None = None):
        self.status_code = status_code
        self._body = _NO_JSON if text is not None else body
        self.text = text if text is not None else ""

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._body is _NO_JSON:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return copy.deepcopy(self._body)


class FakeSession:
    """Replays queued responses (or raises queued exceptions) and records each call."""

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.calls: list[dict[str, Any]] = []
        self._responses: deque = deque()
        self.closed = False

    def queue(self, *responses: FakeResponse | Exception) -> "FakeSession":
        self._responses.extend(responses)
        return self

    def request(self, method: str, url: str, json=None, timeout=None, **kwargs):
        self.calls.append({"method": method, "url": url, "json": json, "timeout": timeout})
        if not self._responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        response = self._responses.popleft()
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True

    @property
    def last_call(self) -> dict[str, Any]:
        return self.calls[-1]


class DummyPage:
    """Minimal stand-in for flet.Page used by view builders and the router."""

    def __init__(self) -> None:
        self.views: list[ft.View] = []
        self.route = "/"
        self.snack_bar = None
        self.dialog = None
        self.overlay: list[ft.Control] = []

    def go(self, route: str) -> None:
        self.route = route

    def update(self) -> None:
        return None

    @property
    def toast_message(self) -> str | None:
        if self.snack_bar is None:
            return None
        return self.snack_bar.content.value


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Point every test at a throwaway data dir and a fake API host."""

    monkeypatch.setenv("ROADLEDGER_DATA_DIR", str(tmp_path / "instance"))
    monkeypatch.setenv("ROADLEDGER_API_URL", API_URL)
    monkeypatch.delenv("ROADLEDGER_REQUEST_TIMEOUT", raising=False)
    monkeypatch.delenv("ROADLEDGER_DATE_FORMAT", raising=False)
    monkeypatch.delenv("ROADLEDGER_DEV_MODE", raising=False)


@pytest.fixture
def config() -> BaseConfig:
    return BaseConfig()


@pytest.fixture
def http() -> FakeSession:
    return FakeSession()


@pytest.fixture
def ctx(config: BaseConfig, http: FakeSession) -> AppContext:
    return create_app_context(config, http_session=http)


@pytest.fixture
def page() -> DummyPage:
    return DummyPage()


@pytest.fixture
def bilty_payload() -> Callable[..., dict[str, Any]]:
    """Factory for backend-shaped record dicts."""

    def _payload(record_id: int = 1, **overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": record_id,
            "bilty_sl_no": f"A{record_id}",
            "lr_no": f"LR-{record_id:03d}",
            "bill_no": f"B-{record_id:03d}",
            "bill_date": "2024-01-15T00:00:00.000Z",
            "truck_no": "AS01AB1234",
            "destination": "Guwahati",
            "weight": "2.500",
            "freight": "100.00",
            "diesel": "40.00",
            "total_adv": "60.00",
            "balance": "40.00",
            "pump_name": "Jorhat Fuels",
            "payment_officer": "R. Das",
            "damage_if_any": "",
            "margin": "12.50",
            "date_added": "2024-01-16T09:30:00.000Z",
        }
        payload.update(overrides)
        return payload

    return _payload


def find_control(root: ft.Control, predicate: Callable[[ft.Control], bool]) -> ft.Control | None:
    """Depth-first search for the first control matching predicate."""

    matches = find_controls(root, predicate)
    return matches[0] if matches else None


def find_controls(root: ft.Control, predicate: Callable[[ft.Control], bool]) -> list[ft.Control]:
    found: list[ft.Control] = []
    stack = [root]
    seen: set[int] = set()
    while stack:
        control = stack.pop(0)
        if control is None or id(control) in seen:
            continue
        seen.add(id(control))
        try:
            if predicate(control):
                found.append(control)
        except Exception:
            pass
        for attr in ("appbar", "controls", "content", "actions", "rows", "cells", "title"):
            child = getattr(control, attr, None)
            if child is None:
                continue
            if isinstance(child, list):
                stack.extend(child)
            elif isinstance(child, ft.Control):
                stack.append(child)
    return found


def texts(root: ft.Control) -> list[str]:
    return [c.value for c in find_controls(root, lambda c: isinstance(c, ft.Text)) if c.value]


def click(control: ft.Control) -> None:
    handler = getattr(control, "on_click", None)
    assert callable(handler)
    handler(type("Evt", (), {"control": control})())
