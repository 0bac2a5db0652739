"""Tests for the REST gateway: URLs, payloads and error normalization."""

from __future__ import annotations

import pytest
import requests

from roadledger.errors import (
    AuthError,
    DeleteError,
    LoadError,
    NetworkError,
    SaveError,
    UserCreationError,
)
from roadledger.services.gateway import BiltyGateway, error_message
from tests.conftest import API_URL, FakeResponse


@pytest.fixture
def gateway(config, http) -> BiltyGateway:
    return BiltyGateway(config, session=http)


def test_session_sends_json_headers(gateway, http):
    assert http.headers["Content-Type"] == "application/json"


def test_login_posts_credentials(gateway, http):
    http.queue(FakeResponse(200, {"id": 9, "username": "ravi"}))

    user = gateway.login("ravi", "secret")

    assert user.username == "ravi"
    assert http.last_call == {
        "method": "POST",
        "url": f"{API_URL}/api/login",
        "json": {"username": "ravi", "password": "secret"},
        "timeout": None,
    }


def test_login_rejection_uses_backend_message(gateway, http):
    http.queue(FakeResponse(401, {"error": "Invalid username or password"}))

    with pytest.raises(AuthError) as excinfo:
        gateway.login("ravi", "wrong")

    assert excinfo.value.message == "Invalid username or password"
    assert excinfo.value.status_code == 401


def test_login_rejection_without_message_mentions_status(gateway, http):
    http.queue(FakeResponse(403, {}))

    with pytest.raises(AuthError) as excinfo:
        gateway.login("ravi", "wrong")

    assert excinfo.value.message == "Error 403: Failed to process login."


def test_non_json_error_body_falls_back_to_status_message(gateway, http):
    http.queue(FakeResponse(500, text="<html>Internal Server Error</html>"))

    with pytest.raises(AuthError) as excinfo:
        gateway.login("ravi", "pw")

    assert excinfo.value.message == "Server Error (500). Check server logs for details."


def test_transport_failure_raises_network_error(gateway, http):
    http.queue(requests.ConnectionError("connection refused"))

    with pytest.raises(NetworkError) as excinfo:
        gateway.login("ravi", "pw")

    assert excinfo.value.message == "Cannot connect to server. Please check your API URL."


def test_create_user_errors(gateway, http):
    http.queue(FakeResponse(409, {"error": "Username already exists"}), FakeResponse(400, []))

    with pytest.raises(UserCreationError, match="Username already exists"):
        gateway.create_user("ravi", "pw")
    with pytest.raises(UserCreationError, match="Failed to create user."):
        gateway.create_user("ravi", "pw")


def test_create_user_network_message(gateway, http):
    http.queue(requests.Timeout("slow"))

    with pytest.raises(NetworkError, match="Error connecting to server for user creation."):
        gateway.create_user("ravi", "pw")


def test_list_parses_records(gateway, http, bilty_payload):
    http.queue(FakeResponse(200, [bilty_payload(1), bilty_payload(2)]))

    records = gateway.list_bilty()

    assert [r.id for r in records] == [1, 2]
    assert http.last_call["method"] == "GET"
    assert http.last_call["url"] == f"{API_URL}/api/bilty"
    assert http.last_call["json"] is None


def test_list_failure_is_load_error(gateway, http):
    http.queue(FakeResponse(503, {"error": "maintenance"}))

    with pytest.raises(LoadError, match="maintenance"):
        gateway.list_bilty()


def test_list_rejects_non_list_body(gateway, http):
    http.queue(FakeResponse(200, {"rows": []}))

    with pytest.raises(LoadError):
        gateway.list_bilty()


def test_create_and_update_target_expected_urls(gateway, http, bilty_payload):
    draft = {"bilty_sl_no": "A1", "freight": "100"}
    http.queue(FakeResponse(201, bilty_payload(1)), FakeResponse(200, bilty_payload(1)))

    gateway.create_bilty(draft)
    assert (http.last_call["method"], http.last_call["url"]) == ("POST", f"{API_URL}/api/bilty")
    assert http.last_call["json"] == draft

    gateway.update_bilty(1, draft)
    assert (http.last_call["method"], http.last_call["url"]) == ("PUT", f"{API_URL}/api/bilty/1")


def test_save_rejection_default_message(gateway, http):
    http.queue(FakeResponse(422, {"detail": "bad"}))

    with pytest.raises(SaveError, match="Failed to save entry"):
        gateway.create_bilty({})


def test_delete_issues_delete(gateway, http):
    http.queue(FakeResponse(204, text=""))

    gateway.delete_bilty(5)

    assert (http.last_call["method"], http.last_call["url"]) == ("DELETE", f"{API_URL}/api/bilty/5")


def test_delete_rejection(gateway, http):
    http.queue(FakeResponse(404, {"error": "Record not found"}))

    with pytest.raises(DeleteError, match="Record not found"):
        gateway.delete_bilty(5)


def test_timeout_comes_from_config(monkeypatch, http):
    monkeypatch.setenv("ROADLEDGER_REQUEST_TIMEOUT", "12.5")
    from roadledger.config import BaseConfig

    gateway = BiltyGateway(BaseConfig(), session=http)
    http.queue(FakeResponse(200, []))
    gateway.list_bilty()

    assert http.last_call["timeout"] == 12.5


def test_error_message_ignores_blank_error():
    assert error_message(FakeResponse(400, {"error": "  "}), "fallback") == "fallback"
