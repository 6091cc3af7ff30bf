"""Pytest configuration and shared fixtures."""

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from golfezz.api.http_client import HttpClient
from golfezz.config.settings import ConfigurationManager
from golfezz.models.responses import ApiResponse
from golfezz.session import MemorySessionStore
from golfezz.session import Session

BASE_URL = "http://api.test/api/v1"

MEMBER_USER = {
    "id": "u-1",
    "email": "member@example.com",
    "name": "Test Member",
    "role": "member",
    "status": "active",
    "membership_type": "premium",
}

ADMIN_USER = {
    "id": "u-2",
    "email": "admin@example.com",
    "name": "Test Admin",
    "role": "admin",
    "status": "active",
}


def make_response(status: int = 200, body: Any = None, reason: str = "OK", raw: bytes | None = None) -> requests.Response:
    """Build a real requests.Response with the given status and JSON body."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response.encoding = "utf-8"
    if raw is not None:
        response._content = raw
    elif body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch, tmp_path):
    """Isolate tests from the user's environment and config."""
    for var in (
        "GOLFEZZ_API_URL",
        "GOLFEZZ_TIMEOUT",
        "GOLFEZZ_SESSION_FILE",
        "GOLFEZZ_LOG_LEVEL",
        "GOLFEZZ_LOG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("GOLFEZZ_CONFIG_DIR", str(tmp_path / "config"))
    ConfigurationManager.reset()
    yield
    ConfigurationManager.reset()


@pytest.fixture
def store():
    """Empty in-memory session store."""
    return MemorySessionStore()


@pytest.fixture
def signed_in_store():
    """Session store holding a token pair and a member user."""
    return MemorySessionStore(Session(token="access-1", refresh_token="refresh-1", user=dict(MEMBER_USER)))


@pytest.fixture
def http_client(store):
    """HttpClient over an empty store."""
    client = HttpClient(BASE_URL, store=store)
    yield client
    client.close()


@pytest.fixture
def mock_http():
    """Mock HttpClient whose verbs return a successful empty envelope."""
    client = MagicMock(spec=HttpClient)
    client.store = MemorySessionStore()
    for verb in ("get", "post", "put", "patch", "delete"):
        getattr(client, verb).return_value = ApiResponse.ok()
    client.get_auth_token.side_effect = lambda: client.store.load().token
    return client
