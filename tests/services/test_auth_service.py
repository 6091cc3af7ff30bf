"""Tests for the authentication service."""

from unittest.mock import patch

import pytest
from requests.exceptions import ConnectionError

from golfezz.api.http_client import HttpClient
from golfezz.models.responses import ApiResponse
from golfezz.services.auth_service import AuthService
from golfezz.session import MemorySessionStore
from golfezz.session import Session

from tests.conftest import BASE_URL, MEMBER_USER, make_response


@pytest.fixture
def auth_service(mock_http):
    return AuthService(mock_http)


def test_login_stores_credentials(auth_service, mock_http):
    """Test that a successful login stores tokens and user."""
    mock_http.post.return_value = ApiResponse.ok(
        {"token": "t1", "refresh_token": "r1", "user": MEMBER_USER}
    )

    response = auth_service.login("member@example.com", "secret123", "member")

    assert response.success
    mock_http.post.assert_called_once_with(
        "/auth/login",
        {"email": "member@example.com", "password": "secret123", "expected_role": "member"}
    )
    mock_http.set_auth_token.assert_called_once_with("t1", "r1")
    mock_http.set_user.assert_called_once_with(MEMBER_USER)


def test_failed_login_stores_nothing(auth_service, mock_http):
    """Test that a failed login leaves the store untouched."""
    mock_http.post.return_value = ApiResponse.fail("Invalid credentials", 401)

    response = auth_service.login("member@example.com", "wrong")

    assert not response.success
    mock_http.post.assert_called_once_with("/auth/login", {"email": "member@example.com", "password": "wrong"})
    mock_http.set_auth_token.assert_not_called()


def test_register_without_token(auth_service, mock_http):
    """Test that registration without a returned token stores nothing."""
    mock_http.post.return_value = ApiResponse.ok({"user": MEMBER_USER})

    auth_service.register({"name": "New", "email": "n@example.com", "password": "x" * 8})

    mock_http.set_auth_token.assert_not_called()


@pytest.mark.parametrize("method,args,verb,endpoint", [
    ("get_profile", (), "get", "/auth/profile"),
    ("update_profile", ({"phone": "123"},), "put", "/auth/profile"),
    ("change_password", ("old", "new"), "post", "/auth/change-password"),
    ("refresh", ("r1",), "post", "/auth/refresh"),
])
def test_endpoints(auth_service, mock_http, method, args, verb, endpoint):
    """Test that each call hits its route."""
    getattr(auth_service, method)(*args)
    assert getattr(mock_http, verb).call_args.args[0] == endpoint


def test_logout_clears_storage_on_network_failure():
    """Test logout clears the stored session even when the server call fails."""
    store = MemorySessionStore(Session(token="t1", refresh_token="r1", user=dict(MEMBER_USER)))
    client = HttpClient(BASE_URL, store=store)
    service = AuthService(client)

    with patch.object(client.session, "request", side_effect=ConnectionError("down")):
        response = service.logout()

    assert response is not None and not response.success
    assert store.load().is_empty
    assert not service.is_authenticated()


def test_logout_clears_storage_when_call_raises(auth_service, mock_http):
    """Test logout clears the stored session when the client raises."""
    mock_http.store.save(Session(token="t1", refresh_token="r1"))
    mock_http.post.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError):
        auth_service.logout()

    mock_http.clear_auth_token.assert_called_once()


def test_logout_server_error_response():
    """Test logout clears the stored session after an error status."""
    store = MemorySessionStore(Session(token="t1"))
    client = HttpClient(BASE_URL, store=store)
    service = AuthService(client)

    with patch.object(client.session, "request", return_value=make_response(500, {}, "Internal Server Error")):
        service.logout()

    assert store.load().token is None


def test_is_authenticated(auth_service, mock_http):
    assert not auth_service.is_authenticated()
    mock_http.store.save(Session(token="t1"))
    assert auth_service.is_authenticated()
