"""Tests for the authentication context."""

from unittest.mock import MagicMock

import pytest

from golfezz.error_codes import ErrorCode
from golfezz.exceptions import AuthError
from golfezz.models.responses import ApiResponse
from golfezz.models.user import Role
from golfezz.services.auth_context import AuthContext
from golfezz.services.auth_context import AuthState
from golfezz.services.auth_service import AuthService
from golfezz.session import Session

from tests.conftest import ADMIN_USER, MEMBER_USER


@pytest.fixture
def auth_service(mock_http):
    service = MagicMock(spec=AuthService)
    service.client = mock_http
    service.is_authenticated.side_effect = lambda: bool(mock_http.store.load().token)
    return service


@pytest.fixture
def context(auth_service):
    return AuthContext(auth_service)


def test_initial_state(context):
    assert context.state == AuthState.LOADING
    assert context.loading
    assert not context.is_authenticated


def test_initialize_without_token_skips_profile(context, auth_service):
    """Test that no profile request is made without a token."""
    assert context.initialize() is None
    auth_service.get_profile.assert_not_called()
    assert context.state == AuthState.RESOLVED
    assert not context.loading


def test_initialize_with_token(context, auth_service, mock_http):
    """Test that a stored token resolves to the profile's user."""
    mock_http.store.save(Session(token="t1"))
    auth_service.get_profile.return_value = ApiResponse.ok(MEMBER_USER)

    user = context.initialize()

    assert user is not None and user.role == Role.MEMBER
    assert context.is_authenticated and context.is_member
    assert not context.is_admin
    mock_http.set_user.assert_called_once_with(MEMBER_USER)


def test_initialize_profile_failure_is_anonymous(context, auth_service, mock_http):
    mock_http.store.save(Session(token="expired"))
    auth_service.get_profile.return_value = ApiResponse.fail("HTTP 401: Unauthorized", 401)

    assert context.initialize() is None
    assert context.state == AuthState.RESOLVED
    assert not context.is_authenticated


def test_initialize_unknown_role_is_anonymous(context, auth_service, mock_http):
    mock_http.store.save(Session(token="t1"))
    auth_service.get_profile.return_value = ApiResponse.ok(dict(MEMBER_USER, role="caddie"))

    assert context.initialize() is None


def test_login_sets_user(context, auth_service, mock_http):
    auth_service.login.return_value = ApiResponse.ok({"token": "t1", "user": ADMIN_USER})

    user = context.login("admin@example.com", "secret123", "admin")

    assert user.role == Role.ADMIN
    assert context.is_admin and not context.is_super_admin
    assert not context.loading
    auth_service.login.assert_called_once_with("admin@example.com", "secret123", "admin")
    mock_http.set_user.assert_called_once_with(ADMIN_USER)


def test_login_failure_raises_server_message(context, auth_service):
    auth_service.login.return_value = ApiResponse.fail("Invalid email or password", 401)

    with pytest.raises(AuthError) as exc_info:
        context.login("a@example.com", "wrong")

    assert exc_info.value.message == "Invalid email or password"
    assert not context.loading
    assert context.user is None


def test_login_failure_default_message(context, auth_service):
    auth_service.login.return_value = ApiResponse(success=False)

    with pytest.raises(AuthError, match="Login failed"):
        context.login("a@example.com", "wrong")


def test_login_unknown_role_clears_credentials(context, auth_service, mock_http):
    auth_service.login.return_value = ApiResponse.ok({"token": "t1", "user": dict(MEMBER_USER, role="staff")})

    with pytest.raises(AuthError, match="Login failed") as exc_info:
        context.login("a@example.com", "secret123")

    mock_http.clear_auth_token.assert_called_once()
    assert exc_info.value.code == ErrorCode.UNKNOWN_ROLE
    assert context.user is None


def test_login_invalid_status_is_validation_failure(context, auth_service, mock_http):
    auth_service.login.return_value = ApiResponse.ok({"token": "t1", "user": dict(MEMBER_USER, status="banned")})

    with pytest.raises(AuthError, match="Invalid status") as exc_info:
        context.login("a@example.com", "secret123")

    assert exc_info.value.code == ErrorCode.VALIDATION_FAILED
    assert exc_info.value.details["field"] == "status"
    mock_http.clear_auth_token.assert_called_once()


def test_login_without_initialize_resolves_state(context, auth_service):
    """Test that an operation run before initialize still ends loading."""
    auth_service.login.return_value = ApiResponse.ok({"token": "t1", "user": MEMBER_USER})
    assert context.loading

    context.login("member@example.com", "secret123")

    assert context.state == AuthState.RESOLVED
    assert not context.loading


def test_register_failure_default_message(context, auth_service):
    auth_service.register.return_value = ApiResponse(success=False)

    with pytest.raises(AuthError, match="Registration failed"):
        context.register({"name": "New"})
    assert not context.loading


def test_register_sets_user(context, auth_service):
    auth_service.register.return_value = ApiResponse.ok({"token": "t1", "user": MEMBER_USER})

    user = context.register({"name": "Test Member"})

    assert context.user is user
    assert user.tier is not None and user.tier.value == "premium"


def test_update_profile(context, auth_service, mock_http):
    auth_service.update_profile.return_value = ApiResponse.ok(dict(MEMBER_USER, phone="+358 40 123"))

    user = context.update_profile({"phone": "+358 40 123"})

    assert user.phone == "+358 40 123"
    assert context.user is user


def test_update_profile_failure(context, auth_service):
    auth_service.update_profile.return_value = ApiResponse(success=False)

    with pytest.raises(AuthError, match="Profile update failed"):
        context.update_profile({"phone": "x"})


def test_logout_is_best_effort(context, auth_service):
    """Test that logout clears the user even when the service raises."""
    auth_service.login.return_value = ApiResponse.ok({"token": "t1", "user": MEMBER_USER})
    context.login("member@example.com", "secret123")
    auth_service.logout.side_effect = RuntimeError("network down")

    context.logout()

    assert context.user is None
    assert not context.is_authenticated
    assert not context.loading
