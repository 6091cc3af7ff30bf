"""
Process-wide authentication state.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Any

from golfezz.error_codes import ErrorCode
from golfezz.exceptions import AuthError
from golfezz.exceptions import ValidationError
from golfezz.exceptions import handle_errors
from golfezz.models.responses import ApiResponse
from golfezz.models.user import User
from golfezz.services.auth_service import AuthService
from golfezz.utils.logging_utils import LoggerMixin


class AuthState(Enum):
    LOADING = 'loading'
    RESOLVED = 'resolved'


class AuthContext(LoggerMixin):
    """Holds the signed-in user and exposes login, register, logout and profile updates.

    The context starts in LOADING and moves to RESOLVED once
    initialize() or any other operation finishes; it never goes back.
    The user received from the server is written to the session store so
    a later process can restore it.
    """
    
    def __init__(self, auth_service: AuthService):
        super().__init__()
        self.auth_service = auth_service
        self.user: User | None = None
        self.state = AuthState.LOADING
        self._in_flight = 0
        self.set_log_context(service='auth_context')
    
    @property
    def loading(self) -> bool:
        return self.state == AuthState.LOADING or self._in_flight > 0
    
    @property
    def is_authenticated(self) -> bool:
        return self.user is not None
    
    @property
    def is_admin(self) -> bool:
        return self.user is not None and self.user.is_admin
    
    @property
    def is_member(self) -> bool:
        return self.user is not None and self.user.is_member
    
    @property
    def is_super_admin(self) -> bool:
        return self.user is not None and self.user.is_super_admin
    
    @contextmanager
    def _operation(self) -> Iterator[None]:
        """Mark an operation as in flight until the block exits.

        Any finished operation leaves the context RESOLVED.
        """
        self._in_flight += 1
        try:
            yield
        finally:
            self._in_flight -= 1
            self.state = AuthState.RESOLVED
    
    def _persist_user(self, user: User | None) -> None:
        self.auth_service.client.set_user(user.to_dict() if user else None)
    
    def _parse_user(self, payload: Any, default_error: str) -> User:
        """Parse a user payload, turning bad data into AuthError."""
        if not isinstance(payload, dict):
            raise AuthError(default_error, details={'reason': 'missing user in response'}, code=ErrorCode.MISSING_USER)
        try:
            return User.from_dict(payload)
        except ValidationError as e:
            field = (e.details or {}).get('field')
            code = ErrorCode.UNKNOWN_ROLE if field == 'role' else ErrorCode.VALIDATION_FAILED
            raise AuthError(f"{default_error}: {e.message}", details=e.details, code=code) from e
    
    def initialize(self) -> User | None:
        """Resolve the session by fetching the profile when a token is stored.
        
        Returns:
            The signed-in user, or None when anonymous
        """
        with self._operation():
            try:
                if not self.auth_service.is_authenticated():
                    self.user = None
                    return None
                
                response = self.auth_service.get_profile()
                if response.success and isinstance(response.data, dict):
                    try:
                        self.user = User.from_dict(response.data)
                        self._persist_user(self.user)
                    except ValidationError as e:
                        self.warning("Stored session has an unusable user", error=e.message)
                        self.user = None
                else:
                    self.debug("Profile fetch failed, continuing anonymously", error=response.error)
                    self.user = None
                return self.user
            finally:
                self.state = AuthState.RESOLVED
    
    def _complete_auth(self, response: ApiResponse, default_error: str) -> User:
        if not response.success or not response.data:
            raise AuthError(response.error or default_error)
        try:
            user = self._parse_user(response.data.get('user') if isinstance(response.data, dict) else None, default_error)
        except AuthError:
            # A user that cannot be routed must not stay signed in
            self.auth_service.client.clear_auth_token()
            raise
        self.user = user
        self._persist_user(user)
        return user
    
    def login(self, email: str, password: str, expected_role: str | None = None) -> User:
        """
        Log in and set the current user.
        
        Args:
            email: Account email
            password: Account password
            expected_role: Role the sign-in form was opened for, if any
            
        Returns:
            The signed-in user
            
        Raises:
            AuthError: With the server's message, or "Login failed"
        """
        with self._operation(), handle_errors(AuthError, 'auth_context', 'login'):
            response = self.auth_service.login(email, password, expected_role)
            return self._complete_auth(response, 'Login failed')
    
    def register(self, data: dict[str, Any]) -> User:
        """
        Register a new account and set the current user.
        
        Raises:
            AuthError: With the server's message, or "Registration failed"
        """
        with self._operation(), handle_errors(AuthError, 'auth_context', 'register'):
            response = self.auth_service.register(data)
            return self._complete_auth(response, 'Registration failed')
    
    def update_profile(self, data: dict[str, Any]) -> User:
        """
        Update the current user's profile.
        
        Raises:
            AuthError: With the server's message, or "Profile update failed"
        """
        with self._operation(), handle_errors(AuthError, 'auth_context', 'update_profile'):
            response = self.auth_service.update_profile(data)
            if not response.success or not response.data:
                raise AuthError(response.error or 'Profile update failed')
            self.user = self._parse_user(response.data, 'Profile update failed')
            self._persist_user(self.user)
            return self.user
    
    def logout(self) -> None:
        """Clear the user and the stored session, even if the server call fails."""
        with self._operation():
            try:
                self.auth_service.logout()
            except Exception as e:
                self.warning("Logout request raised, session cleared locally", error=str(e))
            finally:
                self.user = None
