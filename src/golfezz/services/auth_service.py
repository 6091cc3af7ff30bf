"""
Authentication service for the GolfEzz API.
"""

from typing import Any

from golfezz.models.responses import ApiResponse
from golfezz.services.base_service import BaseService
from golfezz.utils.logging_utils import log_execution


class AuthService(BaseService):
    """Login, registration and profile calls."""
    
    def _store_credentials(self, response: ApiResponse) -> None:
        """Persist the token pair and user from a login or register response."""
        if not response.success or not isinstance(response.data, dict):
            return
        token = response.data.get('token')
        if not token:
            return
        self.client.set_auth_token(token, response.data.get('refresh_token'))
        user = response.data.get('user')
        if isinstance(user, dict):
            self.client.set_user(user)
    
    @log_execution(level='DEBUG')
    def login(self, email: str, password: str, expected_role: str | None = None) -> ApiResponse:
        """Log in with email and password.
        
        Args:
            email: Account email
            password: Account password
            expected_role: Role the sign-in form was opened for, if any
            
        Returns:
            Envelope whose data holds token, refresh_token and user
        """
        payload: dict[str, Any] = {'email': email, 'password': password}
        if expected_role:
            payload['expected_role'] = expected_role
        response = self.client.post('/auth/login', payload)
        self._store_credentials(response)
        if response.success:
            self.info("Logged in", email=email)
        else:
            self.warning("Login failed", email=email, error=response.error)
        return response
    
    @log_execution(level='DEBUG')
    def register(self, data: dict[str, Any]) -> ApiResponse:
        """Register a new account, storing the token when one is returned."""
        response = self.client.post('/auth/register', data)
        self._store_credentials(response)
        return response
    
    def get_profile(self) -> ApiResponse:
        return self.client.get('/auth/profile')
    
    def update_profile(self, data: dict[str, Any]) -> ApiResponse:
        return self.client.put('/auth/profile', data)
    
    def change_password(self, old_password: str, new_password: str) -> ApiResponse:
        return self.client.post(
            '/auth/change-password',
            {'old_password': old_password, 'new_password': new_password}
        )
    
    def refresh(self, refresh_token: str) -> ApiResponse:
        """Exchange a refresh token for a new access token."""
        response = self.client.post('/auth/refresh', {'refresh_token': refresh_token})
        self._store_credentials(response)
        return response
    
    def logout(self) -> ApiResponse | None:
        """Log out on the server and always clear the stored session.
        
        Returns:
            The server's envelope, or None if the call raised
        """
        response = None
        try:
            response = self.client.post('/auth/logout')
            if not response.success:
                self.warning("Server-side logout failed", error=response.error)
        finally:
            self.client.clear_auth_token()
        return response
    
    def is_authenticated(self) -> bool:
        return bool(self.client.get_auth_token())
