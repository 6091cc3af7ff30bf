"""
HTTP client for the GolfEzz REST API.
"""

import time
from typing import Any

import requests

from golfezz.models.responses import ApiResponse
from golfezz.session import MemorySessionStore
from golfezz.session import SessionStore
from golfezz.utils.logging_utils import LoggerMixin


class HttpClient(LoggerMixin):
    """Client that turns every backend call into an ApiResponse envelope.

    Transport failures, timeouts and error statuses are reported in the
    envelope; no exception leaves this class.
    """
    
    DEFAULT_TIMEOUT = 10.0
    DEFAULT_HEADERS = {
        'Content-Type': 'application/json',
        'Accept': 'application/json',
    }
    REFRESH_ENDPOINT = '/auth/refresh'
    
    def __init__(
        self,
        base_url: str,
        store: SessionStore | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None
    ):
        """Initialize API client.

        Args:
            base_url: Base URL of the API, including the version prefix
            store: Session store holding the token pair
            timeout: Request timeout in seconds
            headers: Extra default headers
        """
        super().__init__()
        self.base_url = base_url.rstrip('/')
        self.store: SessionStore = store if store is not None else MemorySessionStore()
        self.timeout = timeout
        self.session = self._create_session(headers)
        self.set_log_context(base_url=self.base_url)
    
    def _create_session(self, headers: dict[str, str] | None = None) -> requests.Session:
        """
        Create the pooled requests session.
        
        Returns:
            Session with default headers
        """
        session = requests.Session()
        session.headers.update(self.DEFAULT_HEADERS)
        if headers:
            session.headers.update(headers)
        return session
    
    def close(self) -> None:
        self.session.close()
    
    # Token lifecycle
    
    def get_auth_token(self) -> str | None:
        return self.store.load().token
    
    def set_auth_token(self, token: str, refresh_token: str | None = None) -> None:
        """Store a new access token, and the refresh token when given."""
        session = self.store.load()
        session.token = token
        if refresh_token:
            session.refresh_token = refresh_token
        self.store.save(session)
    
    def set_user(self, user: dict[str, Any] | None) -> None:
        """Persist the user payload next to the tokens."""
        session = self.store.load()
        session.user = user
        self.store.save(session)
    
    def clear_auth_token(self) -> None:
        """Drop the token pair and user."""
        self.store.clear()
    
    # Verbs
    
    def get(self, endpoint: str, data: Any = None, params: dict[str, Any] | None = None) -> ApiResponse:
        return self._request('GET', endpoint, data, params)
    
    def post(self, endpoint: str, data: Any = None, params: dict[str, Any] | None = None) -> ApiResponse:
        return self._request('POST', endpoint, data, params)
    
    def put(self, endpoint: str, data: Any = None, params: dict[str, Any] | None = None) -> ApiResponse:
        return self._request('PUT', endpoint, data, params)
    
    def patch(self, endpoint: str, data: Any = None, params: dict[str, Any] | None = None) -> ApiResponse:
        return self._request('PATCH', endpoint, data, params)
    
    def delete(self, endpoint: str, data: Any = None, params: dict[str, Any] | None = None) -> ApiResponse:
        return self._request('DELETE', endpoint, data, params)
    
    # Internals
    
    @staticmethod
    def _is_auth_endpoint(endpoint: str) -> bool:
        return '/auth/' in endpoint
    
    def _build_url(self, endpoint: str) -> str:
        if endpoint.startswith(('http://', 'https://')):
            return endpoint
        return f"{self.base_url}/{endpoint.lstrip('/')}"
    
    @staticmethod
    def _clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
        """Drop empty query values."""
        if not params:
            return None
        cleaned = {k: v for k, v in params.items() if v is not None and v != ''}
        return cleaned or None
    
    def _request(
        self,
        method: str,
        endpoint: str,
        data: Any = None,
        params: dict[str, Any] | None = None,
        allow_refresh: bool = True
    ) -> ApiResponse:
        """
        Make an API request.
        
        Args:
            method: HTTP method
            endpoint: API endpoint relative to the base URL
            data: JSON body
            params: Query parameters
            allow_refresh: Whether a 401 may trigger a token refresh
            
        Returns:
            Normalized response envelope
        """
        url = self._build_url(endpoint)
        headers: dict[str, str] = {}
        token = self.get_auth_token()
        if token:
            headers['Authorization'] = f"Bearer {token}"
        
        start_time = time.time()
        self.debug(f"{method} {endpoint}", authenticated=bool(token))
        try:
            response = self.session.request(
                method,
                url,
                json=data,
                params=self._clean_params(params),
                headers=headers,
                timeout=self.timeout
            )
        except requests.exceptions.Timeout:
            self.warning(f"{method} {endpoint} timed out", timeout=self.timeout)
            return ApiResponse.fail(f"Request timed out after {self.timeout:g} seconds")
        except requests.exceptions.RequestException as e:
            self.warning(f"{method} {endpoint} failed", error=str(e))
            return ApiResponse.fail(f"Network error: {e}")
        
        self.debug(
            f"{method} {endpoint} -> {response.status_code}",
            duration=f"{time.time() - start_time:.3f}s"
        )
        
        if (
            response.status_code == 401
            and allow_refresh
            and not self._is_auth_endpoint(endpoint)
            and self._refresh_session()
        ):
            return self._request(method, endpoint, data, params, allow_refresh=False)
        
        return self._normalize(response, endpoint)
    
    def _refresh_session(self) -> bool:
        """Exchange the refresh token for a new access token.

        Returns:
            True when a new token was stored. A failed refresh clears the
            stored session; a missing refresh token leaves it untouched.
        """
        session = self.store.load()
        if not session.refresh_token:
            return False
        
        self.info("Access token rejected, refreshing")
        result = self._request(
            'POST',
            self.REFRESH_ENDPOINT,
            {'refresh_token': session.refresh_token},
            allow_refresh=False
        )
        payload = result.data if isinstance(result.data, dict) else {}
        new_token = payload.get('token')
        if not result.success or not new_token:
            self.warning("Token refresh failed, clearing session", error=result.error)
            self.clear_auth_token()
            return False
        
        session.token = new_token
        session.refresh_token = payload.get('refresh_token') or session.refresh_token
        if isinstance(payload.get('user'), dict):
            session.user = payload['user']
        self.store.save(session)
        return True
    
    @staticmethod
    def _parse_body(response: requests.Response) -> Any:
        """Parse response content.
        
        Returns:
            Parsed JSON or None if empty
            
        Raises:
            ValueError: If the body is not JSON
        """
        content = response.text.strip() if response.text else ''
        if not content:
            return None
        return response.json()
    
    def _normalize(self, response: requests.Response, endpoint: str) -> ApiResponse:
        """Convert a raw response into an envelope."""
        status = response.status_code
        try:
            body = self._parse_body(response)
        except ValueError:
            if not response.ok:
                return ApiResponse.fail(f"HTTP {status}: {response.reason}", status)
            self.warning(f"Unparseable response from {endpoint}", status=status)
            return ApiResponse.fail(f"Invalid response from server (HTTP {status})", status)
        
        if not response.ok:
            error = body.get('error') if isinstance(body, dict) else None
            return ApiResponse.fail(str(error) if error else f"HTTP {status}: {response.reason}", status)
        
        if self._is_auth_endpoint(endpoint):
            return ApiResponse.ok(body, status_code=status)
        if isinstance(body, dict) and 'success' in body:
            return ApiResponse.from_body(body, status)
        return ApiResponse.ok(body, status_code=status)
