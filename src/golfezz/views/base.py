"""
Base classes for page loaders.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from golfezz.routing import SIGN_IN_URL
from golfezz.services.auth_context import AuthState
from golfezz.utils.logging_utils import LoggerMixin

if TYPE_CHECKING:
    from golfezz.client import GolfEzzClient


@dataclass
class PageResult:
    """Outcome of loading or submitting a page.

    Either redirect is set, or data holds what the page renders. error
    carries a message to show alongside the data.
    """
    route: str
    redirect: str | None = None
    data: dict[str, Any] = field(default_factory=dict)
    error: str | None = None

    @property
    def is_redirect(self) -> bool:
        return self.redirect is not None


class Page(LoggerMixin):
    """Base class for page loaders."""
    
    route: str = '/'
    
    def __init__(self, app: 'GolfEzzClient'):
        super().__init__()
        self.app = app
        self.set_log_context(page=self.route)
    
    def ensure_auth_resolved(self) -> None:
        """Resolve the auth context once per process."""
        if self.app.auth.state == AuthState.LOADING:
            self.app.auth.initialize()
    
    def redirect(self, target: str) -> PageResult:
        self.debug(f"Redirecting to {target}")
        return PageResult(route=self.route, redirect=target)
    
    def redirect_to_sign_in(self) -> PageResult:
        return self.redirect(SIGN_IN_URL)
    
    def render(self, data: dict[str, Any] | None = None, error: str | None = None) -> PageResult:
        return PageResult(route=self.route, data=data or {}, error=error)
    
    def load(self) -> PageResult:
        raise NotImplementedError
