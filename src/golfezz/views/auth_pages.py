"""
Sign-in and registration pages.
"""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from golfezz.exceptions import AuthError
from golfezz.routing import get_dashboard_url
from golfezz.views.base import Page
from golfezz.views.base import PageResult

if TYPE_CHECKING:
    from golfezz.client import GolfEzzClient

EMAIL_PATTERN = re.compile(r'\S+@\S+\.\S+')
PHONE_PATTERN = re.compile(r'^\+?[\d\s\-\(\)]+$')
MIN_PASSWORD_LENGTH = 8


class SignInPage(Page):
    
    route = '/auth/signin'
    
    def load(self) -> PageResult:
        """Already signed-in users go straight to their dashboard."""
        self.ensure_auth_resolved()
        if self.app.auth.user is not None:
            return self.redirect(get_dashboard_url(self.app.auth.user))
        return self.render()
    
    def submit(self, email: str, password: str, expected_role: str | None = None) -> PageResult:
        """
        Sign in with the submitted credentials.
        
        Args:
            email: Email field value
            password: Password field value
            expected_role: member or admin, depending on the form used
            
        Returns:
            Redirect to the user's dashboard, or the form with an error
        """
        if not email or not password:
            return self.render({'email': email}, error='Please fill in all fields')
        try:
            user = self.app.auth.login(email, password, expected_role)
        except AuthError as e:
            return self.render({'email': email}, error=e.message)
        return self.redirect(get_dashboard_url(user))


@dataclass
class RegistrationForm:
    """Fields of the member registration form."""
    name: str = ''
    email: str = ''
    password: str = ''
    confirm_password: str = ''
    phone: str = ''
    date_of_birth: str = ''
    membership_type: str = 'basic'
    agree_to_terms: bool = False
    agree_to_marketing: bool = False


class RegistrationWizard(Page):
    """Two-step member registration.

    Step one collects account details, step two contact details and
    terms. Invalid input never reaches the network.
    """
    
    route = '/auth/register-new'
    
    def __init__(self, app: 'GolfEzzClient', form: RegistrationForm | None = None):
        super().__init__(app)
        self.form = form or RegistrationForm()
        self.step = 1
        self.form_error: str | None = None
    
    def load(self) -> PageResult:
        return self.render({'step': self.step, 'form': self.form}, error=self.form_error)
    
    def validate_step1(self) -> str | None:
        form = self.form
        if not form.name.strip():
            return 'Name is required'
        if not form.email.strip():
            return 'Email is required'
        if not EMAIL_PATTERN.search(form.email):
            return 'Invalid email format'
        if not form.password:
            return 'Password is required'
        if len(form.password) < MIN_PASSWORD_LENGTH:
            return f'Password must be at least {MIN_PASSWORD_LENGTH} characters'
        if form.password != form.confirm_password:
            return 'Passwords do not match'
        return None
    
    def validate_step2(self) -> str | None:
        form = self.form
        if form.phone and not PHONE_PATTERN.match(form.phone):
            return 'Invalid phone number'
        if not form.agree_to_terms:
            return 'You must agree to the terms and conditions'
        return None
    
    def next_step(self) -> PageResult:
        """Advance to step two when step one is valid."""
        self.form_error = self.validate_step1()
        if self.form_error is None:
            self.step = 2
        return self.load()
    
    def previous_step(self) -> PageResult:
        self.form_error = None
        self.step = 1
        return self.load()
    
    def _payload(self) -> dict[str, Any]:
        form = self.form
        payload: dict[str, Any] = {
            'name': form.name,
            'email': form.email,
            'password': form.password,
            'role': 'member',
            'membership_type': form.membership_type,
        }
        if form.phone:
            payload['phone'] = form.phone
        if form.date_of_birth:
            payload['date_of_birth'] = form.date_of_birth
        return payload
    
    def submit(self) -> PageResult:
        """
        Validate both steps and register the member.
        
        Returns:
            Redirect to the new member's dashboard, or the form with an error
        """
        self.form_error = self.validate_step1()
        if self.form_error is not None:
            self.step = 1
            return self.load()
        self.form_error = self.validate_step2()
        if self.form_error is not None:
            return self.load()
        
        try:
            user = self.app.auth.register(self._payload())
        except AuthError as e:
            self.form_error = e.message
            return self.load()
        return self.redirect(get_dashboard_url(user))
