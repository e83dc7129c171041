"""
Route guard for the admin area.

UNAUTHENTICATED -> CHECKING -> AUTHENTICATED on every protected page load.
Trust is purely local: the stored token is never validated against a server,
an expired one only shows up when an API call fails.
"""
from enum import Enum

from core.session_store import SessionStore

LOGIN_ROUTE = "/admin/login"
SIGNUP_ROUTE = "/admin/signup"
HOME_ROUTE = "/admin/dashboard"
PUBLIC_ROUTES = (LOGIN_ROUTE, SIGNUP_ROUTE)


class AuthState(Enum):
    UNAUTHENTICATED = "unauthenticated"
    CHECKING = "checking"
    AUTHENTICATED = "authenticated"


class AuthGate:

    def __init__(self, store: SessionStore):
        self.store = store
        self.state = AuthState.UNAUTHENTICATED
        self.session = None

    @property
    def authenticated(self) -> bool:
        return self.state is AuthState.AUTHENTICATED

    def check(self, route: str):
        """
        Re-read the stored session for `route`.

        Returns:
            str | None: route to redirect to, or None to render `route`
        """
        self.state = AuthState.CHECKING
        self.session = self.store.load()

        if self.session is None:
            self.state = AuthState.UNAUTHENTICATED
            return None if route in PUBLIC_ROUTES else LOGIN_ROUTE

        self.state = AuthState.AUTHENTICATED
        if route in PUBLIC_ROUTES:
            return HOME_ROUTE
        return None

    def login(self, token: str, user: dict):
        self.session = self.store.save(token, user)
        self.state = AuthState.AUTHENTICATED
        return HOME_ROUTE

    def logout(self):
        self.store.clear()
        self.session = None
        self.state = AuthState.UNAUTHENTICATED
        return LOGIN_ROUTE
