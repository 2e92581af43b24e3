"""Session-scoped authentication state."""

from typing import Optional

from mindtrade.core.exceptions import AuthenticationError
from mindtrade.domain.models import User


class AuthSession:
    """Holds the signed-in user (if any) for one client session."""

    def __init__(self, user: Optional[User] = None):
        self._user = user

    def get_user(self) -> Optional[User]:
        """Return the current user, or None when nobody is signed in."""
        return self._user

    def require_user(self) -> User:
        if self._user is None:
            raise AuthenticationError()
        return self._user

    def sign_in(self, user: User) -> None:
        self._user = user

    def sign_out(self) -> None:
        self._user = None
