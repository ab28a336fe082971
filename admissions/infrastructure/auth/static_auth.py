from __future__ import annotations

from admissions.application.ports.auth_context import AuthContextPort
from admissions.domain.entities.user import AuthenticatedUser


class StaticAuthContext(AuthContextPort):
    """Auth context with a fixed (or no) signed-in user, switchable at runtime."""

    def __init__(self, user: AuthenticatedUser | None = None) -> None:
        self._user = user

    def current_user(self) -> AuthenticatedUser | None:
        return self._user

    def sign_in(self, user: AuthenticatedUser) -> None:
        self._user = user

    def sign_out(self) -> None:
        self._user = None
