from dataclasses import dataclass


@dataclass(frozen=True)
class AuthenticatedUser:
    uid: str
    email: str | None = None
