from abc import ABC, abstractmethod

from admissions.domain.entities.user import AuthenticatedUser


class AuthContextPort(ABC):
    @abstractmethod
    def current_user(self) -> AuthenticatedUser | None:
        raise NotImplementedError
