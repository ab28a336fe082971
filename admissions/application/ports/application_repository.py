from abc import ABC, abstractmethod

from admissions.domain.entities.application_record import ApplicationRecord


class ApplicationRepositoryPort(ABC):
    @abstractmethod
    async def create(self, user_id: str, record: ApplicationRecord) -> str:
        """Store a new record. Returns its id."""
        raise NotImplementedError

    @abstractmethod
    async def update(self, user_id: str, record_id: str, record: ApplicationRecord) -> None:
        """Replace the whole record stored under record_id."""
        raise NotImplementedError

    @abstractmethod
    async def fetch(self, user_id: str, record_id: str) -> ApplicationRecord | None:
        raise NotImplementedError

    @abstractmethod
    async def list_for_user(self, user_id: str) -> list[ApplicationRecord]:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, user_id: str, record_id: str) -> bool:
        """Delete a record. Returns True if it existed."""
        raise NotImplementedError
