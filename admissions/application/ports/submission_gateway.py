from abc import ABC, abstractmethod

from admissions.domain.entities.application_record import ApplicationRecord


class SubmissionGatewayPort(ABC):
    @abstractmethod
    async def submit(self, record: ApplicationRecord, record_id: str) -> str:
        """Send a finalized application. Returns the assigned application id."""
        raise NotImplementedError
