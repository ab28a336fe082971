from abc import ABC, abstractmethod

from admissions.domain.entities.accepted_application import AcceptedApplication


class IntakeLedgerPort(ABC):
    @abstractmethod
    def add(self, application: AcceptedApplication) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, application_id: str) -> AcceptedApplication | None:
        raise NotImplementedError
