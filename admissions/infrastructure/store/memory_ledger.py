from __future__ import annotations

from admissions.application.ports.intake_ledger import IntakeLedgerPort
from admissions.domain.entities.accepted_application import AcceptedApplication


class MemoryIntakeLedger(IntakeLedgerPort):
    def __init__(self) -> None:
        self._applications: dict[str, AcceptedApplication] = {}

    def add(self, application: AcceptedApplication) -> None:
        self._applications[application.application_id] = application

    def get(self, application_id: str) -> AcceptedApplication | None:
        return self._applications.get(application_id)
