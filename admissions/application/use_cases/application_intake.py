from __future__ import annotations

import logging
import secrets
import string
import time
from dataclasses import dataclass
from datetime import datetime, timezone

from admissions.application.exceptions import ApplicationNotFoundError, IntakeValidationError
from admissions.application.ports.intake_ledger import IntakeLedgerPort
from admissions.domain.entities.accepted_application import AcceptedApplication, StatusUpdate
from admissions.domain.entities.application_record import ApplicationRecord

_ID_ALPHABET = string.ascii_uppercase + string.digits

NEXT_STEPS = (
    "Check your email for confirmation",
    "Schools will contact you within 5-7 days",
    "Track your application status in your dashboard",
)


def generate_application_id(now_ms: int | None = None) -> str:
    """APP-<epoch millis>-<9 upper-case alphanumerics>."""
    millis = now_ms if now_ms is not None else int(time.time() * 1000)
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"APP-{millis}-{suffix}"


@dataclass
class ApplicationIntakeUseCase:
    ledger: IntakeLedgerPort

    def submit(self, record: ApplicationRecord, record_id: str | None = None) -> AcceptedApplication:
        parent = record.parent_profile
        student = record.student_details

        if not parent.email or not parent.phone:
            raise IntakeValidationError("Parent profile incomplete")
        if not student.first_name or not student.last_name:
            raise IntakeValidationError("Student details incomplete")
        if not record.selected_schools:
            raise IntakeValidationError("No schools selected")

        now = datetime.now(timezone.utc)
        accepted = AcceptedApplication(
            application_id=generate_application_id(int(now.timestamp() * 1000)),
            user_id=record.user_id or None,
            record_id=record_id or record.id,
            parent_email=parent.email,
            student_name=student.full_name,
            school_count=len(record.selected_schools),
            document_count=len(record.documents),
            submitted_at=now,
            status="received",
            updates=(
                StatusUpdate(
                    date=now,
                    status="received",
                    message="Application received and documents are being reviewed",
                ),
            ),
        )
        self.ledger.add(accepted)

        logging.getLogger(__name__).info(
            "New application submitted",
            extra={
                "application_id": accepted.application_id,
                "user_id": accepted.user_id,
                "school_count": accepted.school_count,
                "document_count": accepted.document_count,
            },
        )
        return accepted

    def get_status(self, application_id: str) -> AcceptedApplication:
        accepted = self.ledger.get(application_id)
        if accepted is None:
            raise ApplicationNotFoundError(f"Application {application_id} not found")
        return accepted

