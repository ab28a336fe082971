from __future__ import annotations

import logging

from admissions.application.exceptions import IntakeValidationError, SubmissionRejectedError
from admissions.application.ports.submission_gateway import SubmissionGatewayPort
from admissions.application.use_cases.application_intake import ApplicationIntakeUseCase
from admissions.domain.entities.application_record import ApplicationRecord


class LocalSubmissionGateway(SubmissionGatewayPort):
    """Hands submissions straight to the intake use case, no HTTP hop."""

    def __init__(self, intake: ApplicationIntakeUseCase) -> None:
        self._intake = intake
        self._logger = logging.getLogger(__name__)

    async def submit(self, record: ApplicationRecord, record_id: str) -> str:
        try:
            accepted = self._intake.submit(record, record_id)
        except IntakeValidationError as e:
            self._logger.warning("Application rejected by intake", extra={"draft_id": record_id, "error": str(e)})
            raise SubmissionRejectedError(str(e), status_code=400) from e
        return accepted.application_id
