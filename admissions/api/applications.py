from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from admissions.api.schemas import (
    ApplicationStatusResponseSchema,
    StatusUpdateSchema,
    SubmitApplicationRequestSchema,
    SubmitApplicationResponseSchema,
)
from admissions.application.exceptions import ApplicationNotFoundError, IntakeValidationError
from admissions.application.use_cases.application_intake import NEXT_STEPS, ApplicationIntakeUseCase
from admissions.wiring.dependencies import get_intake_use_case

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/applications", response_model=SubmitApplicationResponseSchema, status_code=201)
def submit_application(
    req: SubmitApplicationRequestSchema,
    uc: ApplicationIntakeUseCase = Depends(get_intake_use_case),
):
    try:
        accepted = uc.submit(req.to_record(), req.record_id)
    except IntakeValidationError as e:
        logger.info("Application rejected", extra={"error": str(e), "user_id": req.user_id})
        raise HTTPException(status_code=400, detail=str(e))

    return SubmitApplicationResponseSchema(
        application_id=accepted.application_id,
        submitted_at=accepted.submitted_at,
        next_steps=list(NEXT_STEPS),
    )


@router.get("/applications", response_model=ApplicationStatusResponseSchema)
def get_application_status(
    application_id: str | None = Query(None, alias="id"),
    uc: ApplicationIntakeUseCase = Depends(get_intake_use_case),
):
    if not application_id:
        raise HTTPException(status_code=400, detail="Application ID required")
    try:
        accepted = uc.get_status(application_id)
    except ApplicationNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return ApplicationStatusResponseSchema(
        application_id=accepted.application_id,
        status=accepted.status,
        submitted_at=accepted.submitted_at,
        updates=[StatusUpdateSchema(date=u.date, status=u.status, message=u.message) for u in accepted.updates],
    )
