from __future__ import annotations

import logging
from typing import Any

import httpx

from admissions.application.exceptions import SubmissionRejectedError
from admissions.application.ports.submission_gateway import SubmissionGatewayPort
from admissions.application.utils.record_codec import serialize_record
from admissions.domain.entities.application_record import ApplicationRecord


def build_submission_payload(record: ApplicationRecord, record_id: str) -> dict[str, Any]:
    data = serialize_record(record)
    return {
        "user_id": record.user_id,
        "record_id": record_id,
        "parent_profile": data["parent_profile"],
        "student_details": data["student_details"],
        "selected_schools": data["selected_schools"],
        "documents": data["documents"],
    }


class HttpSubmissionGateway(SubmissionGatewayPort):
    def __init__(
        self,
        endpoint: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    async def submit(self, record: ApplicationRecord, record_id: str) -> str:
        payload = build_submission_payload(record, record_id)
        resp = await self._client.post(self._endpoint, json=payload)
        if resp.status_code >= 400:
            error_body = resp.text
            try:
                error_message = resp.json().get("detail") or error_body
            except Exception:
                error_message = error_body

            self._logger.error(
                "Application submission rejected",
                extra={
                    "status": resp.status_code,
                    "error": error_message,
                    "draft_id": record_id,
                },
            )
            raise SubmissionRejectedError(f"API returned {resp.status_code}: {error_message}", status_code=resp.status_code)

        data = resp.json()
        application_id = data.get("application_id")
        self._logger.info("Application accepted", extra={"application_id": application_id, "draft_id": record_id})
        return application_id

    async def aclose(self) -> None:
        await self._client.aclose()
