from __future__ import annotations

import json

import httpx
import pytest

from admissions.application.exceptions import SubmissionRejectedError
from admissions.domain.entities.application_record import ApplicationRecord
from admissions.domain.entities.parent_profile import ParentProfile
from admissions.domain.entities.school_selection import SchoolSelection
from admissions.infrastructure.submission.http_gateway import HttpSubmissionGateway

ENDPOINT = "https://admissions.example.com/api/applications"


def _record() -> ApplicationRecord:
    return ApplicationRecord(
        user_id="user-1",
        parent_profile=ParentProfile(email="asha@example.com", phone="123"),
        selected_schools=(SchoolSelection(id="school-1", preference=1),),
    )


@pytest.mark.asyncio
async def test_submit_posts_payload_and_returns_id():
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"success": True, "application_id": "APP-1-ABC"})

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    gateway = HttpSubmissionGateway(endpoint=ENDPOINT, client=client)

    application_id = await gateway.submit(_record(), "rec-1")
    await gateway.aclose()

    assert application_id == "APP-1-ABC"
    assert seen["url"] == ENDPOINT
    assert seen["body"]["record_id"] == "rec-1"
    assert seen["body"]["user_id"] == "user-1"
    assert seen["body"]["parent_profile"]["email"] == "asha@example.com"
    assert seen["body"]["selected_schools"][0]["id"] == "school-1"


@pytest.mark.asyncio
async def test_submit_rejection_carries_status_and_detail():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"detail": "No schools selected"})

    gateway = HttpSubmissionGateway(endpoint=ENDPOINT, client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    with pytest.raises(SubmissionRejectedError) as exc_info:
        await gateway.submit(_record(), "rec-1")

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "API returned 400: No schools selected"


@pytest.mark.asyncio
async def test_submit_rejection_with_plain_text_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad Gateway")

    gateway = HttpSubmissionGateway(endpoint=ENDPOINT, client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    with pytest.raises(SubmissionRejectedError, match="API returned 502: Bad Gateway"):
        await gateway.submit(_record(), "rec-1")


@pytest.mark.asyncio
async def test_submit_rejection_with_json_array_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json=[{"loc": ["body", "parent_profile"], "msg": "field required"}])

    gateway = HttpSubmissionGateway(endpoint=ENDPOINT, client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    with pytest.raises(SubmissionRejectedError) as exc_info:
        await gateway.submit(_record(), "rec-1")

    assert exc_info.value.status_code == 422
    assert exc_info.value.message.startswith("API returned 422: ")
    assert "field required" in exc_info.value.message
