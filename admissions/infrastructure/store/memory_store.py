from __future__ import annotations

import time
import uuid
from dataclasses import replace

from admissions.application.ports.application_repository import ApplicationRepositoryPort
from admissions.domain.entities.application_record import ApplicationRecord


class MemoryApplicationRepository(ApplicationRepositoryPort):
    def __init__(self) -> None:
        self._records: dict[str, dict[str, ApplicationRecord]] = {}

    async def create(self, user_id: str, record: ApplicationRecord) -> str:
        record_id = uuid.uuid4().hex
        now = time.time()
        self._records.setdefault(user_id, {})[record_id] = replace(
            record, id=record_id, user_id=user_id, created_at=now, updated_at=now
        )
        return record_id

    async def update(self, user_id: str, record_id: str, record: ApplicationRecord) -> None:
        records = self._records.setdefault(user_id, {})
        existing = records.get(record_id)
        if existing is None:
            raise KeyError(f"Application {record_id} not found")
        records[record_id] = replace(
            record,
            id=record_id,
            user_id=user_id,
            created_at=existing.created_at,
            updated_at=time.time(),
        )

    async def fetch(self, user_id: str, record_id: str) -> ApplicationRecord | None:
        return self._records.get(user_id, {}).get(record_id)

    async def list_for_user(self, user_id: str) -> list[ApplicationRecord]:
        return list(self._records.get(user_id, {}).values())

    async def delete(self, user_id: str, record_id: str) -> bool:
        return self._records.get(user_id, {}).pop(record_id, None) is not None
