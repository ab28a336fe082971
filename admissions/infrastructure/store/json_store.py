from __future__ import annotations

import asyncio
import json
import logging
import threading
import time
import uuid
from dataclasses import replace
from pathlib import Path
from typing import Any

from admissions.application.ports.application_repository import ApplicationRepositoryPort
from admissions.application.utils.record_codec import deserialize_record, serialize_record
from admissions.core.paths import safe_segment
from admissions.domain.entities.application_record import ApplicationRecord


class JsonApplicationRepository(ApplicationRepositoryPort):
    """One JSON file per record under <data_dir>/users/<uid>/applications/."""

    def __init__(self, data_dir: str = "./data/applications") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()  # Lock for managing locks dict
        self._logger = logging.getLogger(__name__)

    def _get_lock(self, key: str) -> threading.Lock:
        """Get or create a lock for a record file."""
        with self._lock_lock:
            if key not in self._locks:
                self._locks[key] = threading.Lock()
            return self._locks[key]

    def _user_dir(self, user_id: str) -> Path:
        return self._data_dir / "users" / safe_segment(user_id, "user id") / "applications"

    def _get_file_path(self, user_id: str, record_id: str) -> Path:
        return self._user_dir(user_id) / f"{safe_segment(record_id, 'record id')}.json"

    def _load(self, path: Path) -> dict[str, Any] | None:
        """Load record data from JSON file, None if missing."""
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _save(self, path: Path, data: dict[str, Any]) -> None:
        """Save record data to JSON file atomically."""
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(".json.tmp")

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            # Atomic rename
            temp_path.replace(path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise

    def _create_sync(self, user_id: str, record: ApplicationRecord) -> str:
        record_id = uuid.uuid4().hex
        path = self._get_file_path(user_id, record_id)
        now = time.time()
        stored = replace(record, id=record_id, user_id=user_id, created_at=now, updated_at=now)
        with self._get_lock(str(path)):
            self._save(path, serialize_record(stored))
        self._logger.info("Application record created", extra={"user_id": user_id, "draft_id": record_id})
        return record_id

    def _update_sync(self, user_id: str, record_id: str, record: ApplicationRecord) -> None:
        path = self._get_file_path(user_id, record_id)
        with self._get_lock(str(path)):
            existing = self._load(path)
            if existing is None:
                raise KeyError(f"Application {record_id} not found")
            stored = replace(
                record,
                id=record_id,
                user_id=user_id,
                created_at=existing.get("created_at"),
                updated_at=time.time(),
            )
            self._save(path, serialize_record(stored))
        self._logger.info("Application record updated", extra={"user_id": user_id, "draft_id": record_id})

    def _fetch_sync(self, user_id: str, record_id: str) -> ApplicationRecord | None:
        path = self._get_file_path(user_id, record_id)
        with self._get_lock(str(path)):
            data = self._load(path)
        if data is None:
            return None
        return deserialize_record(data)

    def _list_sync(self, user_id: str) -> list[ApplicationRecord]:
        user_dir = self._user_dir(user_id)
        if not user_dir.exists():
            return []
        records: list[ApplicationRecord] = []
        for path in sorted(user_dir.glob("*.json")):
            try:
                data = self._load(path)
            except (json.JSONDecodeError, IOError) as e:
                self._logger.warning("Skipping unreadable application record", extra={"path": str(path), "error": str(e)})
                continue
            if data is not None:
                records.append(deserialize_record(data))
        return sorted(records, key=lambda r: r.created_at or 0.0)

    def _delete_sync(self, user_id: str, record_id: str) -> bool:
        path = self._get_file_path(user_id, record_id)
        with self._get_lock(str(path)):
            if not path.exists():
                return False
            path.unlink()
        return True

    async def create(self, user_id: str, record: ApplicationRecord) -> str:
        return await asyncio.to_thread(self._create_sync, user_id, record)

    async def update(self, user_id: str, record_id: str, record: ApplicationRecord) -> None:
        await asyncio.to_thread(self._update_sync, user_id, record_id, record)

    async def fetch(self, user_id: str, record_id: str) -> ApplicationRecord | None:
        return await asyncio.to_thread(self._fetch_sync, user_id, record_id)

    async def list_for_user(self, user_id: str) -> list[ApplicationRecord]:
        return await asyncio.to_thread(self._list_sync, user_id)

    async def delete(self, user_id: str, record_id: str) -> bool:
        return await asyncio.to_thread(self._delete_sync, user_id, record_id)
