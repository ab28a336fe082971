from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path

from admissions.application.ports.document_storage import DocumentStoragePort
from admissions.core.config import settings
from admissions.core.paths import resolve_within, safe_segment
from admissions.domain.entities.uploaded_document import UploadedDocument


class LocalDocumentStorage(DocumentStoragePort):
    def __init__(
        self,
        upload_dir: str | None = None,
        public_base_url: str | None = None,
        max_bytes: int | None = None,
    ) -> None:
        self._root = Path(upload_dir or settings.UPLOAD_DIR)
        self._public_base_url = (public_base_url or settings.PUBLIC_UPLOAD_BASE_URL or "").rstrip("/")
        self._max_bytes = max_bytes or settings.MAX_DOCUMENT_BYTES
        self._logger = logging.getLogger(__name__)

    def _write(self, target: Path, content: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)

    async def upload(
        self,
        owner_id: str,
        content: bytes,
        name: str,
        content_type: str,
        scope_id: str,
    ) -> UploadedDocument:
        if not content:
            raise ValueError("No file provided")
        if len(content) > self._max_bytes:
            raise ValueError(f"File exceeds maximum size of {self._max_bytes} bytes")

        file_name = Path(name).name or "document"
        # applications/<owner>/<scope>/<millis>_<name>
        owner_id = safe_segment(owner_id, "owner id")
        scope_id = safe_segment(scope_id, "scope id")
        storage_path = f"applications/{owner_id}/{scope_id}/{int(time.time() * 1000)}_{file_name}"
        target = resolve_within(self._root, storage_path)
        await asyncio.to_thread(self._write, target, content)

        if self._public_base_url:
            url = f"{self._public_base_url}/{storage_path}"
        else:
            url = target.resolve().as_uri()

        self._logger.info(
            "Document stored",
            extra={"document": file_name, "size": len(content), "storage_path": storage_path},
        )
        return UploadedDocument(
            name=file_name,
            type=content_type,
            size=len(content),
            url=url,
            storage_path=storage_path,
        )

    async def delete(self, storage_path: str) -> bool:
        target = resolve_within(self._root, storage_path)
        if not target.exists():
            return False
        await asyncio.to_thread(target.unlink)
        self._logger.info("Document deleted", extra={"storage_path": storage_path})
        return True
