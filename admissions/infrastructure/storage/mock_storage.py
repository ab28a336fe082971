from __future__ import annotations

import logging

from admissions.application.ports.document_storage import DocumentStoragePort
from admissions.domain.entities.uploaded_document import UploadedDocument


class MockDocumentStorage(DocumentStoragePort):
    def __init__(self, fail_names: set[str] | None = None) -> None:
        self._objects: dict[str, bytes] = {}
        self._fail_names = set(fail_names or ())
        self.upload_calls: list[str] = []
        self._logger = logging.getLogger(__name__)

    @property
    def objects(self) -> dict[str, bytes]:
        return dict(self._objects)

    def fail_on(self, *names: str) -> None:
        self._fail_names = set(names)

    async def upload(
        self,
        owner_id: str,
        content: bytes,
        name: str,
        content_type: str,
        scope_id: str,
    ) -> UploadedDocument:
        self.upload_calls.append(name)
        if name in self._fail_names:
            raise ConnectionError("storage unavailable")

        storage_path = f"applications/{owner_id}/{scope_id}/{len(self._objects) + 1}_{name}"
        self._objects[storage_path] = content
        self._logger.info("Mock document stored", extra={"document": name, "storage_path": storage_path})
        return UploadedDocument(
            name=name,
            type=content_type,
            size=len(content),
            url=f"memory://{storage_path}",
            storage_path=storage_path,
        )

    async def delete(self, storage_path: str) -> bool:
        return self._objects.pop(storage_path, None) is not None
