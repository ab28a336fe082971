from abc import ABC, abstractmethod

from admissions.domain.entities.uploaded_document import UploadedDocument


class DocumentStoragePort(ABC):
    @abstractmethod
    async def upload(
        self,
        owner_id: str,
        content: bytes,
        name: str,
        content_type: str,
        scope_id: str,
    ) -> UploadedDocument:
        """Store one file durably. Returns its URL and storage path."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, storage_path: str) -> bool:
        raise NotImplementedError
