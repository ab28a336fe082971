from __future__ import annotations

import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True)
class DocumentFile:
    id: str
    name: str
    type: str
    size: int
    # Live binary handle, only present until the storage service accepts it.
    content: bytes | None = field(default=None, repr=False, compare=False)
    url: str | None = None
    storage_path: str | None = None

    @property
    def is_uploaded(self) -> bool:
        return bool(self.url)

    @property
    def needs_upload(self) -> bool:
        return self.content is not None and not self.is_uploaded

    @staticmethod
    def from_bytes(name: str, content: bytes, content_type: str = "application/octet-stream") -> "DocumentFile":
        return DocumentFile(
            id=f"doc_{uuid.uuid4().hex}",
            name=(name or "").strip(),
            type=content_type,
            size=len(content),
            content=content,
        )
