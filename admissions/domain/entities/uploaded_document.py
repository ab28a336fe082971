from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedDocument:
    name: str
    type: str
    size: int
    url: str
    storage_path: str
