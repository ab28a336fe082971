from __future__ import annotations

from dataclasses import asdict
from typing import Any

from admissions.domain.entities.application_record import ApplicationRecord
from admissions.domain.entities.document_file import DocumentFile
from admissions.domain.entities.parent_profile import ParentProfile
from admissions.domain.entities.school_selection import SchoolSelection
from admissions.domain.entities.student_details import StudentDetails


def serialize_document(doc: DocumentFile) -> dict[str, Any]:
    """Serialize document metadata. The binary handle is never written out."""
    return {
        "id": doc.id,
        "name": doc.name,
        "type": doc.type,
        "size": doc.size,
        "url": doc.url,
        "storage_path": doc.storage_path,
    }


def deserialize_document(data: dict[str, Any]) -> DocumentFile:
    return DocumentFile(
        id=str(data.get("id") or ""),
        name=data.get("name", ""),
        type=data.get("type", ""),
        size=int(data.get("size") or 0),
        url=data.get("url"),
        storage_path=data.get("storage_path"),
    )


def serialize_school(school: SchoolSelection) -> dict[str, Any]:
    return asdict(school)


def deserialize_school(data: dict[str, Any]) -> SchoolSelection:
    return SchoolSelection(
        id=str(data.get("id") or ""),
        name=data.get("name", ""),
        slug=data.get("slug", ""),
        selected=bool(data.get("selected", True)),
        preference=int(data.get("preference", 1)),
    )


def _pick(cls, data: dict[str, Any] | None):
    # Drop unknown keys so older or richer records still load.
    data = data or {}
    known = cls.__dataclass_fields__.keys()
    return cls(**{k: v for k, v in data.items() if k in known})


def serialize_record(record: ApplicationRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "user_id": record.user_id,
        "current_step": record.current_step,
        "parent_profile": asdict(record.parent_profile),
        "student_details": asdict(record.student_details),
        "documents": [serialize_document(d) for d in record.documents],
        "selected_schools": [serialize_school(s) for s in record.selected_schools],
        "submitted_application_id": record.submitted_application_id,
        "created_at": record.created_at,
        "updated_at": record.updated_at,
    }


def deserialize_record(data: dict[str, Any]) -> ApplicationRecord:
    return ApplicationRecord(
        id=data.get("id"),
        user_id=data.get("user_id", ""),
        current_step=int(data.get("current_step") or 0),
        parent_profile=_pick(ParentProfile, data.get("parent_profile")),
        student_details=_pick(StudentDetails, data.get("student_details")),
        documents=tuple(deserialize_document(d) for d in data.get("documents") or []),
        selected_schools=tuple(deserialize_school(s) for s in data.get("selected_schools") or []),
        submitted_application_id=data.get("submitted_application_id"),
        created_at=data.get("created_at"),
        updated_at=data.get("updated_at"),
    )
