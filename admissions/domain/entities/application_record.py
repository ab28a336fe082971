from __future__ import annotations

from dataclasses import dataclass, field

from admissions.domain.entities.document_file import DocumentFile
from admissions.domain.entities.parent_profile import ParentProfile
from admissions.domain.entities.school_selection import SchoolSelection
from admissions.domain.entities.student_details import StudentDetails


@dataclass(frozen=True)
class ApplicationRecord:
    """Persisted shape of an application. Documents carry metadata only."""

    user_id: str
    current_step: int = 0
    parent_profile: ParentProfile = field(default_factory=ParentProfile)
    student_details: StudentDetails = field(default_factory=StudentDetails)
    documents: tuple[DocumentFile, ...] = ()
    selected_schools: tuple[SchoolSelection, ...] = ()
    submitted_application_id: str | None = None
    id: str | None = None
    created_at: float | None = None
    updated_at: float | None = None
