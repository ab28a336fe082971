from __future__ import annotations

from dataclasses import dataclass, field

from admissions.domain.entities.document_file import DocumentFile
from admissions.domain.entities.parent_profile import ParentProfile
from admissions.domain.entities.school_selection import SchoolSelection
from admissions.domain.entities.student_details import StudentDetails


@dataclass(frozen=True)
class ApplicationFormState:
    current_step: int = 0
    parent_profile: ParentProfile = field(default_factory=ParentProfile)
    student_details: StudentDetails = field(default_factory=StudentDetails)
    documents: tuple[DocumentFile, ...] = ()
    selected_schools: tuple[SchoolSelection, ...] = ()  # sorted by preference
    # Transient submission flags
    is_submitting: bool = False
    submission_error: str | None = None
    submitted_application_id: str | None = None  # assigned by the submission endpoint
    draft_id: str | None = None  # persistence record id, reused by later saves
