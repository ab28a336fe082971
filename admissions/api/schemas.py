from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from admissions.domain.entities.application_record import ApplicationRecord
from admissions.domain.entities.document_file import DocumentFile
from admissions.domain.entities.parent_profile import ParentProfile
from admissions.domain.entities.school_selection import SchoolSelection
from admissions.domain.entities.student_details import StudentDetails


class ParentProfileSchema(BaseModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    occupation: str = ""
    income: str = ""


class StudentDetailsSchema(BaseModel):
    first_name: str = ""
    last_name: str = ""
    date_of_birth: str = ""
    gender: str = ""
    current_grade: str = ""
    current_school: str = ""
    previous_school: str = ""
    caste: str = ""
    religion: str = ""
    special_needs: bool = False
    special_needs_details: str = ""


class SchoolSelectionSchema(BaseModel):
    id: str
    name: str = ""
    slug: str = ""
    selected: bool = True
    preference: int = 1


class DocumentSchema(BaseModel):
    id: str = ""
    name: str
    type: str = ""
    size: int = 0
    url: str | None = None
    storage_path: str | None = None


class SubmitApplicationRequestSchema(BaseModel):
    user_id: str | None = None
    record_id: str | None = None
    parent_profile: ParentProfileSchema = Field(default_factory=ParentProfileSchema)
    student_details: StudentDetailsSchema = Field(default_factory=StudentDetailsSchema)
    selected_schools: list[SchoolSelectionSchema] = Field(default_factory=list)
    documents: list[DocumentSchema] = Field(default_factory=list)

    def to_record(self) -> ApplicationRecord:
        return ApplicationRecord(
            id=self.record_id,
            user_id=self.user_id or "",
            parent_profile=ParentProfile(**self.parent_profile.model_dump()),
            student_details=StudentDetails(**self.student_details.model_dump()),
            selected_schools=tuple(SchoolSelection(**s.model_dump()) for s in self.selected_schools),
            documents=tuple(DocumentFile(**d.model_dump()) for d in self.documents),
        )


class SubmitApplicationResponseSchema(BaseModel):
    success: bool = True
    application_id: str
    message: str = "Application submitted successfully"
    submitted_at: datetime
    next_steps: list[str] = Field(default_factory=list)


class StatusUpdateSchema(BaseModel):
    date: datetime
    status: str
    message: str


class ApplicationStatusResponseSchema(BaseModel):
    application_id: str
    status: str
    submitted_at: datetime
    updates: list[StatusUpdateSchema] = Field(default_factory=list)
