from __future__ import annotations

from dataclasses import replace

from admissions.domain.entities.application_form_state import ApplicationFormState
from admissions.domain.entities.application_record import ApplicationRecord
from admissions.domain.entities.uploaded_document import UploadedDocument


def with_uploaded_document(
    state: ApplicationFormState, doc_id: str, uploaded: UploadedDocument
) -> ApplicationFormState:
    """Swap a document's binary handle for its durable reference."""
    documents = tuple(
        replace(
            doc,
            name=uploaded.name,
            type=uploaded.type,
            size=uploaded.size,
            url=uploaded.url,
            storage_path=uploaded.storage_path,
            content=None,
        )
        if doc.id == doc_id
        else doc
        for doc in state.documents
    )
    return replace(state, documents=documents)


def build_record(state: ApplicationFormState, user_id: str) -> ApplicationRecord:
    """Consolidate the form into its persisted shape."""
    return ApplicationRecord(
        id=state.draft_id,
        user_id=user_id,
        current_step=state.current_step,
        parent_profile=state.parent_profile,
        student_details=state.student_details,
        documents=tuple(replace(d, content=None) for d in state.documents),
        selected_schools=state.selected_schools,
        submitted_application_id=state.submitted_application_id,
    )


def state_from_record(state: ApplicationFormState, record: ApplicationRecord, record_id: str) -> ApplicationFormState:
    """Replace form contents with a saved record, clearing transient flags."""
    return replace(
        state,
        current_step=record.current_step or 0,
        parent_profile=record.parent_profile,
        student_details=record.student_details,
        documents=tuple(record.documents),
        selected_schools=tuple(record.selected_schools),
        is_submitting=False,
        submission_error=None,
        submitted_application_id=record.submitted_application_id,
        draft_id=record_id,
    )
