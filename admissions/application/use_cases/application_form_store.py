from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable

from admissions.application.exceptions import (
    ApplicationFormError,
    AuthenticationRequiredError,
    DocumentUploadError,
    DraftNotFoundError,
    PersistenceError,
    SubmissionInProgressError,
    SubmissionRejectedError,
)
from admissions.application.ports.application_repository import ApplicationRepositoryPort
from admissions.application.ports.auth_context import AuthContextPort
from admissions.application.ports.document_storage import DocumentStoragePort
from admissions.application.ports.submission_gateway import SubmissionGatewayPort
from admissions.application.utils.state_helpers import build_record, state_from_record, with_uploaded_document
from admissions.domain.entities.application_form_state import ApplicationFormState
from admissions.domain.entities.application_record import ApplicationRecord
from admissions.domain.entities.document_file import DocumentFile
from admissions.domain.entities.parent_profile import ParentProfile
from admissions.domain.entities.school_selection import SchoolSelection
from admissions.domain.entities.student_details import StudentDetails
from admissions.domain.entities.user import AuthenticatedUser
from admissions.domain.entities.wizard_step import WizardStep

Listener = Callable[[ApplicationFormState], None]

DRAFT_SCOPE = "draft"


class ApplicationFormStore:
    """
    Holds the application-in-progress and mediates every change to it.

    State is an immutable snapshot that gets swapped on each mutation;
    subscribers are called with the new snapshot. Synchronous mutators never
    fail. The async operations (submit, save, load) talk to the collaborators,
    record any failure in `submission_error` and re-raise it.
    """

    def __init__(
        self,
        repository: ApplicationRepositoryPort,
        storage: DocumentStoragePort,
        gateway: SubmissionGatewayPort,
        auth: AuthContextPort,
    ) -> None:
        self._repository = repository
        self._storage = storage
        self._gateway = gateway
        self._auth = auth
        self._state = ApplicationFormState()
        self._listeners: list[Listener] = []
        self._in_flight: str | None = None
        self._logger = logging.getLogger(__name__)

    @property
    def state(self) -> ApplicationFormState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: ApplicationFormState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    # Mutations

    def set_parent_profile(self, profile: ParentProfile) -> None:
        self._set_state(replace(self._state, parent_profile=profile))

    def set_student_details(self, details: StudentDetails) -> None:
        self._set_state(replace(self._state, student_details=details))

    def add_document(self, doc: DocumentFile) -> None:
        self._set_state(replace(self._state, documents=self._state.documents + (doc,)))

    def remove_document(self, doc_id: str) -> None:
        documents = tuple(d for d in self._state.documents if d.id != doc_id)
        if len(documents) != len(self._state.documents):
            self._set_state(replace(self._state, documents=documents))

    def toggle_school_selection(self, school_id: str, preference: int = 1, name: str = "", slug: str = "") -> None:
        """
        Deselect the school if selected, otherwise add it at `preference`.

        A reselected school does not get its old rank back; callers own rank
        coordination.
        """
        current = self._state.selected_schools
        if any(s.id == school_id for s in current):
            schools = tuple(s for s in current if s.id != school_id)
        else:
            added = SchoolSelection(id=school_id, name=name, slug=slug, selected=True, preference=preference)
            schools = tuple(sorted(current + (added,), key=lambda s: s.preference))
        self._set_state(replace(self._state, selected_schools=schools))

    def set_current_step(self, step: int) -> None:
        self._set_state(replace(self._state, current_step=step))

    def reset_form(self) -> None:
        self._in_flight = None
        self._set_state(ApplicationFormState())

    # Orchestration

    async def submit_application(self) -> str:
        """Upload pending documents, persist the record and finalize it. Returns the application id."""
        self._ensure_idle("submission")
        user = self._require_user("Please sign in to submit an application")

        self._in_flight = "submission"
        self._logger.info(
            "Starting application submission",
            extra={"user_id": user.uid, "document_count": len(self._state.documents)},
        )
        try:
            self._set_state(replace(self._state, is_submitting=True, submission_error=None))
            await self._upload_pending_documents(user)
            record_id = await self._persist(user)
            application_id = await self._finalize(user, record_id)
            await self._mark_submitted(user, record_id, application_id)
        except ApplicationFormError as e:
            self._set_state(replace(self._state, is_submitting=False, submission_error=e.message))
            self._logger.error("Application submission failed", extra={"user_id": user.uid, "error": e.message})
            raise
        except BaseException:
            # Cancellation or a failing subscriber must not leave the form locked.
            self._set_state(replace(self._state, is_submitting=False))
            raise
        finally:
            self._in_flight = None

        self._set_state(
            replace(
                self._state,
                is_submitting=False,
                submitted_application_id=application_id,
                current_step=WizardStep.CONFIRMATION,
            )
        )
        self._logger.info(
            "Application submitted",
            extra={"user_id": user.uid, "draft_id": record_id, "application_id": application_id},
        )
        return application_id

    async def save_draft(self) -> str:
        """Upload pending documents and create or update the draft record. Returns the record id."""
        self._ensure_idle("draft save")
        user = self._require_user("Please sign in to save a draft")

        self._in_flight = "draft save"
        try:
            self._set_state(replace(self._state, submission_error=None))
            await self._upload_pending_documents(user)
            record_id = await self._persist(user)
        except ApplicationFormError as e:
            self._record_error(e)
            raise
        finally:
            self._in_flight = None

        self._logger.info("Application draft saved", extra={"user_id": user.uid, "draft_id": record_id})
        return record_id

    async def load_application_draft(self, draft_id: str) -> None:
        self._ensure_idle("draft load")
        user = self._require_user("Please sign in to load a draft")

        self._in_flight = "draft load"
        try:
            try:
                record = await self._repository.fetch(user.uid, draft_id)
            except Exception as e:
                self._logger.exception("Failed to fetch application draft", extra={"draft_id": draft_id})
                raise PersistenceError(f"Failed to load application draft: {e}") from e
            if record is None:
                raise DraftNotFoundError(draft_id)
        except ApplicationFormError as e:
            self._record_error(e)
            raise
        finally:
            self._in_flight = None

        self._set_state(state_from_record(self._state, record, draft_id))
        self._logger.info(
            "Application draft loaded",
            extra={"user_id": user.uid, "draft_id": draft_id, "step": record.current_step},
        )

    async def list_saved_applications(self) -> list[ApplicationRecord]:
        user = self._auth.current_user()
        if user is None:
            return []
        try:
            return await self._repository.list_for_user(user.uid)
        except Exception as e:
            raise PersistenceError(f"Failed to list applications: {e}") from e

    async def discard_draft(self, draft_id: str) -> None:
        """Delete a saved record and its stored documents. Resets the form if it was the active draft."""
        self._ensure_idle("draft discard")
        user = self._require_user("Please sign in to delete an application")

        self._in_flight = "draft discard"
        try:
            record = await self._repository.fetch(user.uid, draft_id)
            if record is None:
                raise DraftNotFoundError(draft_id)
            for doc in record.documents:
                if doc.storage_path:
                    await self._storage.delete(doc.storage_path)
            await self._repository.delete(user.uid, draft_id)
        except ApplicationFormError:
            raise
        except Exception as e:
            raise PersistenceError(f"Failed to delete application draft: {e}") from e
        finally:
            self._in_flight = None

        self._logger.info("Application draft discarded", extra={"user_id": user.uid, "draft_id": draft_id})
        if self._state.draft_id == draft_id:
            self.reset_form()

    # Internals

    def _ensure_idle(self, operation: str) -> None:
        if self._in_flight is not None or self._state.is_submitting:
            running = self._in_flight or "submission"
            raise SubmissionInProgressError(f"Cannot start {operation} while a {running} is in progress")

    def _require_user(self, message: str) -> AuthenticatedUser:
        user = self._auth.current_user()
        if user is None:
            error = AuthenticationRequiredError(message)
            self._record_error(error)
            raise error
        return user

    def _record_error(self, error: ApplicationFormError) -> None:
        self._set_state(replace(self._state, submission_error=error.message))

    async def _upload_pending_documents(self, user: AuthenticatedUser) -> None:
        scope_id = self._state.draft_id or DRAFT_SCOPE
        pending = [d for d in self._state.documents if d.needs_upload]
        for doc in pending:
            self._logger.info("Uploading document", extra={"document": doc.name, "size": doc.size})
            try:
                uploaded = await self._storage.upload(
                    owner_id=user.uid,
                    content=doc.content or b"",
                    name=doc.name,
                    content_type=doc.type,
                    scope_id=scope_id,
                )
            except Exception as e:
                self._logger.exception("Document upload failed", extra={"document": doc.name})
                raise DocumentUploadError(doc.name, str(e) or type(e).__name__) from e
            # Committed per document so a retry skips what already made it.
            self._set_state(with_uploaded_document(self._state, doc.id, uploaded))

    async def _persist(self, user: AuthenticatedUser) -> str:
        record = build_record(self._state, user.uid)
        draft_id = self._state.draft_id
        try:
            if draft_id:
                await self._repository.update(user.uid, draft_id, record)
                record_id = draft_id
            else:
                record_id = await self._repository.create(user.uid, record)
        except Exception as e:
            self._logger.exception("Failed to persist application", extra={"draft_id": draft_id})
            raise PersistenceError(f"Failed to save application: {e}") from e

        if record_id != draft_id:
            self._set_state(replace(self._state, draft_id=record_id))
        return record_id

    async def _finalize(self, user: AuthenticatedUser, record_id: str) -> str:
        record = replace(
            build_record(self._state, user.uid),
            id=record_id,
            selected_schools=tuple(s for s in self._state.selected_schools if s.selected),
        )
        try:
            application_id = await self._gateway.submit(record, record_id)
        except SubmissionRejectedError:
            raise
        except Exception as e:
            raise SubmissionRejectedError(f"Submission failed: {e}") from e
        if not application_id:
            raise SubmissionRejectedError("Submission endpoint returned no application id")
        return application_id

    async def _mark_submitted(self, user: AuthenticatedUser, record_id: str, application_id: str) -> None:
        """Store the endpoint's application id on the saved record."""
        record = replace(
            build_record(self._state, user.uid),
            id=record_id,
            current_step=WizardStep.CONFIRMATION,
            submitted_application_id=application_id,
        )
        try:
            await self._repository.update(user.uid, record_id, record)
        except Exception:
            # The endpoint already accepted the application; the next save_draft carries the id.
            self._logger.exception(
                "Failed to record application id on saved record",
                extra={"draft_id": record_id, "application_id": application_id},
            )
