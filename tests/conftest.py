"""
Fixtures for application form store tests.
"""

from __future__ import annotations

import pytest

from admissions.application.ports.submission_gateway import SubmissionGatewayPort
from admissions.application.use_cases.application_form_store import ApplicationFormStore
from admissions.application.use_cases.application_intake import ApplicationIntakeUseCase
from admissions.domain.entities.application_record import ApplicationRecord
from admissions.domain.entities.document_file import DocumentFile
from admissions.domain.entities.parent_profile import ParentProfile
from admissions.domain.entities.student_details import StudentDetails
from admissions.domain.entities.user import AuthenticatedUser
from admissions.infrastructure.auth.static_auth import StaticAuthContext
from admissions.infrastructure.storage.mock_storage import MockDocumentStorage
from admissions.infrastructure.store.memory_ledger import MemoryIntakeLedger
from admissions.infrastructure.store.memory_store import MemoryApplicationRepository
from admissions.infrastructure.submission.local_gateway import LocalSubmissionGateway


class RecordingGateway(SubmissionGatewayPort):
    """Gateway that records calls and can be told to fail."""

    def __init__(self, application_id: str = "APP-1-TEST") -> None:
        self.application_id = application_id
        self.calls: list[tuple[ApplicationRecord, str]] = []
        self.error: Exception | None = None

    async def submit(self, record: ApplicationRecord, record_id: str) -> str:
        self.calls.append((record, record_id))
        if self.error is not None:
            raise self.error
        return self.application_id


class BrokenRepository(MemoryApplicationRepository):
    async def create(self, user_id: str, record: ApplicationRecord) -> str:
        raise ConnectionError("firestore unavailable")

    async def fetch(self, user_id: str, record_id: str) -> ApplicationRecord | None:
        raise ConnectionError("firestore unavailable")


@pytest.fixture
def user():
    return AuthenticatedUser(uid="user-123", email="asha.rao@example.com")


@pytest.fixture
def auth(user):
    return StaticAuthContext(user)


@pytest.fixture
def repository():
    return MemoryApplicationRepository()


@pytest.fixture
def broken_repository():
    return BrokenRepository()


@pytest.fixture
def storage():
    return MockDocumentStorage()


@pytest.fixture
def gateway():
    return RecordingGateway()


@pytest.fixture
def store(repository, storage, gateway, auth):
    return ApplicationFormStore(repository=repository, storage=storage, gateway=gateway, auth=auth)


@pytest.fixture
def store_factory(repository, storage, gateway, auth):
    """Fresh stores sharing the same collaborators, like a second browser tab."""

    def factory() -> ApplicationFormStore:
        return ApplicationFormStore(repository=repository, storage=storage, gateway=gateway, auth=auth)

    return factory


@pytest.fixture
def intake():
    return ApplicationIntakeUseCase(ledger=MemoryIntakeLedger())


@pytest.fixture
def intake_store(repository, storage, auth, intake):
    """Store wired to the real intake use case through the in-process gateway."""
    return ApplicationFormStore(
        repository=repository,
        storage=storage,
        gateway=LocalSubmissionGateway(intake=intake),
        auth=auth,
    )


@pytest.fixture
def parent_profile():
    return ParentProfile(
        first_name="Asha",
        last_name="Rao",
        email="asha.rao@example.com",
        phone="+91 98450 00000",
        address="12 MG Road",
        city="Bengaluru",
        state="Karnataka",
        zip_code="560001",
        occupation="Engineer",
        income="10-20 LPA",
    )


@pytest.fixture
def student_details():
    return StudentDetails(
        first_name="Kiran",
        last_name="Rao",
        date_of_birth="2017-04-02",
        gender="female",
        current_grade="Grade 2",
        current_school="Little Flower School",
    )


@pytest.fixture
def filled_store(store, parent_profile, student_details):
    """Store with profile, details, two pending documents and one school."""
    store.set_parent_profile(parent_profile)
    store.set_student_details(student_details)
    store.add_document(DocumentFile.from_bytes("birth-certificate.pdf", b"%PDF-1.4 cert", "application/pdf"))
    store.add_document(DocumentFile.from_bytes("photo.jpg", b"\xff\xd8\xff photo", "image/jpeg"))
    store.toggle_school_selection("school-1", 1, name="Greenwood High", slug="greenwood-high")
    store.set_current_step(4)
    return store
