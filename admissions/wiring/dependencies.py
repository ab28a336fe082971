from functools import lru_cache
import logging

from admissions.application.ports.application_repository import ApplicationRepositoryPort
from admissions.application.ports.auth_context import AuthContextPort
from admissions.application.ports.document_storage import DocumentStoragePort
from admissions.application.ports.submission_gateway import SubmissionGatewayPort
from admissions.application.use_cases.application_form_store import ApplicationFormStore
from admissions.application.use_cases.application_intake import ApplicationIntakeUseCase
from admissions.core.config import settings
from admissions.domain.entities.user import AuthenticatedUser
from admissions.infrastructure.auth.static_auth import StaticAuthContext
from admissions.infrastructure.storage.local_storage import LocalDocumentStorage
from admissions.infrastructure.storage.mock_storage import MockDocumentStorage
from admissions.infrastructure.store.json_store import JsonApplicationRepository
from admissions.infrastructure.store.memory_ledger import MemoryIntakeLedger
from admissions.infrastructure.store.memory_store import MemoryApplicationRepository
from admissions.infrastructure.submission.http_gateway import HttpSubmissionGateway
from admissions.infrastructure.submission.local_gateway import LocalSubmissionGateway


_repository: ApplicationRepositoryPort | None = None


def _is_local() -> bool:
    return settings.ENV.lower() in {"dev", "local"}


def get_application_repository() -> ApplicationRepositoryPort:
    global _repository
    if _repository is None:
        provider = (settings.STORE_PROVIDER or ("json" if _is_local() else "memory")).lower()
        if provider == "json":
            _repository = JsonApplicationRepository(data_dir=settings.DATA_DIR)
        elif provider == "memory":
            _repository = MemoryApplicationRepository()
        else:
            raise ValueError(f"Unknown STORE_PROVIDER: {settings.STORE_PROVIDER}")
    return _repository


@lru_cache
def get_intake_use_case() -> ApplicationIntakeUseCase:
    return ApplicationIntakeUseCase(ledger=MemoryIntakeLedger())


def get_document_storage() -> DocumentStoragePort:
    if settings.ENV.lower() == "test":
        return MockDocumentStorage()
    return LocalDocumentStorage()


def get_submission_gateway() -> SubmissionGatewayPort:
    logger = logging.getLogger(__name__)
    if settings.SUBMISSION_ENDPOINT:
        logger.info("Using HttpSubmissionGateway", extra={"endpoint": settings.SUBMISSION_ENDPOINT})
        return HttpSubmissionGateway(
            endpoint=settings.SUBMISSION_ENDPOINT,
            timeout=settings.SUBMISSION_TIMEOUT_SECONDS,
        )
    if not _is_local() and settings.ENV.lower() != "test":
        raise ValueError("SUBMISSION_ENDPOINT is required outside dev/local.")
    logger.info("Using LocalSubmissionGateway (SUBMISSION_ENDPOINT unset)")
    return LocalSubmissionGateway(intake=get_intake_use_case())


def get_auth_context() -> AuthContextPort:
    if settings.DEMO_USER_ID:
        return StaticAuthContext(AuthenticatedUser(uid=settings.DEMO_USER_ID, email=settings.DEMO_USER_EMAIL))
    return StaticAuthContext()


def build_application_form_store(auth: AuthContextPort | None = None) -> ApplicationFormStore:
    return ApplicationFormStore(
        repository=get_application_repository(),
        storage=get_document_storage(),
        gateway=get_submission_gateway(),
        auth=auth or get_auth_context(),
    )
