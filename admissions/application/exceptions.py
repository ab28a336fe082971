class ApplicationFormError(RuntimeError):
    """Base for failures surfaced to the application wizard."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AuthenticationRequiredError(ApplicationFormError):
    """Raised when an operation needs a signed-in user and there is none."""
    pass


class DocumentUploadError(ApplicationFormError):
    """Raised when a document transfer to storage fails."""

    def __init__(self, document_name: str, reason: str) -> None:
        self.document_name = document_name
        super().__init__(f"Failed to upload {document_name}: {reason}")


class PersistenceError(ApplicationFormError):
    """Raised when the application record cannot be created, updated or fetched."""
    pass


class SubmissionRejectedError(ApplicationFormError):
    """Raised when the submission endpoint declines the finalized application."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class SubmissionInProgressError(ApplicationFormError):
    """Raised when a submission-class call overlaps one that is still running."""
    pass


class DraftNotFoundError(ApplicationFormError):
    """Raised when a saved draft does not exist for the signed-in user."""

    def __init__(self, draft_id: str) -> None:
        self.draft_id = draft_id
        super().__init__(f"Application draft {draft_id} not found")


class IntakeValidationError(ValueError):
    """Raised by intake when a finalized payload is incomplete."""
    pass


class ApplicationNotFoundError(LookupError):
    """Raised by intake when an application id is unknown."""
    pass
