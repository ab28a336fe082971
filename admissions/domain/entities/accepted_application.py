from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class StatusUpdate:
    date: datetime
    status: str
    message: str


@dataclass(frozen=True)
class AcceptedApplication:
    application_id: str
    user_id: str | None
    record_id: str | None
    parent_email: str
    student_name: str
    school_count: int
    document_count: int
    submitted_at: datetime
    status: str = "received"  # "received", "under_review"
    updates: tuple[StatusUpdate, ...] = field(default_factory=tuple)
