#!/usr/bin/env python3
"""
Local application harness (no HTTP, no browser).

Usage:
  python3 scripts/apply_local.py --user demo-user path/to/birth-certificate.pdf path/to/photo.jpg

What it does:
- Builds the ApplicationFormStore through the project wiring
- Walks the wizard with sample parent/student data and the given files
- Saves a draft, submits, and prints each step plus the final state
"""

from __future__ import annotations

import argparse
import asyncio
import mimetypes
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from admissions.application.exceptions import ApplicationFormError
from admissions.domain.entities.application_form_state import ApplicationFormState
from admissions.domain.entities.document_file import DocumentFile
from admissions.domain.entities.parent_profile import ParentProfile
from admissions.domain.entities.student_details import StudentDetails
from admissions.domain.entities.user import AuthenticatedUser
from admissions.domain.entities.wizard_step import WizardStep
from admissions.infrastructure.auth.static_auth import StaticAuthContext
from admissions.wiring.context import application_form_provider, use_application_form
from admissions.wiring.dependencies import build_application_form_store


def _print_state(state: ApplicationFormState) -> None:
    try:
        step = WizardStep(state.current_step).name
    except ValueError:
        step = str(state.current_step)
    uploaded = sum(1 for d in state.documents if d.is_uploaded)
    print(
        f"  step={step} docs={len(state.documents)} uploaded={uploaded} "
        f"schools={len(state.selected_schools)} submitting={state.is_submitting} "
        f"draft={state.draft_id} application={state.submitted_application_id} "
        f"error={state.submission_error}"
    )


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fill and submit a common application locally.")
    parser.add_argument("files", nargs="*", help="documents to attach")
    parser.add_argument("--user", default="local-user", help="signed-in user id (empty for signed out)")
    parser.add_argument("--school", action="append", default=[], help="school id to select, in preference order")
    return parser.parse_args(argv)


async def _walk_wizard(files: list[str], schools: list[str]) -> int:
    store = use_application_form()

    store.set_parent_profile(
        ParentProfile(
            first_name="Asha",
            last_name="Rao",
            email="asha.rao@example.com",
            phone="+91 98450 00000",
            city="Bengaluru",
            state="Karnataka",
        )
    )
    store.set_current_step(WizardStep.STUDENT_DETAILS)
    store.set_student_details(StudentDetails(first_name="Kiran", last_name="Rao", current_grade="Grade 3"))
    store.set_current_step(WizardStep.DOCUMENTS)

    for raw in files:
        path = Path(raw)
        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        store.add_document(DocumentFile.from_bytes(path.name, path.read_bytes(), content_type))
    store.set_current_step(WizardStep.SCHOOL_SELECTION)

    for rank, school_id in enumerate(schools or ["school-1"], start=1):
        store.toggle_school_selection(school_id, rank)
    store.set_current_step(WizardStep.REVIEW)

    try:
        draft_id = await store.save_draft()
        print(f"Draft saved: {draft_id}")
        application_id = await store.submit_application()
    except ApplicationFormError as e:
        print(f"Failed: {e.message}")
        return 1

    print(f"Submitted: {application_id}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    auth = StaticAuthContext(AuthenticatedUser(uid=args.user) if args.user else None)
    store = build_application_form_store(auth=auth)
    store.subscribe(_print_state)

    with application_form_provider(store):
        return asyncio.run(_walk_wizard(args.files, args.school))


if __name__ == "__main__":
    raise SystemExit(main())
