"""
Tests for the synchronous form mutations.
"""

from __future__ import annotations

from admissions.domain.entities.application_form_state import ApplicationFormState
from admissions.domain.entities.document_file import DocumentFile
from admissions.domain.entities.parent_profile import ParentProfile
from admissions.domain.entities.student_details import StudentDetails


def _doc(doc_id: str, name: str) -> DocumentFile:
    return DocumentFile(id=doc_id, name=name, type="application/pdf", size=10, content=b"0123456789")


def test_initial_state_is_empty(store):
    state = store.state
    assert state.current_step == 0
    assert state.parent_profile == ParentProfile()
    assert state.student_details == StudentDetails()
    assert state.documents == ()
    assert state.selected_schools == ()
    assert state.is_submitting is False
    assert state.submission_error is None
    assert state.submitted_application_id is None
    assert state.draft_id is None


def test_set_parent_profile_replaces_wholesale(store, parent_profile):
    store.set_parent_profile(parent_profile)
    assert store.state.parent_profile == parent_profile

    store.set_parent_profile(ParentProfile(first_name="Meera"))
    assert store.state.parent_profile.first_name == "Meera"
    assert store.state.parent_profile.email == ""


def test_set_student_details_does_not_validate(store):
    """Special-needs details are the UI's concern, the store takes whatever it gets."""
    details = StudentDetails(first_name="Kiran", special_needs=True, special_needs_details="")
    store.set_student_details(details)
    assert store.state.student_details == details


def test_remove_document_keeps_survivor_order(store):
    for doc_id, name in [("a", "one.pdf"), ("b", "two.pdf"), ("c", "three.pdf"), ("d", "four.pdf")]:
        store.add_document(_doc(doc_id, name))

    store.remove_document("b")
    store.remove_document("d")

    assert [d.id for d in store.state.documents] == ["a", "c"]


def test_remove_birth_certificate_leaves_photo(store):
    cert = DocumentFile.from_bytes("birth-certificate.pdf", b"cert", "application/pdf")
    photo = DocumentFile.from_bytes("photo.jpg", b"photo", "image/jpeg")
    store.add_document(cert)
    store.add_document(photo)

    store.remove_document(cert.id)

    assert len(store.state.documents) == 1
    assert store.state.documents[0].name == "photo.jpg"


def test_remove_unknown_document_is_noop(store):
    store.add_document(_doc("a", "one.pdf"))
    seen: list[ApplicationFormState] = []
    store.subscribe(seen.append)

    store.remove_document("missing")

    assert [d.id for d in store.state.documents] == ["a"]
    assert seen == []


def test_duplicate_names_are_accepted(store):
    store.add_document(_doc("a", "report.pdf"))
    store.add_document(_doc("b", "report.pdf"))
    assert [d.id for d in store.state.documents] == ["a", "b"]


def test_generated_document_ids_are_unique():
    first = DocumentFile.from_bytes("a.pdf", b"x")
    second = DocumentFile.from_bytes("a.pdf", b"x")
    assert first.id != second.id
    assert first.needs_upload and not first.is_uploaded
    assert first.size == 1


def test_toggle_selects_in_preference_order(store):
    store.toggle_school_selection("school-1", 1)
    store.toggle_school_selection("school-2", 2)

    assert [(s.id, s.preference) for s in store.state.selected_schools] == [("school-1", 1), ("school-2", 2)]
    assert all(s.selected for s in store.state.selected_schools)


def test_toggle_sorts_by_preference(store):
    store.toggle_school_selection("school-3", 3)
    store.toggle_school_selection("school-1", 1)
    store.toggle_school_selection("school-2", 2)

    assert [s.id for s in store.state.selected_schools] == ["school-1", "school-2", "school-3"]


def test_toggle_twice_removes_school(store):
    store.toggle_school_selection("school-1", 1)
    store.toggle_school_selection("school-2", 2)

    store.toggle_school_selection("school-1", 1)

    assert [s.id for s in store.state.selected_schools] == ["school-2"]


def test_toggle_defaults_preference_to_one(store):
    store.toggle_school_selection("school-1")
    assert store.state.selected_schools[0].preference == 1


def test_reselect_does_not_restore_previous_rank(store):
    """Known quirk: a reselected school takes whatever rank the caller passes."""
    store.toggle_school_selection("school-1", 1)
    store.toggle_school_selection("school-2", 2)
    store.toggle_school_selection("school-1", 1)

    store.toggle_school_selection("school-1", 2)

    ranks = [(s.id, s.preference) for s in store.state.selected_schools]
    assert ranks == [("school-2", 2), ("school-1", 2)]


def test_set_current_step_has_no_bounds_check(store):
    store.set_current_step(3)
    assert store.state.current_step == 3
    store.set_current_step(42)
    assert store.state.current_step == 42


def test_reset_form_restores_initial_state(filled_store):
    filled_store.reset_form()
    assert filled_store.state == ApplicationFormState()


def test_subscribers_receive_each_change(store, parent_profile):
    seen: list[ApplicationFormState] = []
    unsubscribe = store.subscribe(seen.append)

    store.set_parent_profile(parent_profile)
    store.set_current_step(1)
    unsubscribe()
    store.set_current_step(2)

    assert len(seen) == 2
    assert seen[0].parent_profile == parent_profile
    assert seen[1].current_step == 1
