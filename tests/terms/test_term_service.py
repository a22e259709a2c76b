from __future__ import annotations

from typing import Optional

import pytest

from src.attendance_tracker.attendance_tracker.core.exceptions import ValidationError
from src.attendance_tracker.attendance_tracker.state.model import AppState
from src.attendance_tracker.attendance_tracker.state.store import TrackerStore
from src.attendance_tracker.attendance_tracker.terms.model import AttendanceEntry
from src.attendance_tracker.attendance_tracker.terms.service import TermService


class InMemorySnapshots:
    def __init__(self, state: Optional[AppState] = None):
        self._state = state
        self.saves = 0

    def load(self) -> Optional[AppState]:
        return self._state

    def save(self, state: AppState) -> None:
        self._state = state
        self.saves += 1


def _service():
    repo = InMemorySnapshots()
    store = TrackerStore(repo)
    return TermService(store), store, repo


def test_add_subject_trims_and_appends_in_order():
    svc, _, repo = _service()

    a = svc.add_subject("  Mathematics ", " MA101 ")
    b = svc.add_subject("Physics LAB")

    assert a.name == "Mathematics"
    assert a.code == "MA101"
    assert [s.subject_id for s in svc.list_subjects()] == [a.subject_id, b.subject_id]
    assert a.subject_id != b.subject_id
    assert repo.saves == 2


def test_add_subject_with_blank_name_is_noop():
    svc, _, repo = _service()

    assert svc.add_subject("   ", "X") is None
    assert svc.list_subjects() == []
    assert repo.saves == 0


def test_delete_requires_confirmation():
    svc, _, repo = _service()
    s = svc.add_subject("Chemistry")
    svc.toggle_attendance(s.subject_id, "2026-01-05")
    saves = repo.saves

    assert svc.delete_subject(s.subject_id, confirmed=False) is False
    assert svc.get_subject(s.subject_id) is not None
    assert repo.saves == saves


def test_delete_cascades_only_to_that_subject():
    svc, store, _ = _service()
    a = svc.add_subject("Chemistry")
    b = svc.add_subject("Biology")
    for key in ("2026-01-05", "2026-01-06"):
        svc.toggle_attendance(a.subject_id, key)
    svc.toggle_attendance(b.subject_id, "2026-01-05")

    assert svc.delete_subject(a.subject_id, confirmed=True) is True

    assert [s.subject_id for s in svc.list_subjects()] == [b.subject_id]
    assert store.term.attendance == {"2026-01-05": {b.subject_id: AttendanceEntry(attended=True)}}


def test_delete_unknown_subject_is_idempotent():
    svc, _, repo = _service()
    assert svc.delete_subject("missing", confirmed=True) is False
    assert repo.saves == 0


def test_toggle_creates_absent_then_flips():
    svc, _, _ = _service()
    s = svc.add_subject("History")

    first = svc.toggle_attendance(s.subject_id, "2026-01-05")
    assert first == AttendanceEntry(attended=True)

    second = svc.toggle_attendance(s.subject_id, "2026-01-05")
    assert second == AttendanceEntry(attended=False)


def test_toggle_twice_restores_value_and_drops_note_once_attended():
    svc, _, _ = _service()
    s = svc.add_subject("History")
    svc.set_attendance(s.subject_id, "2026-01-05", AttendanceEntry(attended=False, note="sick"))

    svc.toggle_attendance(s.subject_id, "2026-01-05")
    svc.toggle_attendance(s.subject_id, "2026-01-05")

    assert svc.get_attendance(s.subject_id, "2026-01-05") == AttendanceEntry(attended=False, note="")


def test_toggle_unknown_subject_is_noop():
    svc, store, repo = _service()
    assert svc.toggle_attendance("ghost", "2026-01-05") is None
    assert store.term.attendance == {}
    assert repo.saves == 0


def test_set_attendance_clears_note_when_attended():
    svc, _, _ = _service()
    s = svc.add_subject("Art")
    svc.set_attendance(s.subject_id, "2026-01-05", AttendanceEntry(attended=True, note="leftover"))
    assert svc.get_attendance(s.subject_id, "2026-01-05").note == ""


def test_clear_attendance_prunes_empty_day():
    svc, store, _ = _service()
    a = svc.add_subject("Art")
    b = svc.add_subject("Music")
    svc.toggle_attendance(a.subject_id, "2026-01-05")
    svc.toggle_attendance(b.subject_id, "2026-01-05")

    assert svc.clear_attendance(a.subject_id, "2026-01-05") is True
    assert "2026-01-05" in store.term.attendance

    assert svc.clear_attendance(b.subject_id, "2026-01-05") is True
    assert store.term.attendance == {}

    assert svc.clear_attendance(b.subject_id, "2026-01-05") is False


def test_set_note_creates_absent_entry():
    svc, _, _ = _service()
    s = svc.add_subject("Art")

    assert svc.set_note(s.subject_id, "2026-01-05", "doctor visit") is True
    assert svc.get_attendance(s.subject_id, "2026-01-05") == AttendanceEntry(attended=False, note="doctor visit")


def test_set_note_on_attended_entry_is_ignored():
    svc, _, _ = _service()
    s = svc.add_subject("Art")
    svc.toggle_attendance(s.subject_id, "2026-01-05")

    assert svc.set_note(s.subject_id, "2026-01-05", "should not stick") is False
    assert svc.get_attendance(s.subject_id, "2026-01-05") == AttendanceEntry(attended=True)


def test_terms_are_independent_and_created_lazily():
    svc, store, _ = _service()
    svc.add_subject("Term one subject")

    assert svc.change_term("2") == 2
    assert svc.list_subjects() == []
    svc.add_subject("Term two subject")

    svc.change_term(1)
    assert [s.name for s in svc.list_subjects()] == ["Term one subject"]
    assert svc.known_terms() == [1, 2]
    assert store.state.current_term == 1


def test_change_term_rejects_invalid_id():
    svc, _, _ = _service()
    with pytest.raises(ValidationError):
        svc.change_term("abc")
    with pytest.raises(ValidationError):
        svc.change_term(0)
