from __future__ import annotations

import logging
import uuid
from typing import Optional

from ..common.validators import clean_text, require_term_id
from ..state.store import TrackerStore
from .model import AttendanceEntry, Subject

logger = logging.getLogger(__name__)


class TermService:
    """Use cases over the current term: subjects and the attendance ledger.

    Invalid input (blank names, unknown subjects, missing entries) is a silent
    no-op. Every call that changes state commits the store while holding its
    lock.
    """

    def __init__(self, store: TrackerStore):
        self._store = store

    @property
    def current_term(self) -> int:
        return self._store.state.current_term

    def known_terms(self) -> list[int]:
        with self._store.lock:
            return sorted(self._store.state.terms)

    def change_term(self, term_id) -> int:
        term_id = require_term_id(term_id)
        with self._store.lock:
            self._store.state.ensure_term(term_id)
            self._store.state.current_term = term_id
            self._store.commit()
        return term_id

    def list_subjects(self) -> list[Subject]:
        with self._store.lock:
            return list(self._store.term.subjects)

    def get_subject(self, subject_id: str) -> Optional[Subject]:
        return self._store.term.find_subject(subject_id)

    def add_subject(self, name: str, code: str = "") -> Optional[Subject]:
        name = clean_text(name)
        if not name:
            logger.debug("Ignoring subject with blank name")
            return None

        subject = Subject(subject_id=uuid.uuid4().hex, name=name, code=clean_text(code))
        with self._store.lock:
            self._store.term.subjects.append(subject)
            self._store.commit()
        return subject

    def delete_subject(self, subject_id: str, *, confirmed: bool) -> bool:
        if not confirmed:
            return False

        with self._store.lock:
            term = self._store.term
            if term.find_subject(subject_id) is None:
                logger.debug("Delete of unknown subject %s ignored", subject_id)
                return False

            term.subjects = [s for s in term.subjects if s.subject_id != subject_id]
            for key in [k for k, day in term.attendance.items() if subject_id in day]:
                term.remove_entry(key, subject_id)
            self._store.commit()
        return True

    def get_attendance(self, subject_id: str, date_key: str) -> Optional[AttendanceEntry]:
        return self._store.term.get_entry(date_key, subject_id)

    def set_attendance(self, subject_id: str, date_key: str, entry: AttendanceEntry) -> bool:
        with self._store.lock:
            term = self._store.term
            if term.find_subject(subject_id) is None:
                logger.debug("Attendance for unknown subject %s ignored", subject_id)
                return False
            term.put_entry(date_key, subject_id, entry)
            self._store.commit()
        return True

    def toggle_attendance(self, subject_id: str, date_key: str) -> Optional[AttendanceEntry]:
        with self._store.lock:
            term = self._store.term
            if term.find_subject(subject_id) is None:
                logger.debug("Toggle for unknown subject %s ignored", subject_id)
                return None

            current = term.get_entry(date_key, subject_id) or AttendanceEntry(attended=False)
            updated = current.toggled()
            term.put_entry(date_key, subject_id, updated)
            self._store.commit()
        return updated

    def clear_attendance(self, subject_id: str, date_key: str) -> bool:
        with self._store.lock:
            if not self._store.term.remove_entry(date_key, subject_id):
                return False
            self._store.commit()
        return True

    def set_note(self, subject_id: str, date_key: str, note: str) -> bool:
        """Attach a note to an absence.

        Creates an absent entry when the cell is untracked. Attended entries
        keep an empty note, so the call is ignored for them.
        """
        with self._store.lock:
            term = self._store.term
            if term.find_subject(subject_id) is None:
                logger.debug("Note for unknown subject %s ignored", subject_id)
                return False

            current = term.get_entry(date_key, subject_id) or AttendanceEntry(attended=False)
            if current.attended:
                logger.debug("Note on attended session %s/%s ignored", date_key, subject_id)
                return False

            term.put_entry(date_key, subject_id, AttendanceEntry(attended=False, note=note))
            self._store.commit()
        return True
