from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(frozen=True)
class Subject:
    """Domain entity: a class the student attends during a term."""

    subject_id: str
    name: str
    code: str = ""


@dataclass(frozen=True)
class AttendanceEntry:
    """One tracked session of a subject on a calendar day.

    A note only describes an absence, so an attended entry never carries one.
    """

    attended: bool
    note: str = ""

    def __post_init__(self):
        if self.attended and self.note:
            object.__setattr__(self, "note", "")

    def toggled(self) -> "AttendanceEntry":
        return AttendanceEntry(attended=not self.attended, note=self.note)


@dataclass
class Term:
    """Subjects and the sparse attendance ledger of one academic term.

    ``attendance`` maps date key -> subject id -> entry. Inner mappings are
    never left empty.
    """

    subjects: list[Subject] = field(default_factory=list)
    attendance: dict[str, dict[str, AttendanceEntry]] = field(default_factory=dict)

    def find_subject(self, subject_id: str) -> Optional[Subject]:
        for s in self.subjects:
            if s.subject_id == subject_id:
                return s
        return None

    def get_entry(self, date_key: str, subject_id: str) -> Optional[AttendanceEntry]:
        return self.attendance.get(date_key, {}).get(subject_id)

    def put_entry(self, date_key: str, subject_id: str, entry: AttendanceEntry) -> None:
        self.attendance.setdefault(date_key, {})[subject_id] = entry

    def remove_entry(self, date_key: str, subject_id: str) -> bool:
        day = self.attendance.get(date_key)
        if not day or subject_id not in day:
            return False
        del day[subject_id]
        if not day:
            del self.attendance[date_key]
        return True

    def entries_for(self, subject_id: str) -> Iterator[tuple[str, AttendanceEntry]]:
        for key, day in self.attendance.items():
            entry = day.get(subject_id)
            if entry is not None:
                yield key, entry
