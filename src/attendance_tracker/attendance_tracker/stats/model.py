from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import StatusClass
from ..terms.model import Subject


@dataclass(frozen=True)
class AttendanceStats:
    attended: int
    missed: int
    total: int
    percentage: int


@dataclass(frozen=True)
class OverallStats:
    attended: int
    missed: int
    total: int
    percentage: int
    subject_count: int


@dataclass(frozen=True)
class SubjectPerformance:
    """Dashboard row: weighted term stats of one subject."""

    subject: Subject
    stats: AttendanceStats
    status: StatusClass
    weight: int


@dataclass(frozen=True)
class SubjectPeriodSummary:
    """Raw (unweighted) session counts of one subject over a period."""

    subject: Subject
    attended: int
    missed: int


@dataclass(frozen=True)
class ReportRow:
    """Read-model for CSV export: one tracked session."""

    date_key: str
    subject_id: str
    subject_name: str
    subject_code: str
    attended: bool
    note: str
    holiday: bool
    weight: int
