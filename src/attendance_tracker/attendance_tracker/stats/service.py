from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from ..common.datetime_utils import date_key
from ..core.constants import GOOD_THRESHOLD, WARNING_THRESHOLD
from ..core.enums import StatusClass
from ..state.store import TrackerStore
from .model import AttendanceStats, OverallStats, ReportRow, SubjectPerformance, SubjectPeriodSummary
from .weighting.base import SubjectWeighting
from .weighting.lab_weighting import LabNameWeighting


def percentage(attended: int, total: int) -> int:
    """Whole percent, rounded half up; 0 when nothing was tracked."""
    if total <= 0:
        return 0
    value = Decimal(attended) * 100 / Decimal(total)
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def status_class(pct: int) -> StatusClass:
    if pct >= GOOD_THRESHOLD:
        return StatusClass.GOOD
    if pct >= WARNING_THRESHOLD:
        return StatusClass.WARNING
    return StatusClass.CRITICAL


class StatisticsService:
    """Read-only aggregates over the current term.

    Holidays are global, so a holiday date drops out of every term's numbers
    while its ledger entries stay in place.
    """

    def __init__(self, store: TrackerStore, *, weighting: Optional[SubjectWeighting] = None):
        self._store = store
        self._weighting = weighting or LabNameWeighting()

    status_class = staticmethod(status_class)
    percentage = staticmethod(percentage)

    def weight_of(self, subject_id: str) -> int:
        return self._weighting.weight(self._store.term.find_subject(subject_id))

    def subject_stats(self, subject_id: str, exclude_holidays: bool = True) -> AttendanceStats:
        weight = self.weight_of(subject_id)
        holidays = self._store.holidays
        attended = 0
        total = 0
        for key, entry in self._store.term.entries_for(subject_id):
            if exclude_holidays and key in holidays:
                continue
            total += weight
            if entry.attended:
                attended += weight
        return AttendanceStats(attended=attended, missed=total - attended, total=total, percentage=percentage(attended, total))

    def overall_stats(self) -> OverallStats:
        subjects = self._store.term.subjects
        attended = 0
        total = 0
        for s in subjects:
            stats = self.subject_stats(s.subject_id)
            attended += stats.attended
            total += stats.total
        return OverallStats(
            attended=attended,
            missed=total - attended,
            total=total,
            percentage=percentage(attended, total),
            subject_count=len(subjects),
        )

    def period_stats(self, dates: Iterable[date]) -> AttendanceStats:
        term = self._store.term
        holidays = self._store.holidays
        attended = 0
        missed = 0
        for d in dates:
            key = date_key(d)
            if key in holidays:
                continue
            for s in term.subjects:
                entry = term.get_entry(key, s.subject_id)
                if entry is None:
                    continue
                weight = self._weighting.weight(s)
                if entry.attended:
                    attended += weight
                else:
                    missed += weight
        total = attended + missed
        return AttendanceStats(attended=attended, missed=missed, total=total, percentage=percentage(attended, total))

    def subject_period_summaries(self, dates: Iterable[date]) -> list[SubjectPeriodSummary]:
        term = self._store.term
        holidays = self._store.holidays
        keys = [k for k in (date_key(d) for d in dates) if k not in holidays]

        out = []
        for s in term.subjects:
            attended = 0
            missed = 0
            for key in keys:
                entry = term.get_entry(key, s.subject_id)
                if entry is None:
                    continue
                if entry.attended:
                    attended += 1
                else:
                    missed += 1
            out.append(SubjectPeriodSummary(subject=s, attended=attended, missed=missed))
        return out

    def subject_performance(self) -> list[SubjectPerformance]:
        rows = []
        for s in self._store.term.subjects:
            stats = self.subject_stats(s.subject_id)
            rows.append(
                SubjectPerformance(
                    subject=s,
                    stats=stats,
                    status=status_class(stats.percentage),
                    weight=self._weighting.weight(s),
                )
            )
        return rows

    def report_rows(self, *, start: Optional[date] = None, end: Optional[date] = None) -> list[ReportRow]:
        start_key = date_key(start) if start else None
        end_key = date_key(end) if end else None

        rows = []
        with self._store.lock:
            term = self._store.term
            holidays = self._store.holidays
            for key in sorted(term.attendance):
                if (start_key and key < start_key) or (end_key and key > end_key):
                    continue
                day = term.attendance[key]
                for s in term.subjects:
                    entry = day.get(s.subject_id)
                    if entry is None:
                        continue
                    rows.append(
                        ReportRow(
                            date_key=key,
                            subject_id=s.subject_id,
                            subject_name=s.name,
                            subject_code=s.code,
                            attended=entry.attended,
                            note=entry.note,
                            holiday=key in holidays,
                            weight=self._weighting.weight(s),
                        )
                    )
        return rows
