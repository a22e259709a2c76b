from __future__ import annotations

from dataclasses import asdict
from datetime import date

from ..common.datetime_utils import (
    date_key,
    day_name,
    format_month_year,
    format_week_range,
    month_grid_dates,
    month_start,
    shift_month,
    shift_week,
    week_dates,
    week_start,
)
from ..state.store import TrackerStore
from ..terms.model import AttendanceEntry
from .model import AttendanceStats, SubjectPeriodSummary
from .service import StatisticsService, status_class


class CalendarViewService:
    """Builds the dashboard / weekly / monthly read models for the UI layer."""

    def __init__(self, store: TrackerStore, stats: StatisticsService):
        self._store = store
        self._stats = stats

    def dashboard(self) -> dict:
        with self._store.lock:
            return self._dashboard()

    def week(self, anchor: date) -> dict:
        with self._store.lock:
            return self._week(anchor)

    def month(self, anchor: date) -> dict:
        with self._store.lock:
            return self._month(anchor)

    def _dashboard(self) -> dict:
        overall = self._stats.overall_stats()
        return {
            "term": self._store.state.current_term,
            "overall": {**asdict(overall), "status": status_class(overall.percentage).value},
            "subjects": [
                {
                    "id": row.subject.subject_id,
                    "name": row.subject.name,
                    "code": row.subject.code,
                    "weight": row.weight,
                    **asdict(row.stats),
                    "status": row.status.value,
                }
                for row in self._stats.subject_performance()
            ],
        }

    def _week(self, anchor: date) -> dict:
        start = week_start(anchor)
        days = week_dates(start)
        return {
            "label": format_week_range(start),
            "start": date_key(start),
            "previous": date_key(shift_week(start, -1)),
            "next": date_key(shift_week(start, 1)),
            "days": [self._day_header(d) for d in days],
            "rows": self._rows([date_key(d) for d in days]),
            "stats": self._stats_dict(self._stats.period_stats(days)),
            "summaries": self._summaries(self._stats.subject_period_summaries(days)),
        }

    def _month(self, anchor: date) -> dict:
        first = month_start(anchor)
        cells = month_grid_dates(first)
        in_month = [c.day for c in cells if c.in_current_month]
        keys = [c.key for c in cells]
        return {
            "label": format_month_year(first),
            "start": date_key(first),
            "previous": date_key(shift_month(first, -1)),
            "next": date_key(shift_month(first, 1)),
            "cells": [
                {**self._day_header(c.day), "in_current_month": c.in_current_month}
                for c in cells
            ],
            "rows": self._rows(keys),
            "stats": self._stats_dict(self._stats.period_stats(in_month)),
            "summaries": self._summaries(self._stats.subject_period_summaries(in_month)),
        }

    def _day_header(self, d: date) -> dict:
        key = date_key(d)
        return {"date": key, "day_name": day_name(d), "day": d.day, "holiday": key in self._store.holidays}

    def _rows(self, keys: list[str]) -> list[dict]:
        term = self._store.term
        return [
            {
                "id": s.subject_id,
                "name": s.name,
                "code": s.code,
                "cells": {key: self._cell(term.get_entry(key, s.subject_id)) for key in keys},
            }
            for s in term.subjects
        ]

    @staticmethod
    def _cell(entry: AttendanceEntry | None) -> dict | None:
        if entry is None:
            return None
        return {"attended": entry.attended, "note": entry.note}

    @staticmethod
    def _stats_dict(stats: AttendanceStats) -> dict:
        return {**asdict(stats), "status": status_class(stats.percentage).value}

    @staticmethod
    def _summaries(items: list[SubjectPeriodSummary]) -> list[dict]:
        return [
            {"id": i.subject.subject_id, "name": i.subject.name, "attended": i.attended, "missed": i.missed}
            for i in items
        ]
