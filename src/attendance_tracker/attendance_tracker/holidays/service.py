from __future__ import annotations

from ..state.store import TrackerStore


class HolidayService:
    """Global holiday dates, shared by every term and subject."""

    def __init__(self, store: TrackerStore):
        self._store = store

    def is_holiday(self, date_key: str) -> bool:
        return date_key in self._store.holidays

    def list_holidays(self) -> list[str]:
        with self._store.lock:
            return sorted(self._store.holidays)

    def toggle_holiday(self, date_key: str) -> bool:
        with self._store.lock:
            holidays = self._store.holidays
            if date_key in holidays:
                holidays.discard(date_key)
            else:
                holidays.add(date_key)
            self._store.commit()
            return date_key in holidays
