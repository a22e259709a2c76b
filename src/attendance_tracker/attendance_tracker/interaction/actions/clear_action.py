from __future__ import annotations

from ...core.enums import ClickOutcome
from ...holidays.service import HolidayService
from ...terms.service import TermService
from .base import CellAction


class ClearEntryAction(CellAction):
    """Forget this subject's entry for the date; other subjects keep theirs."""

    def apply(self, *, subject_id: str, date_key: str, terms: TermService, holidays: HolidayService) -> ClickOutcome:
        if terms.clear_attendance(subject_id, date_key):
            return ClickOutcome.CLEARED
        return ClickOutcome.IGNORED


class ClearHolidayAction(CellAction):
    """Un-mark the holiday for the whole date."""

    def apply(self, *, subject_id: str, date_key: str, terms: TermService, holidays: HolidayService) -> ClickOutcome:
        if holidays.is_holiday(date_key):
            holidays.toggle_holiday(date_key)
        return ClickOutcome.HOLIDAY_CLEARED
