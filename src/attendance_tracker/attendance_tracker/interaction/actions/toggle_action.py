from __future__ import annotations

from ...core.enums import ClickOutcome
from ...holidays.service import HolidayService
from ...terms.service import TermService
from .base import CellAction


class ToggleAction(CellAction):
    """Flip attended/absent, creating an absent entry first when untracked."""

    def apply(self, *, subject_id: str, date_key: str, terms: TermService, holidays: HolidayService) -> ClickOutcome:
        if terms.toggle_attendance(subject_id, date_key) is None:
            return ClickOutcome.IGNORED
        return ClickOutcome.TOGGLED


class BlockedAction(CellAction):
    """Holidays cannot be marked."""

    def apply(self, *, subject_id: str, date_key: str, terms: TermService, holidays: HolidayService) -> ClickOutcome:
        return ClickOutcome.BLOCKED
