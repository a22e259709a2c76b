from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import ClickOutcome
from ...holidays.service import HolidayService
from ...terms.service import TermService


class CellAction(ABC):
    """Strategy Pattern: what a click does to one (subject, date) cell."""

    @abstractmethod
    def apply(self, *, subject_id: str, date_key: str, terms: TermService, holidays: HolidayService) -> ClickOutcome:
        raise NotImplementedError
