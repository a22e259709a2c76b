from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import MULTI_CLICK_WINDOW_MS
from ..core.enums import ClickOutcome
from ..holidays.service import HolidayService
from ..terms.service import TermService
from .factory import CellActionFactory
from .model import IDLE, GestureState, NoteContext, advance

logger = logging.getLogger(__name__)


class InteractionPolicy:
    """Turns raw cell clicks into ledger changes.

    Click rules on a weekly grid cell:
    - 1st and 2nd click toggle attended/absent (never on a holiday);
    - a 3rd click on the same cell, each click less than the window after the
      previous one, clears the cell instead (un-marking the holiday when the
      date is one) and resets the gesture.

    Alternate clicks either toggle the date's holiday (with modifier) or open
    the absence note editor.

    ``lock`` should be the store's lock so a gesture step and the change it
    triggers happen as one unit.
    """

    def __init__(
        self,
        terms: TermService,
        holidays: HolidayService,
        *,
        factory: CellActionFactory | None = None,
        window_ms: int = MULTI_CLICK_WINDOW_MS,
        lock: Optional[threading.RLock] = None,
    ):
        self._terms = terms
        self._holidays = holidays
        self._factory = factory or CellActionFactory()
        self._window = timedelta(milliseconds=int(window_ms))
        self._lock = lock or threading.RLock()
        self.gesture: GestureState = IDLE
        self.note_context: Optional[NoteContext] = None

    def click(self, subject_id: str, date_key: str, *, at: datetime | None = None) -> ClickOutcome:
        at = at or now_local()
        with self._lock:
            self.gesture = advance(self.gesture, (subject_id, date_key), at, self._window)
            count = self.gesture.count
            if count >= self._factory.clear_count:
                self.gesture = IDLE

            action = self._factory.for_click(count=count, holiday=self._holidays.is_holiday(date_key))
            outcome = action.apply(subject_id=subject_id, date_key=date_key, terms=self._terms, holidays=self._holidays)
        logger.debug("click %s/%s count=%s -> %s", subject_id, date_key, count, outcome.value)
        return outcome

    def monthly_click(self, subject_id: str, date_key: str) -> ClickOutcome:
        """Month grid cells only toggle; they take part in no multi-click gesture."""
        with self._lock:
            action = self._factory.for_single_toggle(holiday=self._holidays.is_holiday(date_key))
            return action.apply(subject_id=subject_id, date_key=date_key, terms=self._terms, holidays=self._holidays)

    def alternate_click(self, subject_id: str, date_key: str, *, modifier: bool = False) -> Optional[NoteContext]:
        if modifier:
            self._holidays.toggle_holiday(date_key)
            return None

        with self._lock:
            if self._holidays.is_holiday(date_key):
                return None

            entry = self._terms.get_attendance(subject_id, date_key)
            if entry is None or entry.attended:
                return None

            subject = self._terms.get_subject(subject_id)
            if subject is None:
                return None

            self.note_context = NoteContext(
                subject_id=subject_id,
                subject_name=subject.name,
                date_key=date_key,
                current_note=entry.note,
            )
            return self.note_context

    def save_note(self, note: str) -> bool:
        with self._lock:
            ctx = self.note_context
            if ctx is None:
                return False
            self.note_context = None
            return self._terms.set_note(ctx.subject_id, ctx.date_key, note)

    def cancel_note(self) -> None:
        with self._lock:
            self.note_context = None
