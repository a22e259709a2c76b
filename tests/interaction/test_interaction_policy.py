from __future__ import annotations

import threading
from datetime import datetime, timedelta
from typing import Optional

import pytest

from src.attendance_tracker.attendance_tracker.core.enums import ClickOutcome
from src.attendance_tracker.attendance_tracker.holidays.service import HolidayService
from src.attendance_tracker.attendance_tracker.interaction.model import IDLE, GestureState, advance
from src.attendance_tracker.attendance_tracker.interaction.policy import InteractionPolicy
from src.attendance_tracker.attendance_tracker.state.model import AppState
from src.attendance_tracker.attendance_tracker.state.store import TrackerStore
from src.attendance_tracker.attendance_tracker.terms.model import AttendanceEntry
from src.attendance_tracker.attendance_tracker.terms.service import TermService

T0 = datetime(2026, 1, 5, 9, 0, 0)
DAY = "2026-01-05"


def ms(n: int) -> datetime:
    return T0 + timedelta(milliseconds=n)


class InMemorySnapshots:
    def __init__(self):
        self._state: Optional[AppState] = None

    def load(self) -> Optional[AppState]:
        return self._state

    def save(self, state: AppState) -> None:
        self._state = state


@pytest.fixture
def ctx():
    store = TrackerStore(InMemorySnapshots())
    terms = TermService(store)
    holidays = HolidayService(store)
    policy = InteractionPolicy(terms, holidays)
    subject = terms.add_subject("Maths")
    return policy, terms, holidays, subject.subject_id


def test_advance_counts_clicks_within_window():
    window = timedelta(milliseconds=500)
    cell = ("s1", DAY)

    state = advance(IDLE, cell, ms(0), window)
    state = advance(state, cell, ms(499), window)
    assert state == GestureState(armed_cell=cell, armed_at=ms(499), count=2)

    assert advance(state, cell, ms(999), window).count == 1
    assert advance(state, ("s2", DAY), ms(500), window).count == 1


def test_single_click_toggles(ctx):
    policy, terms, _, sid = ctx

    assert policy.click(sid, DAY, at=ms(0)) == ClickOutcome.TOGGLED
    assert terms.get_attendance(sid, DAY) == AttendanceEntry(attended=True)


def test_double_click_toggles_twice(ctx):
    policy, terms, _, sid = ctx

    policy.click(sid, DAY, at=ms(0))
    policy.click(sid, DAY, at=ms(100))

    assert terms.get_attendance(sid, DAY) == AttendanceEntry(attended=False)
    assert policy.gesture.count == 2


def test_triple_click_clears_the_entry(ctx):
    policy, terms, _, sid = ctx

    policy.click(sid, DAY, at=ms(0))
    policy.click(sid, DAY, at=ms(100))
    assert policy.click(sid, DAY, at=ms(300)) == ClickOutcome.CLEARED

    assert terms.get_attendance(sid, DAY) is None
    assert policy.gesture == IDLE


def test_slow_third_click_restarts_toggle_sequence(ctx):
    policy, terms, _, sid = ctx

    policy.click(sid, DAY, at=ms(0))
    policy.click(sid, DAY, at=ms(100))
    assert policy.click(sid, DAY, at=ms(700)) == ClickOutcome.TOGGLED

    assert policy.gesture.count == 1
    assert terms.get_attendance(sid, DAY) == AttendanceEntry(attended=True)


def test_triple_click_leaves_other_subjects_alone(ctx):
    policy, terms, _, sid = ctx
    other = terms.add_subject("Art").subject_id
    terms.toggle_attendance(other, DAY)

    for t in (0, 100, 300):
        policy.click(sid, DAY, at=ms(t))

    assert terms.get_attendance(other, DAY) == AttendanceEntry(attended=True)


def test_click_on_holiday_is_blocked(ctx):
    policy, terms, holidays, sid = ctx
    holidays.toggle_holiday(DAY)

    assert policy.click(sid, DAY, at=ms(0)) == ClickOutcome.BLOCKED
    assert terms.get_attendance(sid, DAY) is None


def test_triple_click_on_holiday_unmarks_it(ctx):
    policy, _, holidays, sid = ctx
    holidays.toggle_holiday(DAY)

    outcomes = [policy.click(sid, DAY, at=ms(t)) for t in (0, 100, 300)]

    assert outcomes == [ClickOutcome.BLOCKED, ClickOutcome.BLOCKED, ClickOutcome.HOLIDAY_CLEARED]
    assert not holidays.is_holiday(DAY)


def test_clicks_on_different_cells_do_not_accumulate(ctx):
    policy, terms, _, sid = ctx

    policy.click(sid, DAY, at=ms(0))
    policy.click(sid, "2026-01-06", at=ms(100))
    policy.click(sid, DAY, at=ms(200))

    assert terms.get_attendance(sid, DAY) == AttendanceEntry(attended=False)
    assert terms.get_attendance(sid, "2026-01-06") == AttendanceEntry(attended=True)


def test_modifier_alternate_click_toggles_holiday_without_touching_gesture(ctx):
    policy, _, holidays, sid = ctx
    policy.click(sid, DAY, at=ms(0))
    armed = policy.gesture

    assert policy.alternate_click(sid, DAY, modifier=True) is None
    assert holidays.is_holiday(DAY)
    assert policy.gesture == armed


def test_note_editor_opens_only_for_absences(ctx):
    policy, terms, holidays, sid = ctx

    assert policy.alternate_click(sid, DAY) is None  # untracked

    terms.toggle_attendance(sid, DAY)
    assert policy.alternate_click(sid, DAY) is None  # attended

    terms.toggle_attendance(sid, DAY)
    ctx_ = policy.alternate_click(sid, DAY)
    assert ctx_ is not None
    assert (ctx_.subject_id, ctx_.subject_name, ctx_.date_key, ctx_.current_note) == (sid, "Maths", DAY, "")

    holidays.toggle_holiday(DAY)
    policy.cancel_note()
    assert policy.alternate_click(sid, DAY) is None


def test_save_note_uses_open_context_once(ctx):
    policy, terms, _, sid = ctx
    terms.set_attendance(sid, DAY, AttendanceEntry(attended=False))
    policy.alternate_click(sid, DAY)

    assert policy.save_note("bus strike") is True
    assert terms.get_attendance(sid, DAY).note == "bus strike"
    assert policy.save_note("again") is False


def test_monthly_click_always_single_toggle(ctx):
    policy, terms, holidays, sid = ctx

    for _ in range(3):
        policy.monthly_click(sid, DAY)
    assert terms.get_attendance(sid, DAY) == AttendanceEntry(attended=True)

    holidays.toggle_holiday(DAY)
    assert policy.monthly_click(sid, DAY) == ClickOutcome.BLOCKED


def test_click_for_unknown_subject_is_ignored(ctx):
    policy, terms, _, _ = ctx
    assert policy.click("ghost", DAY, at=ms(0)) == ClickOutcome.IGNORED


def test_click_waits_for_store_lock():
    store = TrackerStore(InMemorySnapshots())
    terms = TermService(store)
    policy = InteractionPolicy(terms, HolidayService(store), lock=store.lock)
    sid = terms.add_subject("Maths").subject_id
    done = threading.Event()

    def click():
        policy.click(sid, DAY, at=ms(0))
        done.set()

    worker = threading.Thread(target=click)
    with store.lock:
        worker.start()
        assert not done.wait(0.2)
        assert terms.get_attendance(sid, DAY) is None
        assert policy.gesture == IDLE

    worker.join(timeout=5)
    assert done.is_set()
    assert terms.get_attendance(sid, DAY).attended is True
    assert policy.gesture.count == 1
