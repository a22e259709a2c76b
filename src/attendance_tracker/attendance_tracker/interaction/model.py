from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

# (subject_id, date_key)
Cell = tuple[str, str]


@dataclass(frozen=True)
class GestureState:
    """Multi-click tracking: which cell was clicked last, when, and how often."""

    armed_cell: Optional[Cell] = None
    armed_at: Optional[datetime] = None
    count: int = 0


IDLE = GestureState()


def advance(state: GestureState, cell: Cell, at: datetime, window: timedelta) -> GestureState:
    """Register a click on ``cell`` at ``at``.

    Consecutive clicks on the same cell less than ``window`` apart build up
    the count; anything else starts a new sequence at 1.
    """
    if state.armed_cell == cell and state.armed_at is not None and at - state.armed_at < window:
        count = state.count + 1
    else:
        count = 1
    return GestureState(armed_cell=cell, armed_at=at, count=count)


@dataclass(frozen=True)
class NoteContext:
    """Absence note being edited by the note editor."""

    subject_id: str
    subject_name: str
    date_key: str
    current_note: str
