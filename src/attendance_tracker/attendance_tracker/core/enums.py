from __future__ import annotations

from enum import Enum


class StatusClass(str, Enum):
    """Attendance health band shown next to a percentage."""

    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


class ClickOutcome(str, Enum):
    """What a click on a (subject, date) cell did to the ledger."""

    TOGGLED = "toggled"
    CLEARED = "cleared"
    HOLIDAY_CLEARED = "holiday_cleared"
    BLOCKED = "blocked"
    IGNORED = "ignored"
