from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ..core.constants import MONTH_GRID_CELLS
from ..core.exceptions import ValidationError

DATE_KEY_FORMAT = "%Y-%m-%d"

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True)
class MonthCell:
    """One day of the 6x7 month grid."""

    day: date
    in_current_month: bool

    @property
    def key(self) -> str:
        return date_key(self.day)


def date_key(value: date) -> str:
    """Encode a calendar date as YYYY-MM-DD."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date_key(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, DATE_KEY_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date '{value}' (expected YYYY-MM-DD)")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def week_start(value: date) -> date:
    """Monday on or before the given date."""
    return value - timedelta(days=value.weekday())


def week_dates(start: date) -> list[date]:
    return [start + timedelta(days=i) for i in range(7)]


def shift_week(start: date, weeks: int) -> date:
    return start + timedelta(weeks=weeks)


def month_start(value: date) -> date:
    return value.replace(day=1)


def shift_month(start: date, months: int) -> date:
    index = start.year * 12 + (start.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def month_grid_dates(start: date) -> list[MonthCell]:
    """Six Monday-start weeks covering the month of ``start``.

    The grid begins at the Monday on or before the 1st and may spill into the
    neighbouring months on both ends.
    """
    first = month_start(start)
    grid_start = week_start(first)
    cells = []
    for i in range(MONTH_GRID_CELLS):
        day = grid_start + timedelta(days=i)
        cells.append(MonthCell(day=day, in_current_month=(day.month == first.month)))
    return cells


def day_name(value: date) -> str:
    return _DAY_NAMES[value.weekday()]


def format_month_year(value: date) -> str:
    return f"{_MONTH_NAMES[value.month - 1]} {value.year}"


def format_week_range(start: date) -> str:
    end = start + timedelta(days=6)
    return f"{_MONTH_NAMES[start.month - 1][:3]} {start.day} - {_MONTH_NAMES[end.month - 1][:3]} {end.day}, {end.year}"
