from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, datetime

from ..core.constants import ISO_DATE_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), ISO_DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")


def format_iso_date(value: date) -> str:
    # isoformat keeps four-digit years (strftime drops the padding on some platforms).
    return date.isoformat(value)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def add_months(value: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's length.

    Results past the ends of the calendar clamp to ``date.min`` / ``date.max``.
    """
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    if year < MINYEAR:
        return date.min
    if year > MAXYEAR:
        return date.max
    last_day = calendar.monthrange(year, month)[1]
    return value.replace(year=year, month=month, day=min(value.day, last_day))


@dataclass(frozen=True)
class MonthGrid:
    """Days of one month laid out for a Sunday-first calendar."""

    first: date
    leading_blanks: int
    days: tuple[date, ...]

    @property
    def title(self) -> str:
        return self.first.strftime("%B %Y")


def month_grid(value: date) -> MonthGrid:
    first = value.replace(day=1)
    last_day = calendar.monthrange(first.year, first.month)[1]
    days = tuple(first.replace(day=d) for d in range(1, last_day + 1))
    # date.weekday(): Monday=0 .. Sunday=6; the grid starts on Sunday.
    leading = (first.weekday() + 1) % 7
    return MonthGrid(first=first, leading_blanks=leading, days=days)
