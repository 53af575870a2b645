"""Calendar arithmetic for review periods - pure date logic, no I/O."""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Callable, Iterator

from ..errors import InvalidMonth, InvalidWeek, InvalidYear

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class PeriodKind(Enum):
    """Review period granularity."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class Period:
    """An inclusive date range with the identifier it was requested by."""

    kind: PeriodKind
    start: date
    end: date
    identifier: str
    year: int

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1


def week_range(week: int, year: int) -> Period:
    """Monday..Sunday of an ISO-8601 week.

    Week 1 is the week containing January 4th, so it may start in December of
    the previous year, and week 53 only exists in some years.
    """
    try:
        start = date.fromisocalendar(year, week, 1)
        end = start + timedelta(days=6)
    except (ValueError, OverflowError) as e:
        raise InvalidWeek(week, year) from e
    return Period(PeriodKind.WEEK, start, end, str(week), year)


def month_number(name: str) -> int:
    """1-based month number for a case-sensitive full English month name."""
    try:
        return MONTH_NAMES.index(name) + 1
    except ValueError:
        raise InvalidMonth(name) from None


def month_range(name: str, year: int) -> Period:
    """First and last calendar day of a month, leap years included."""
    month = month_number(name)
    try:
        last_day = calendar.monthrange(year, month)[1]
        start, end = date(year, month, 1), date(year, month, last_day)
    except ValueError as e:
        raise InvalidYear(year) from e
    return Period(PeriodKind.MONTH, start, end, name, year)


def year_range(year: int) -> Period:
    try:
        start, end = date(year, 1, 1), date(year, 12, 31)
    except ValueError as e:
        raise InvalidYear(year) from e
    return Period(PeriodKind.YEAR, start, end, str(year), year)


def iter_days(period: Period) -> Iterator[date]:
    """Every day of the period in order, both ends included."""
    for offset in range(period.days):
        yield period.start + timedelta(days=offset)


def enumerate_daily_paths(period: Period, naming_fn: Callable[[date], str]) -> list[tuple[date, str]]:
    """Expected daily file names for a period, without checking existence."""
    return [(day, naming_fn(day)) for day in iter_days(period)]


def shift_months(day: date, months: int) -> date:
    """Move a date by whole months, clamping to the end of shorter months."""
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    return date(year, month, min(day.day, calendar.monthrange(year, month)[1]))
