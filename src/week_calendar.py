# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""ISO-8601 calendar week helpers.

Weeks start on Monday and week 1 is the week holding the year's first
Thursday, so the first and last week of a year may contain days of the
neighbouring Gregorian year.
"""

from collections.abc import Iterator
from datetime import date
from enum import IntEnum
from typing import NamedTuple

from src.exceptions import CalculationError


class DayOfWeek(IntEnum):
    """ISO weekday numbers, Monday is 1."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def from_date(cls, d: date) -> "DayOfWeek":
        return cls(d.isoweekday())


def iso_week_date(year: int, week: int, day: DayOfWeek | int) -> date:
    """Return the date for an ISO year, week and weekday."""
    try:
        return date.fromisocalendar(year, week, int(day))
    except ValueError as e:
        raise CalculationError(
            f"Invalid ISO week date {year}-W{week:02d}-{int(day)}"
        ) from e


def weeks_in_year(year: int) -> int:
    """Number of ISO weeks in a year (52 or 53)."""
    # Dec 28 always falls into the last ISO week of its year.
    return date(year, 12, 28).isocalendar().week


def first_day_in_year(year: int) -> date:
    return date(year, 1, 1)


def last_day_in_year(year: int) -> date:
    return date(year, 12, 31)


class CalendarWeek(NamedTuple):
    """An ISO (year, week) pair; tuple ordering is chronological."""

    year: int
    week: int

    def as_date(self, day: DayOfWeek | int) -> date:
        return iso_week_date(self.year, self.week, day)

    def monday(self) -> date:
        return self.as_date(DayOfWeek.MONDAY)

    def sunday(self) -> date:
        return self.as_date(DayOfWeek.SUNDAY)

    def next(self) -> "CalendarWeek":
        if self.week >= weeks_in_year(self.year):
            return CalendarWeek(self.year + 1, 1)
        return CalendarWeek(self.year, self.week + 1)


def iso_week(d: date) -> CalendarWeek:
    """ISO week a date belongs to."""
    iso = d.isocalendar()
    return CalendarWeek(iso.year, iso.week)


def iter_weeks(start: CalendarWeek, end: CalendarWeek) -> Iterator[CalendarWeek]:
    """Yield every week from start to end inclusive."""
    week = start
    while week <= end:
        yield week
        week = week.next()


def resolve_virtual_week(virtual_week: int, target_year: int) -> CalendarWeek:
    """Map a virtual week index of a target year to a real ISO week.

    Index 0 is the last ISO week of the previous year and
    ``weeks_in_year(target_year) + 1`` is week 1 of the next year. Both
    can contain days of the target year.
    """
    last_week = weeks_in_year(target_year)
    if virtual_week == 0:
        return CalendarWeek(target_year - 1, weeks_in_year(target_year - 1))
    if virtual_week == last_week + 1:
        return CalendarWeek(target_year + 1, 1)
    if 1 <= virtual_week <= last_week:
        return CalendarWeek(target_year, virtual_week)
    raise CalculationError(f"Virtual week {virtual_week} out of range for {target_year}")

