# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Weekly working hour calculations.

Pure functions over contracts, booked shift plan days and extra hours
entries. Nothing here touches the database.
"""

import logging
import uuid
from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date

from src.models import EmployeeWorkDetails, ExtraHours
from src.models.enums import (
    ExtraHoursCategory,
    ReportType,
    WorkingHoursDayCategory,
)
from src.services.employee_work_details_service import (
    find_working_hours_for_calendar_week,
)
from src.services.shiftplan_report_service import ShiftplanReportDay
from src.week_calendar import (
    CalendarWeek,
    DayOfWeek,
    first_day_in_year,
    iso_week,
    iter_weeks,
    last_day_in_year,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeekWeight:
    """Share of a contract that falls into one week."""

    expected_hours: float = 0.0
    days: int = 0
    workdays_per_week: float = 0.0

    def __add__(self, other: "WeekWeight") -> "WeekWeight":
        return WeekWeight(
            self.expected_hours + other.expected_hours,
            self.days + other.days,
            self.workdays_per_week + other.workdays_per_week,
        )


@dataclass
class WorkingHoursDay:
    date: date
    hours: float
    category: WorkingHoursDayCategory
    custom_extra_hours_name: str | None = None


@dataclass
class CustomExtraHoursReport:
    id: uuid.UUID
    name: str
    hours: float


@dataclass
class GroupedReportHours:
    """Hours of one ISO week, clipped to the reported date range."""

    from_date: date
    to_date: date
    year: int
    week: int
    contract_weekly_hours: float
    expected_hours: float
    overall_hours: float
    balance_hours: float
    shiftplan_hours: float
    extra_work_hours: float = 0.0
    vacation_hours: float = 0.0
    sick_leave_hours: float = 0.0
    holiday_hours: float = 0.0
    unavailable_hours: float = 0.0
    absence_hours: float = 0.0
    days_per_week: int = 0
    workdays_per_week: float = 0.0
    custom_extra_hours: list[CustomExtraHoursReport] = field(default_factory=list)
    days: list[WorkingHoursDay] = field(default_factory=list)

    def hours_per_day(self) -> float:
        if self.workdays_per_week == 0:
            return 0.0
        return self.contract_weekly_hours / self.workdays_per_week

    def hours_per_holiday(self) -> float:
        if self.days_per_week == 0:
            return 0.0
        return self.contract_weekly_hours / self.days_per_week

    def vacation_days(self) -> float:
        per_day = self.hours_per_day()
        return self.vacation_hours / per_day if per_day else 0.0

    def sick_leave_days(self) -> float:
        per_day = self.hours_per_day()
        return self.sick_leave_hours / per_day if per_day else 0.0

    def holiday_days(self) -> float:
        per_holiday = self.hours_per_holiday()
        return self.holiday_hours / per_holiday if per_holiday else 0.0

    def absence_days(self) -> float:
        per_day = self.hours_per_day()
        if not per_day:
            return 0.0
        return (self.vacation_hours + self.sick_leave_hours + self.holiday_hours) / per_day


def contract_days_in_week(
    work_details: EmployeeWorkDetails, week: CalendarWeek
) -> list[DayOfWeek]:
    """Potential workdays of a contract that lie inside its validity window."""
    if not work_details.covers_week(week):
        return []
    days = work_details.potential_weekday_list()
    if week == work_details.from_week:
        days = [d for d in days if d >= work_details.from_day_of_week]
    if week == work_details.to_week:
        days = [d for d in days if d <= work_details.to_day_of_week]
    return days


def weight_for_week_in_range(
    week: CalendarWeek,
    work_details: EmployeeWorkDetails,
    from_date: date | None = None,
    to_date: date | None = None,
) -> WeekWeight:
    """Prorate a contract to the days of a week inside an optional date window."""
    potential_days = work_details.potential_days_per_week
    if potential_days == 0:
        return WeekWeight()

    dates = [week.as_date(day) for day in contract_days_in_week(work_details, week)]
    if from_date is not None:
        dates = [d for d in dates if d >= from_date]
    if to_date is not None:
        dates = [d for d in dates if d <= to_date]

    relation = len(dates) / potential_days
    return WeekWeight(
        expected_hours=work_details.expected_hours * relation,
        days=len(dates),
        workdays_per_week=work_details.workdays_per_week * relation,
    )


def weight_for_week(
    year: int,
    week: int,
    work_details: EmployeeWorkDetails,
    target_year: int = 0,
) -> WeekWeight:
    """Prorate a contract to an ISO week.

    With a non-zero ``target_year`` only days falling into that Gregorian
    year are counted, so the first and last week of a year are split
    between the two years they touch.
    """
    if target_year:
        return weight_for_week_in_range(
            CalendarWeek(year, week),
            work_details,
            first_day_in_year(target_year),
            last_day_in_year(target_year),
        )
    return weight_for_week_in_range(CalendarWeek(year, week), work_details)


def weighted_hours(
    work_details: Iterable[EmployeeWorkDetails],
    week: CalendarWeek,
    from_date: date | None = None,
    to_date: date | None = None,
) -> WeekWeight:
    """Sum the weights of every contract valid in a week."""
    total = WeekWeight()
    for wd in find_working_hours_for_calendar_week(work_details, week.year, week.week):
        total += weight_for_week_in_range(week, wd, from_date, to_date)
    return total


def sum_by_report_type(entries: Iterable[ExtraHours], report_type: ReportType) -> float:
    return sum(e.amount for e in entries if e.report_type == report_type)


def sum_by_category(entries: Iterable[ExtraHours], category: ExtraHoursCategory) -> float:
    return sum(e.amount for e in entries if e.category == category)


def aggregate_custom_extra_hours(
    entries: Iterable[ExtraHours],
) -> list[CustomExtraHoursReport]:
    """Total custom category hours by (id, name)."""
    totals: dict[tuple[uuid.UUID, str], float] = defaultdict(float)
    for entry in entries:
        custom = entry.custom_extra_hours
        if entry.category == ExtraHoursCategory.CUSTOM and custom is not None:
            totals[(custom.id, custom.name)] += entry.amount
    return [
        CustomExtraHoursReport(id=custom_id, name=name, hours=hours)
        for (custom_id, name), hours in sorted(totals.items(), key=lambda i: i[0][1])
    ]


def _day_entries(
    extra_hours: Sequence[ExtraHours], shiftplan_days: Sequence[ShiftplanReportDay]
) -> list[WorkingHoursDay]:
    days = [
        WorkingHoursDay(
            date=entry.entry_date,
            hours=entry.amount,
            category=WorkingHoursDayCategory(entry.category.value),
            custom_extra_hours_name=(
                entry.custom_extra_hours.name if entry.custom_extra_hours else None
            ),
        )
        for entry in extra_hours
    ]
    days.extend(
        WorkingHoursDay(
            date=day.to_date(),
            hours=day.hours,
            category=WorkingHoursDayCategory.SHIFTPLAN,
        )
        for day in shiftplan_days
    )
    days.sort(key=lambda d: d.date)
    return days


def hours_per_week(
    shiftplan_days: Sequence[ShiftplanReportDay],
    extra_hours: Sequence[ExtraHours],
    work_details: Sequence[EmployeeWorkDetails],
    from_date: date,
    to_date: date,
) -> list[GroupedReportHours]:
    """Group hours into ISO weeks between two dates inclusive.

    Booked days and extra hours outside the date range are ignored and
    contracts are weighted by their days inside the range. A week without
    expected hours takes its worked hours as expectation, which keeps its
    balance at zero, and ignores absences.
    """
    shiftplan_by_week: dict[CalendarWeek, list[ShiftplanReportDay]] = defaultdict(list)
    for day in shiftplan_days:
        shiftplan_by_week[day.week].append(day)
    extra_hours_by_week: dict[CalendarWeek, list[ExtraHours]] = defaultdict(list)
    for entry in extra_hours:
        extra_hours_by_week[iso_week(entry.entry_date)].append(entry)

    weeks: list[GroupedReportHours] = []
    for week in iter_weeks(iso_week(from_date), iso_week(to_date)):
        week_from = max(week.monday(), from_date)
        week_to = min(week.sunday(), to_date)
        if week_from > week_to:
            continue
        logger.debug(f"Calculating week {week.year}-W{week.week:02d}")

        week_shiftplan = [
            day
            for day in shiftplan_by_week.get(week, [])
            if week_from <= day.to_date() <= week_to
        ]
        week_extra_hours = [
            entry
            for entry in extra_hours_by_week.get(week, [])
            if week_from <= entry.entry_date <= week_to
        ]

        shiftplan_hours = sum(day.hours for day in week_shiftplan)
        weight = weighted_hours(work_details, week, week_from, week_to)
        working_extra = sum_by_report_type(week_extra_hours, ReportType.WORKING_HOURS)
        if weight.expected_hours <= 0:
            absence = 0.0
        else:
            absence = sum_by_report_type(week_extra_hours, ReportType.ABSENCE_HOURS)

        overall = shiftplan_hours + working_extra
        if weight.expected_hours == 0:
            contract_hours = overall
        else:
            contract_hours = weight.expected_hours

        weeks.append(
            GroupedReportHours(
                from_date=week_from,
                to_date=week_to,
                year=week.year,
                week=week.week,
                contract_weekly_hours=contract_hours,
                expected_hours=contract_hours - absence,
                overall_hours=overall,
                balance_hours=overall - contract_hours + absence,
                shiftplan_hours=shiftplan_hours,
                extra_work_hours=sum_by_category(
                    week_extra_hours, ExtraHoursCategory.EXTRA_WORK
                ),
                vacation_hours=sum_by_category(
                    week_extra_hours, ExtraHoursCategory.VACATION
                ),
                sick_leave_hours=sum_by_category(
                    week_extra_hours, ExtraHoursCategory.SICK_LEAVE
                ),
                holiday_hours=sum_by_category(
                    week_extra_hours, ExtraHoursCategory.HOLIDAY
                ),
                unavailable_hours=sum_by_category(
                    week_extra_hours, ExtraHoursCategory.UNAVAILABLE
                ),
                absence_hours=absence,
                days_per_week=weight.days,
                workdays_per_week=weight.workdays_per_week,
                custom_extra_hours=aggregate_custom_extra_hours(week_extra_hours),
                days=_day_entries(week_extra_hours, week_shiftplan),
            )
        )
    return weeks
