# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Working hour reports per employee, per year and per week."""

import logging
import uuid
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.orm import Session

from src.models import EmployeeWorkDetails, ExtraHours, SalesPerson
from src.models.enums import Availability, ExtraHoursCategory, ReportType
from src.rbac.permissions import HR_PRIVILEGE
from src.services import (
    carryover_service,
    employee_work_details_service,
    extra_hours_service,
    permission_service,
    sales_person_service,
    shiftplan_report_service,
)
from src.services.permission_service import AuthContext
from src.services.work_hours_calculator import (
    CustomExtraHoursReport,
    GroupedReportHours,
    hours_per_week,
    sum_by_category,
    sum_by_report_type,
    weighted_hours,
)
from src.week_calendar import (
    CalendarWeek,
    DayOfWeek,
    first_day_in_year,
    iso_week,
    iso_week_date,
    last_day_in_year,
    resolve_virtual_week,
    weeks_in_year,
)

logger = logging.getLogger(__name__)


@dataclass
class ShortEmployeeReport:
    """Year or week totals of one sales person."""

    sales_person: SalesPerson
    balance_hours: float
    expected_hours: float
    overall_hours: float
    shiftplan_hours: float = 0.0
    extra_work_hours: float = 0.0
    absence_hours: float = 0.0
    carryover_hours: float = 0.0


@dataclass
class EmployeeReport:
    """Detailed report of one sales person over a date range."""

    sales_person: SalesPerson
    from_date: date
    to_date: date

    balance_hours: float = 0.0
    overall_hours: float = 0.0
    expected_hours: float = 0.0

    shiftplan_hours: float = 0.0
    extra_work_hours: float = 0.0
    vacation_hours: float = 0.0
    sick_leave_hours: float = 0.0
    holiday_hours: float = 0.0
    unavailable_hours: float = 0.0

    vacation_carryover: int = 0
    vacation_days: float = 0.0
    vacation_entitlement: float = 0.0
    sick_leave_days: float = 0.0
    holiday_days: float = 0.0
    absence_days: float = 0.0

    carryover_hours: float = 0.0

    custom_extra_hours: list[CustomExtraHoursReport] = field(default_factory=list)
    by_week: list[GroupedReportHours] = field(default_factory=list)


def _round_half_up(value: float) -> float:
    return float(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _merge_custom_extra_hours(
    weeks: list[GroupedReportHours],
) -> list[CustomExtraHoursReport]:
    totals: dict[tuple[uuid.UUID, str], float] = defaultdict(float)
    for week in weeks:
        for custom in week.custom_extra_hours:
            totals[(custom.id, custom.name)] += custom.hours
    return [
        CustomExtraHoursReport(id=custom_id, name=name, hours=hours)
        for (custom_id, name), hours in sorted(totals.items(), key=lambda i: i[0][1])
    ]


class ReportingService:
    """Builds working hour reports from bookings, contracts and extra hours.

    Collaborators default to the data access service modules and can be
    replaced for tests.
    """

    def __init__(
        self,
        db: Session,
        *,
        sales_persons=sales_person_service,
        work_details=employee_work_details_service,
        shiftplan_reports=shiftplan_report_service,
        extra_hours=extra_hours_service,
        carryovers=carryover_service,
        permissions=permission_service,
    ) -> None:
        self.db = db
        self.sales_persons = sales_persons
        self.work_details = work_details
        self.shiftplan_reports = shiftplan_reports
        self.extra_hours = extra_hours
        self.carryovers = carryovers
        self.permissions = permissions

    def get_reports_for_all_employees(
        self, ctx: AuthContext, year: int, until_week: int
    ) -> list[ShortEmployeeReport]:
        """Year-to-date totals of every paid sales person.

        Weeks 0 and ``weeks_in_year + 1`` are the neighbouring years' weeks
        that still hold days of ``year``; only those days are counted.
        """
        self.permissions.check_permission(ctx, HR_PRIVILEGE)

        year_weeks = weeks_in_year(year)
        until_week = max(0, min(until_week, year_weeks))
        last_virtual_week = until_week + 1 if until_week == year_weeks else until_week

        contracts_by_person: dict[uuid.UUID, list[EmployeeWorkDetails]] = defaultdict(
            list
        )
        for wd in self.work_details.get_all(self.db):
            contracts_by_person[wd.sales_person_id].append(wd)

        reports = []
        for sales_person in self.sales_persons.get_all_paid(self.db):
            reports.append(
                self._short_report_for_year(
                    sales_person,
                    contracts_by_person.get(sales_person.id, []),
                    year,
                    until_week,
                    last_virtual_week,
                )
            )
        logger.info(
            f"Built {len(reports)} yearly reports for {year} until week {until_week}"
        )
        return reports

    def _short_report_for_year(
        self,
        sales_person: SalesPerson,
        contracts: list[EmployeeWorkDetails],
        year: int,
        until_week: int,
        last_virtual_week: int,
    ) -> ShortEmployeeReport:
        year_start = first_day_in_year(year)
        year_end = last_day_in_year(year)
        shiftplan_days = self.shiftplan_reports.extract_shiftplan_report(
            self.db,
            sales_person.id,
            resolve_virtual_week(0, year),
            resolve_virtual_week(last_virtual_week, year),
        )
        entries = self.extra_hours.find_by_sales_person_id_and_year(
            self.db, sales_person.id, year, until_week
        )

        shiftplan_total = extra_total = absence_total = planned_total = 0.0
        for virtual_week in range(last_virtual_week + 1):
            week = resolve_virtual_week(virtual_week, year)
            planned = weighted_hours(contracts, week, year_start, year_end).expected_hours
            shiftplan = sum(
                day.hours
                for day in shiftplan_days
                if day.week == week and day.to_date().year == year
            )
            week_entries = [
                e
                for e in entries
                if iso_week(e.entry_date) == week and e.entry_date.year == year
            ]
            working_extra = sum_by_report_type(week_entries, ReportType.WORKING_HOURS)
            if planned <= 0:
                # Worked hours become the expectation, the week cannot move the balance.
                planned = shiftplan + working_extra
                absence = 0.0
            else:
                absence = sum_by_report_type(week_entries, ReportType.ABSENCE_HOURS)

            shiftplan_total += shiftplan
            extra_total += working_extra
            absence_total += absence
            planned_total += planned

        carryover = self.carryovers.get_carryover(self.db, sales_person.id, year - 1)
        expected = planned_total - absence_total
        overall = shiftplan_total + extra_total
        return ShortEmployeeReport(
            sales_person=sales_person,
            balance_hours=overall - expected,
            expected_hours=expected,
            overall_hours=overall,
            shiftplan_hours=shiftplan_total,
            extra_work_hours=extra_total,
            absence_hours=absence_total,
            carryover_hours=carryover.carryover_hours if carryover else 0.0,
        )

    def get_report_for_employee(
        self,
        ctx: AuthContext,
        sales_person_id: uuid.UUID,
        year: int,
        until_week: int,
    ) -> EmployeeReport:
        """Report from January 1st to the Sunday of ``until_week``."""
        year_weeks = weeks_in_year(year)
        until_week = max(1, min(until_week, year_weeks))
        if until_week == year_weeks:
            to_date = last_day_in_year(year)
        else:
            to_date = iso_week_date(year, until_week, DayOfWeek.SUNDAY)
        return self.get_report_for_employee_range(
            ctx, sales_person_id, first_day_in_year(year), to_date
        )

    def get_report_for_employee_range(
        self,
        ctx: AuthContext,
        sales_person_id: uuid.UUID,
        from_date: date,
        to_date: date,
    ) -> EmployeeReport:
        """Detailed report of a sales person between two dates inclusive.

        HR may read every report, everybody else only their own.
        """
        self.permissions.check_hr_or_self(self.db, ctx, sales_person_id)
        sales_person = self.sales_persons.get(self.db, sales_person_id)
        if from_date > to_date:
            return EmployeeReport(
                sales_person=sales_person, from_date=from_date, to_date=to_date
            )

        contracts = self.work_details.find_by_sales_person_id(self.db, sales_person_id)
        shiftplan_days = self.shiftplan_reports.extract_shiftplan_report(
            self.db, sales_person_id, iso_week(from_date), iso_week(to_date)
        )
        entries = self.extra_hours.find_by_sales_person_id_and_range(
            self.db, sales_person_id, from_date, to_date
        )

        by_week = hours_per_week(
            shiftplan_days, entries, contracts, from_date, to_date
        )
        shiftplan_hours = sum(
            day.hours for day in shiftplan_days if from_date <= day.to_date() <= to_date
        )
        working_extra = sum_by_report_type(entries, ReportType.WORKING_HOURS)
        planned_hours = sum(week.expected_hours for week in by_week)

        entitlement_year = from_date.year
        vacation_entitlement = _round_half_up(
            sum(
                wd.vacation_days_for_year(entitlement_year)
                for wd in contracts
                if wd.from_year <= entitlement_year <= wd.to_year
            )
        )
        carryover = self.carryovers.get_carryover(
            self.db, sales_person_id, entitlement_year - 1
        )
        carryover_hours = carryover.carryover_hours if carryover else 0.0
        carryover_vacation = carryover.vacation if carryover else 0

        return EmployeeReport(
            sales_person=sales_person,
            from_date=from_date,
            to_date=to_date,
            balance_hours=shiftplan_hours + working_extra - planned_hours,
            overall_hours=shiftplan_hours + working_extra,
            expected_hours=planned_hours,
            shiftplan_hours=shiftplan_hours,
            extra_work_hours=sum_by_category(entries, ExtraHoursCategory.EXTRA_WORK),
            vacation_hours=sum_by_category(entries, ExtraHoursCategory.VACATION),
            sick_leave_hours=sum_by_category(entries, ExtraHoursCategory.SICK_LEAVE),
            holiday_hours=sum_by_category(entries, ExtraHoursCategory.HOLIDAY),
            unavailable_hours=sum_by_category(entries, ExtraHoursCategory.UNAVAILABLE),
            vacation_carryover=carryover_vacation,
            vacation_days=sum(week.vacation_days() for week in by_week),
            vacation_entitlement=vacation_entitlement + carryover_vacation,
            sick_leave_days=sum(week.sick_leave_days() for week in by_week),
            holiday_days=sum(week.holiday_days() for week in by_week),
            absence_days=sum(week.absence_days() for week in by_week),
            carryover_hours=carryover_hours,
            custom_extra_hours=_merge_custom_extra_hours(by_week),
            by_week=by_week,
        )

    def get_week(self, ctx: AuthContext, year: int, week: int) -> list[ShortEmployeeReport]:
        """Totals of one ISO week for every sales person with a contract in it."""
        self.permissions.check_permission(ctx, HR_PRIVILEGE)
        calendar_week = CalendarWeek(year, week)
        calendar_week.monday()  # validates the week

        contracts_by_person: dict[uuid.UUID, list[EmployeeWorkDetails]] = defaultdict(
            list
        )
        for wd in self.work_details.all_for_week(self.db, year, week):
            contracts_by_person[wd.sales_person_id].append(wd)

        shiftplan_by_person: dict[uuid.UUID, float] = defaultdict(float)
        for day in self.shiftplan_reports.extract_shiftplan_report_for_week(
            self.db, year, week
        ):
            shiftplan_by_person[day.sales_person_id] += day.hours

        entries_by_person: dict[uuid.UUID, list[ExtraHours]] = defaultdict(list)
        for entry in self.extra_hours.find_by_week(self.db, year, week):
            entries_by_person[entry.sales_person_id].append(entry)

        reports = []
        for sales_person in self.sales_persons.get_all(self.db):
            contracts = contracts_by_person.get(sales_person.id)
            if not contracts:
                continue
            entries = entries_by_person.get(sales_person.id, [])
            shiftplan = shiftplan_by_person.get(sales_person.id, 0.0)
            available = sum(
                e.amount for e in entries if e.availability == Availability.AVAILABLE
            )
            planned = weighted_hours(contracts, calendar_week).expected_hours
            overall = shiftplan + available
            if planned <= 0:
                expected = overall
                absence = 0.0
            else:
                absence = sum(
                    e.amount
                    for e in entries
                    if e.availability == Availability.UNAVAILABLE
                )
                expected = planned - absence
            reports.append(
                ShortEmployeeReport(
                    sales_person=sales_person,
                    balance_hours=overall - expected,
                    expected_hours=expected,
                    overall_hours=overall,
                    shiftplan_hours=shiftplan,
                    extra_work_hours=available,
                    absence_hours=absence,
                )
            )
        return reports
