# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Builds billing period snapshots from employee reports."""

import logging
import uuid
from datetime import date, timedelta

from sqlalchemy.orm import Session

from src.config import settings
from src.exceptions import ValidationError
from src.models.enums import BillingPeriodValueType, custom_value_type
from src.rbac.permissions import HR_PRIVILEGE
from src.services import billing_period_service, permission_service, sales_person_service
from src.services.billing_period_service import (
    BillingPeriodData,
    BillingPeriodSalesPersonValues,
    BillingPeriodValue,
)
from src.services.permission_service import AuthContext
from src.services.reporting_service import EmployeeReport, ReportingService
from src.week_calendar import first_day_in_year, last_day_in_year

logger = logging.getLogger(__name__)

# First start date when no billing period exists yet.
EPOCH = date(1970, 1, 1)

REPORT_FIELDS: dict[BillingPeriodValueType, str] = {
    BillingPeriodValueType.OVERALL: "overall_hours",
    BillingPeriodValueType.BALANCE: "balance_hours",
    BillingPeriodValueType.EXPECTED_HOURS: "expected_hours",
    BillingPeriodValueType.EXTRA_WORK: "extra_work_hours",
    BillingPeriodValueType.VACATION_HOURS: "vacation_hours",
    BillingPeriodValueType.SICK_LEAVE: "sick_leave_hours",
    BillingPeriodValueType.HOLIDAY: "holiday_hours",
    BillingPeriodValueType.VACATION_DAYS: "vacation_days",
    BillingPeriodValueType.VACATION_ENTITLEMENT: "vacation_entitlement",
}


def _custom_hours(report: EmployeeReport, name: str) -> float:
    """Hours of all custom categories sharing ``name``."""
    return sum(
        (c.hours for c in report.custom_extra_hours if c.name == name), 0.0
    )


class BillingPeriodReportService:
    """Computes and stores the values of a new billing period."""

    def __init__(
        self,
        db: Session,
        reporting_service: ReportingService | None = None,
        *,
        sales_persons=sales_person_service,
        billing_periods=billing_period_service,
    ) -> None:
        self.db = db
        self.reporting_service = reporting_service or ReportingService(db)
        self.sales_persons = sales_persons
        self.billing_periods = billing_periods

    def next_start_date(self, ctx: AuthContext) -> date:
        latest_end = self.billing_periods.get_latest_billing_period_end_date(self.db, ctx)
        if latest_end is None:
            return EPOCH
        return latest_end + timedelta(days=1)

    def _report(
        self, sales_person_id: uuid.UUID, from_date: date, to_date: date
    ) -> EmployeeReport:
        return self.reporting_service.get_report_for_employee_range(
            AuthContext.full_authentication(settings.billing_process_name),
            sales_person_id,
            from_date,
            to_date,
        )

    def build_sales_person_values(
        self, sales_person_id: uuid.UUID, start_date: date, end_date: date
    ) -> BillingPeriodSalesPersonValues:
        """Values of one sales person over the four billing ranges."""
        report_start = self._report(
            sales_person_id,
            first_day_in_year(start_date.year),
            start_date - timedelta(days=1),
        )
        report_end = self._report(
            sales_person_id, first_day_in_year(end_date.year), end_date
        )
        report_end_of_year = self._report(
            sales_person_id,
            first_day_in_year(end_date.year),
            last_day_in_year(end_date.year),
        )
        report_delta = self._report(sales_person_id, start_date, end_date)

        values: dict[str, BillingPeriodValue] = {}
        for value_type, attribute in REPORT_FIELDS.items():
            values[value_type.value] = BillingPeriodValue(
                value_delta=getattr(report_delta, attribute),
                value_ytd_from=getattr(report_start, attribute),
                value_ytd_to=getattr(report_end, attribute),
                value_full_year=getattr(report_end_of_year, attribute),
            )
        for name in dict.fromkeys(c.name for c in report_delta.custom_extra_hours):
            values[custom_value_type(name)] = BillingPeriodValue(
                value_delta=_custom_hours(report_delta, name),
                value_ytd_from=_custom_hours(report_start, name),
                value_ytd_to=_custom_hours(report_end, name),
                value_full_year=_custom_hours(report_end_of_year, name),
            )
        return BillingPeriodSalesPersonValues(
            sales_person_id=sales_person_id, values=values
        )

    def build_new_billing_period(
        self, ctx: AuthContext, end_date: date
    ) -> BillingPeriodData:
        """Compute the next billing period ending at ``end_date`` without storing it."""
        permission_service.check_permission(ctx, HR_PRIVILEGE)
        start_date = self.next_start_date(ctx)
        if end_date < start_date:
            raise ValidationError(
                f"End date {end_date} is before billing period start {start_date}"
            )

        data = BillingPeriodData(
            id=uuid.uuid4(), start_date=start_date, end_date=end_date
        )
        for sales_person in self.sales_persons.get_all(self.db):
            data.sales_persons.append(
                self.build_sales_person_values(sales_person.id, start_date, end_date)
            )
        return data

    def build_and_persist_billing_period_report(
        self, ctx: AuthContext, end_date: date
    ) -> uuid.UUID:
        """Compute the next billing period and store it in one transaction."""
        data = self.build_new_billing_period(ctx, end_date)
        self.billing_periods.create_billing_period(self.db, ctx, data, commit=False)
        self.db.commit()
        logger.info(
            f"Billing period {data.start_date} - {data.end_date} created "
            f"for {len(data.sales_persons)} sales persons",
            extra={"billing_period_id": data.id},
        )
        return data.id
