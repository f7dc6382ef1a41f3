# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Working hour report schemas."""

import datetime
import uuid

from pydantic import BaseModel, computed_field

from src.models.enums import WorkingHoursDayCategory


class SalesPersonResponse(BaseModel):
    """Schema for sales person response."""

    id: uuid.UUID
    name: str
    background_color: str
    is_paid: bool | None
    inactive: bool

    model_config = {"from_attributes": True}


class WorkingHoursDayResponse(BaseModel):
    date: datetime.date
    hours: float
    category: WorkingHoursDayCategory
    custom_extra_hours_name: str | None = None

    model_config = {"from_attributes": True}


class CustomExtraHoursResponse(BaseModel):
    id: uuid.UUID
    name: str
    hours: float

    model_config = {"from_attributes": True}


class GroupedReportHoursResponse(BaseModel):
    """Schema for the hours of one week."""

    from_date: datetime.date
    to_date: datetime.date
    year: int
    week: int
    contract_weekly_hours: float
    expected_hours: float
    overall_hours: float
    balance_hours: float
    shiftplan_hours: float
    extra_work_hours: float
    vacation_hours: float
    sick_leave_hours: float
    holiday_hours: float
    unavailable_hours: float
    absence_hours: float
    days_per_week: int
    workdays_per_week: float
    custom_extra_hours: list[CustomExtraHoursResponse]
    days: list[WorkingHoursDayResponse]

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def vacation_days(self) -> float:
        per_day = self._hours_per_day()
        return self.vacation_hours / per_day if per_day else 0.0

    @computed_field
    @property
    def sick_leave_days(self) -> float:
        per_day = self._hours_per_day()
        return self.sick_leave_hours / per_day if per_day else 0.0

    def _hours_per_day(self) -> float:
        if not self.workdays_per_week:
            return 0.0
        return self.contract_weekly_hours / self.workdays_per_week


class ShortEmployeeReportResponse(BaseModel):
    """Schema for yearly or weekly totals of a sales person."""

    sales_person: SalesPersonResponse
    balance_hours: float
    expected_hours: float
    overall_hours: float
    shiftplan_hours: float
    extra_work_hours: float
    absence_hours: float
    carryover_hours: float

    model_config = {"from_attributes": True}


class EmployeeReportResponse(BaseModel):
    """Schema for the detailed report of a sales person."""

    sales_person: SalesPersonResponse
    from_date: datetime.date
    to_date: datetime.date
    balance_hours: float
    overall_hours: float
    expected_hours: float
    shiftplan_hours: float
    extra_work_hours: float
    vacation_hours: float
    sick_leave_hours: float
    holiday_hours: float
    unavailable_hours: float
    vacation_carryover: int
    vacation_days: float
    vacation_entitlement: float
    sick_leave_days: float
    holiday_days: float
    absence_days: float
    carryover_hours: float
    custom_extra_hours: list[CustomExtraHoursResponse]
    by_week: list[GroupedReportHoursResponse]

    model_config = {"from_attributes": True}
