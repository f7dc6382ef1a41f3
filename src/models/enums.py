# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class ReportType(str, Enum):
    """How an extra-hours entry enters the balance."""

    WORKING_HOURS = "working_hours"
    ABSENCE_HOURS = "absence_hours"
    NONE = "none"


class Availability(str, Enum):
    """Whether an extra-hours entry makes the employee available."""

    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    NONE = "none"


class ExtraHoursCategory(str, Enum):
    """Extra hours category enumeration.

    CUSTOM entries reference a CustomExtraHours definition whose
    ``modifies_balance`` flag decides how they are counted.
    """

    EXTRA_WORK = "extra_work"
    VACATION = "vacation"
    SICK_LEAVE = "sick_leave"
    HOLIDAY = "holiday"
    UNAVAILABLE = "unavailable"
    CUSTOM = "custom"

    def report_type(self, modifies_balance: bool = False) -> ReportType:
        if self is ExtraHoursCategory.EXTRA_WORK:
            return ReportType.WORKING_HOURS
        if self in _ABSENCE_CATEGORIES:
            return ReportType.ABSENCE_HOURS
        if self is ExtraHoursCategory.CUSTOM and modifies_balance:
            return ReportType.WORKING_HOURS
        return ReportType.NONE

    def availability(self, modifies_balance: bool = False) -> Availability:
        if self is ExtraHoursCategory.EXTRA_WORK:
            return Availability.AVAILABLE
        if self is ExtraHoursCategory.CUSTOM:
            return Availability.AVAILABLE if modifies_balance else Availability.NONE
        return Availability.UNAVAILABLE


_ABSENCE_CATEGORIES = frozenset(
    {
        ExtraHoursCategory.VACATION,
        ExtraHoursCategory.SICK_LEAVE,
        ExtraHoursCategory.HOLIDAY,
    }
)


class WorkingHoursDayCategory(str, Enum):
    """Source of a single day entry in a weekly report."""

    SHIFTPLAN = "shiftplan"
    EXTRA_WORK = "extra_work"
    VACATION = "vacation"
    SICK_LEAVE = "sick_leave"
    HOLIDAY = "holiday"
    UNAVAILABLE = "unavailable"
    CUSTOM = "custom"


class BillingPeriodValueType(str, Enum):
    """Metrics stored per sales person in a billing period.

    Custom extra hours categories are stored under
    ``custom_extra_hours:<name>``, see ``custom_value_type``.
    """

    BALANCE = "balance"
    OVERALL = "overall"
    EXPECTED_HOURS = "expected_hours"
    EXTRA_WORK = "extra_work"
    VACATION_HOURS = "vacation_hours"
    SICK_LEAVE = "sick_leave"
    HOLIDAY = "holiday"
    VACATION_DAYS = "vacation_days"
    VACATION_ENTITLEMENT = "vacation_entitlement"


CUSTOM_VALUE_TYPE_PREFIX = "custom_extra_hours:"


def custom_value_type(name: str) -> str:
    return f"{CUSTOM_VALUE_TYPE_PREFIX}{name}"


def parse_value_type(value: str) -> str | None:
    """Return the stored value type if it is known, otherwise None."""
    if value.startswith(CUSTOM_VALUE_TYPE_PREFIX) and len(value) > len(
        CUSTOM_VALUE_TYPE_PREFIX
    ):
        return value
    try:
        return BillingPeriodValueType(value).value
    except ValueError:
        return None
