# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from src.models.base import Base, TimestampMixin
from src.models.billing_period import BillingPeriod, BillingPeriodSalesPerson
from src.models.booking import Booking
from src.models.carryover import EmployeeYearlyCarryover
from src.models.custom_extra_hours import CustomExtraHours
from src.models.employee_work_details import EmployeeWorkDetails
from src.models.enums import (
    Availability,
    BillingPeriodValueType,
    ExtraHoursCategory,
    ReportType,
    WorkingHoursDayCategory,
)
from src.models.extra_hours import ExtraHours
from src.models.permission import Permission
from src.models.role import Role
from src.models.role_permission import RolePermission
from src.models.sales_person import SalesPerson
from src.models.session import Session
from src.models.slot import Slot
from src.models.user import User
from src.models.user_role import UserRole

__all__ = [
    "Availability",
    "Base",
    "BillingPeriod",
    "BillingPeriodSalesPerson",
    "BillingPeriodValueType",
    "Booking",
    "CustomExtraHours",
    "EmployeeWorkDetails",
    "EmployeeYearlyCarryover",
    "ExtraHours",
    "ExtraHoursCategory",
    "Permission",
    "ReportType",
    "Role",
    "RolePermission",
    "SalesPerson",
    "Session",
    "Slot",
    "TimestampMixin",
    "User",
    "UserRole",
    "WorkingHoursDayCategory",
]
