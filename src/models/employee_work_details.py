# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Employment contract (work details) model."""

from __future__ import annotations

import calendar
import uuid as uuid_lib
from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin
from src.week_calendar import CalendarWeek, DayOfWeek, iso_week_date

if TYPE_CHECKING:
    from src.models.sales_person import SalesPerson


class EmployeeWorkDetails(Base, TimestampMixin):
    """Expected weekly hours of a sales person for an inclusive week range.

    The range is given as ISO year, calendar week and weekday for both
    ends. The weekday flags form the potential workday mask.
    """

    __tablename__ = "employee_work_details"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    sales_person_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("sales_persons.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    expected_hours: Mapped[float] = mapped_column(Float, nullable=False)
    workdays_per_week: Mapped[int] = mapped_column(Integer, nullable=False)

    from_year: Mapped[int] = mapped_column(Integer, nullable=False)
    from_calendar_week: Mapped[int] = mapped_column(Integer, nullable=False)
    from_day_of_week: Mapped[int] = mapped_column(
        Integer, default=DayOfWeek.MONDAY, nullable=False
    )
    to_year: Mapped[int] = mapped_column(Integer, nullable=False)
    to_calendar_week: Mapped[int] = mapped_column(Integer, nullable=False)
    to_day_of_week: Mapped[int] = mapped_column(
        Integer, default=DayOfWeek.SUNDAY, nullable=False
    )

    monday: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    tuesday: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    wednesday: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    thursday: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    friday: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    saturday: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    sunday: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    vacation_days: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    deleted: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    version: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True), default=uuid_lib.uuid4, nullable=False
    )

    sales_person: Mapped[SalesPerson] = relationship(
        "SalesPerson", back_populates="work_details"
    )

    @property
    def from_week(self) -> CalendarWeek:
        return CalendarWeek(self.from_year, self.from_calendar_week)

    @property
    def to_week(self) -> CalendarWeek:
        return CalendarWeek(self.to_year, self.to_calendar_week)

    def covers_week(self, week: CalendarWeek) -> bool:
        return self.from_week <= week <= self.to_week

    def potential_weekday_list(self) -> list[DayOfWeek]:
        """Weekdays the employee can work on, Monday first."""
        flags = (
            self.monday,
            self.tuesday,
            self.wednesday,
            self.thursday,
            self.friday,
            self.saturday,
            self.sunday,
        )
        return [day for day, enabled in zip(DayOfWeek, flags, strict=True) if enabled]

    @property
    def potential_days_per_week(self) -> int:
        return len(self.potential_weekday_list())

    @property
    def hours_per_day(self) -> float:
        if not self.workdays_per_week:
            return 0.0
        return self.expected_hours / self.workdays_per_week

    @property
    def holiday_hours(self) -> float:
        days = self.potential_days_per_week
        if not days:
            return 0.0
        return self.expected_hours / days

    def from_date(self) -> date:
        return iso_week_date(
            self.from_year, self.from_calendar_week, self.from_day_of_week
        )

    def to_date(self) -> date:
        return iso_week_date(self.to_year, self.to_calendar_week, self.to_day_of_week)

    def vacation_days_for_year(self, year: int) -> float:
        """Vacation days of this contract prorated to the part inside a year.

        A contract starting in ``year`` loses the share of days before its
        start date and one ending in ``year`` loses the share after its end.
        """
        days = float(self.vacation_days)
        days_in_year = 366 if calendar.isleap(year) else 365
        if self.from_year == year:
            start = self.from_date()
            if start.year == year:
                relation = start.timetuple().tm_yday / days_in_year
                days -= self.vacation_days * relation
        if self.to_year == year:
            end = self.to_date()
            if end.year == year:
                relation = 1.0 - end.timetuple().tm_yday / days_in_year
                days -= self.vacation_days * relation
        return days
