# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Booked hours extracted from the shift plan."""

import uuid
from collections import defaultdict
from dataclasses import dataclass
from datetime import date

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from src.models import Booking, Slot
from src.week_calendar import CalendarWeek, DayOfWeek, iso_week_date


@dataclass(frozen=True)
class ShiftplanReportDay:
    """Booked hours of a sales person on one day."""

    sales_person_id: uuid.UUID
    year: int
    calendar_week: int
    day_of_week: DayOfWeek
    hours: float

    def to_date(self) -> date:
        return iso_week_date(self.year, self.calendar_week, self.day_of_week)

    @property
    def week(self) -> CalendarWeek:
        return CalendarWeek(self.year, self.calendar_week)


def _booking_query(db: Session):
    return (
        db.query(Booking, Slot)
        .join(Slot, Booking.slot_id == Slot.id)
        .filter(Booking.deleted.is_(None), Slot.deleted.is_(None))
    )


def _aggregate(rows) -> list[ShiftplanReportDay]:
    hours: dict[tuple, float] = defaultdict(float)
    for booking, slot in rows:
        key = (
            booking.sales_person_id,
            booking.year,
            booking.calendar_week,
            slot.day_of_week,
        )
        hours[key] += slot.hours
    return [
        ShiftplanReportDay(
            sales_person_id=sales_person_id,
            year=year,
            calendar_week=week,
            day_of_week=DayOfWeek(day),
            hours=total,
        )
        for (sales_person_id, year, week, day), total in sorted(
            hours.items(), key=lambda item: item[0][1:]
        )
    ]


def extract_shiftplan_report(
    db: Session,
    sales_person_id: uuid.UUID,
    from_week: CalendarWeek,
    to_week: CalendarWeek,
) -> list[ShiftplanReportDay]:
    """Booked hours per day of a sales person between two weeks inclusive."""
    after_start = or_(
        Booking.year > from_week.year,
        and_(Booking.year == from_week.year, Booking.calendar_week >= from_week.week),
    )
    before_end = or_(
        Booking.year < to_week.year,
        and_(Booking.year == to_week.year, Booking.calendar_week <= to_week.week),
    )
    rows = (
        _booking_query(db)
        .filter(Booking.sales_person_id == sales_person_id, after_start, before_end)
        .all()
    )
    return _aggregate(rows)


def extract_shiftplan_report_for_week(
    db: Session, year: int, week: int
) -> list[ShiftplanReportDay]:
    """Booked hours per day of every sales person in one week."""
    rows = (
        _booking_query(db)
        .filter(Booking.year == year, Booking.calendar_week == week)
        .all()
    )
    return _aggregate(rows)
