# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Extra hours lookups."""

import uuid
from datetime import date, datetime, time, timedelta

from sqlalchemy.orm import Session

from src.models import ExtraHours
from src.week_calendar import CalendarWeek, resolve_virtual_week, weeks_in_year


def _in_range(query, from_date: date, to_date: date):
    start = datetime.combine(from_date, time.min)
    end = datetime.combine(to_date + timedelta(days=1), time.min)
    return query.filter(ExtraHours.date_time >= start, ExtraHours.date_time < end)


def _base_query(db: Session):
    return db.query(ExtraHours).filter(ExtraHours.deleted.is_(None))


def find_by_sales_person_id_and_range(
    db: Session, sales_person_id: uuid.UUID, from_date: date, to_date: date
) -> list[ExtraHours]:
    """Entries of a sales person dated between two days inclusive."""
    query = _base_query(db).filter(ExtraHours.sales_person_id == sales_person_id)
    return _in_range(query, from_date, to_date).order_by(ExtraHours.date_time).all()


def find_by_sales_person_id_and_year(
    db: Session, sales_person_id: uuid.UUID, year: int, until_week: int
) -> list[ExtraHours]:
    """Entries of a sales person in a calendar year up to the end of a week."""
    if until_week >= weeks_in_year(year):
        to_date = date(year, 12, 31)
    else:
        to_date = min(
            resolve_virtual_week(until_week, year).sunday(), date(year, 12, 31)
        )
    return find_by_sales_person_id_and_range(
        db, sales_person_id, date(year, 1, 1), to_date
    )


def find_by_week(db: Session, year: int, week: int) -> list[ExtraHours]:
    """Entries of every sales person in one ISO week."""
    calendar_week = CalendarWeek(year, week)
    query = _in_range(_base_query(db), calendar_week.monday(), calendar_week.sunday())
    return query.order_by(ExtraHours.date_time).all()
