# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Employment contract lookups and contract selection."""

import uuid
from collections.abc import Iterable

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from src.models import EmployeeWorkDetails
from src.week_calendar import CalendarWeek


def get_all(db: Session) -> list[EmployeeWorkDetails]:
    """Get every non-deleted contract."""
    return (
        db.query(EmployeeWorkDetails)
        .filter(EmployeeWorkDetails.deleted.is_(None))
        .all()
    )


def find_by_sales_person_id(
    db: Session, sales_person_id: uuid.UUID
) -> list[EmployeeWorkDetails]:
    """Get the non-deleted contracts of a sales person, oldest first."""
    return (
        db.query(EmployeeWorkDetails)
        .filter(
            EmployeeWorkDetails.sales_person_id == sales_person_id,
            EmployeeWorkDetails.deleted.is_(None),
        )
        .order_by(
            EmployeeWorkDetails.from_year, EmployeeWorkDetails.from_calendar_week
        )
        .all()
    )


def all_for_week(db: Session, year: int, week: int) -> list[EmployeeWorkDetails]:
    """Get every non-deleted contract valid in the given ISO week."""
    starts_before = or_(
        EmployeeWorkDetails.from_year < year,
        and_(
            EmployeeWorkDetails.from_year == year,
            EmployeeWorkDetails.from_calendar_week <= week,
        ),
    )
    ends_after = or_(
        EmployeeWorkDetails.to_year > year,
        and_(
            EmployeeWorkDetails.to_year == year,
            EmployeeWorkDetails.to_calendar_week >= week,
        ),
    )
    return (
        db.query(EmployeeWorkDetails)
        .filter(EmployeeWorkDetails.deleted.is_(None), starts_before, ends_after)
        .all()
    )


def find_working_hours_for_calendar_week(
    work_details: Iterable[EmployeeWorkDetails], year: int, week: int
) -> list[EmployeeWorkDetails]:
    """Select the contracts whose week range contains (year, week).

    Overlapping contracts are all returned; callers sum them.
    """
    target = CalendarWeek(year, week)
    return [wd for wd in work_details if wd.covers_week(target)]
