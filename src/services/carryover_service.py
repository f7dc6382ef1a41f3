# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Yearly carryover lookups."""

import uuid

from sqlalchemy.orm import Session

from src.models import EmployeeYearlyCarryover


def get_carryover(
    db: Session, sales_person_id: uuid.UUID, year: int
) -> EmployeeYearlyCarryover | None:
    """Get the carryover recorded at the end of a year."""
    return db.get(EmployeeYearlyCarryover, (sales_person_id, year))


def set_carryover(
    db: Session,
    sales_person_id: uuid.UUID,
    year: int,
    carryover_hours: float,
    vacation: int,
) -> EmployeeYearlyCarryover:
    """Create or replace the carryover of a year."""
    carryover = get_carryover(db, sales_person_id, year)
    if carryover is None:
        carryover = EmployeeYearlyCarryover(sales_person_id=sales_person_id, year=year)
        db.add(carryover)
    carryover.carryover_hours = carryover_hours
    carryover.vacation = vacation
    db.commit()
    db.refresh(carryover)
    return carryover
