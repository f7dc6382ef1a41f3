# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Sales person lookups."""

import uuid

from sqlalchemy.orm import Session

from src.exceptions import EntityNotFoundError
from src.models import SalesPerson


def get_all(db: Session) -> list[SalesPerson]:
    """Get all non-deleted sales persons ordered by name."""
    return (
        db.query(SalesPerson)
        .filter(SalesPerson.deleted.is_(None))
        .order_by(SalesPerson.name)
        .all()
    )


def get_all_paid(db: Session) -> list[SalesPerson]:
    """Get sales persons explicitly marked as paid."""
    return [sp for sp in get_all(db) if sp.is_paid]


def get(db: Session, sales_person_id: uuid.UUID) -> SalesPerson:
    """Get a sales person or raise EntityNotFoundError."""
    sales_person = (
        db.query(SalesPerson)
        .filter(SalesPerson.id == sales_person_id, SalesPerson.deleted.is_(None))
        .first()
    )
    if not sales_person:
        raise EntityNotFoundError(sales_person_id, "Sales person")
    return sales_person


def get_by_user_id(db: Session, user_id: uuid.UUID) -> SalesPerson | None:
    """Get the non-deleted sales person linked to a user, if any."""
    return (
        db.query(SalesPerson)
        .filter(SalesPerson.user_id == user_id, SalesPerson.deleted.is_(None))
        .first()
    )
