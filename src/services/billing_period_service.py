# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Billing period persistence."""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.exceptions import EntityNotFoundError, RepositoryError
from src.models import BillingPeriod, BillingPeriodSalesPerson
from src.models.enums import parse_value_type
from src.rbac.permissions import HR_PRIVILEGE
from src.services.permission_service import AuthContext, check_permission

logger = logging.getLogger(__name__)


@dataclass
class BillingPeriodValue:
    """One metric over the four ranges of a billing period."""

    value_delta: float
    value_ytd_from: float
    value_ytd_to: float
    value_full_year: float


@dataclass
class BillingPeriodSalesPersonValues:
    sales_person_id: uuid.UUID
    values: dict[str, BillingPeriodValue] = field(default_factory=dict)


@dataclass
class BillingPeriodData:
    """A billing period with the values of every sales person."""

    id: uuid.UUID
    start_date: date
    end_date: date
    sales_persons: list[BillingPeriodSalesPersonValues] = field(default_factory=list)
    created_at: datetime | None = None
    created_by: str | None = None
    deleted_at: datetime | None = None
    deleted_by: str | None = None


def _active_periods(db: Session):
    return db.query(BillingPeriod).filter(BillingPeriod.deleted_at.is_(None))


def _to_data(period: BillingPeriod) -> BillingPeriodData:
    by_person: dict[uuid.UUID, BillingPeriodSalesPersonValues] = {}
    for row in period.values:
        if row.deleted_at is not None:
            continue
        value_type = parse_value_type(row.value_type)
        if value_type is None:
            logger.warning(
                f"Skipping unknown value type {row.value_type} "
                f"in billing period {period.id}"
            )
            continue
        person = by_person.setdefault(
            row.sales_person_id,
            BillingPeriodSalesPersonValues(sales_person_id=row.sales_person_id),
        )
        person.values[value_type] = BillingPeriodValue(
            value_delta=row.value_delta,
            value_ytd_from=row.value_ytd_from,
            value_ytd_to=row.value_ytd_to,
            value_full_year=row.value_full_year,
        )
    return BillingPeriodData(
        id=period.id,
        start_date=period.start_date,
        end_date=period.end_date,
        sales_persons=list(by_person.values()),
        created_at=period.created_at,
        created_by=period.created_by,
        deleted_at=period.deleted_at,
        deleted_by=period.deleted_by,
    )


def get_billing_period_overview(db: Session, ctx: AuthContext) -> list[BillingPeriod]:
    """Get all non-deleted billing periods, newest first, without values."""
    check_permission(ctx, HR_PRIVILEGE)
    return _active_periods(db).order_by(BillingPeriod.end_date.desc()).all()


def get_billing_period_by_id(
    db: Session, ctx: AuthContext, billing_period_id: uuid.UUID
) -> BillingPeriodData:
    """Get a billing period with all values."""
    check_permission(ctx, HR_PRIVILEGE)
    period = _active_periods(db).filter(BillingPeriod.id == billing_period_id).first()
    if not period:
        raise EntityNotFoundError(billing_period_id, "Billing period")
    return _to_data(period)


def get_latest_billing_period_end_date(db: Session, ctx: AuthContext) -> date | None:
    """End date of the most recent non-deleted billing period."""
    check_permission(ctx, HR_PRIVILEGE)
    return (
        db.query(func.max(BillingPeriod.end_date))
        .filter(BillingPeriod.deleted_at.is_(None))
        .scalar()
    )


def create_billing_period(
    db: Session,
    ctx: AuthContext,
    data: BillingPeriodData,
    commit: bool = True,
) -> BillingPeriod:
    """Persist a billing period and one row per sales person and value type."""
    check_permission(ctx, HR_PRIVILEGE)
    now = datetime.utcnow()
    period = BillingPeriod(
        id=data.id,
        start_date=data.start_date,
        end_date=data.end_date,
        created_at=now,
        created_by=ctx.username,
    )
    try:
        db.add(period)
        db.flush()
        for person in data.sales_persons:
            for value_type, value in person.values.items():
                db.add(
                    BillingPeriodSalesPerson(
                        billing_period_id=period.id,
                        sales_person_id=person.sales_person_id,
                        value_type=value_type,
                        value_delta=value.value_delta,
                        value_ytd_from=value.value_ytd_from,
                        value_ytd_to=value.value_ytd_to,
                        value_full_year=value.value_full_year,
                        created_at=now,
                        created_by=ctx.username,
                    )
                )
        db.flush()
        if commit:
            db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to store billing period {data.id}: {e}")
        raise RepositoryError(str(e)) from e
    db.refresh(period)
    return period


def _soft_delete(period: BillingPeriod, deleted_by: str, now: datetime) -> None:
    period.deleted_at = now
    period.deleted_by = deleted_by
    for row in period.values:
        if row.deleted_at is None:
            row.deleted_at = now
            row.deleted_by = deleted_by


def delete_billing_period(
    db: Session, ctx: AuthContext, billing_period_id: uuid.UUID
) -> None:
    """Soft delete a billing period and its values."""
    check_permission(ctx, HR_PRIVILEGE)
    period = _active_periods(db).filter(BillingPeriod.id == billing_period_id).first()
    if not period:
        raise EntityNotFoundError(billing_period_id, "Billing period")
    _soft_delete(period, ctx.username, datetime.utcnow())
    db.commit()
    logger.info(f"Billing period {billing_period_id} deleted by {ctx.username}")


def clear_all_billing_periods(db: Session, ctx: AuthContext) -> int:
    """Soft delete every billing period. Returns the number of periods."""
    check_permission(ctx, HR_PRIVILEGE)
    now = datetime.utcnow()
    periods = _active_periods(db).all()
    for period in periods:
        _soft_delete(period, ctx.username, now)
    db.commit()
    logger.info(f"{len(periods)} billing periods cleared by {ctx.username}")
    return len(periods)

