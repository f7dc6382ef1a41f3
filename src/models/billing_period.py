# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Billing period snapshot models."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import date, datetime

from sqlalchemy import (
    Date,
    DateTime,
    Float,
    ForeignKey,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base


class BillingPeriod(Base):
    """A closed payroll range. Rows are never updated, only soft deleted."""

    __tablename__ = "billing_periods"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    created_by: Mapped[str] = mapped_column(String(100), nullable=False)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    deleted_by: Mapped[str | None] = mapped_column(String(100), nullable=True)

    values: Mapped[list[BillingPeriodSalesPerson]] = relationship(
        "BillingPeriodSalesPerson",
        back_populates="billing_period",
        cascade="all, delete-orphan",
    )


class BillingPeriodSalesPerson(Base):
    """One metric of one sales person inside a billing period."""

    __tablename__ = "billing_period_sales_persons"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    billing_period_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("billing_periods.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sales_person_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("sales_persons.id", ondelete="CASCADE"),
        nullable=False,
    )
    value_type: Mapped[str] = mapped_column(String(255), nullable=False)
    value_delta: Mapped[float] = mapped_column(Float, nullable=False)
    value_ytd_from: Mapped[float] = mapped_column(Float, nullable=False)
    value_ytd_to: Mapped[float] = mapped_column(Float, nullable=False)
    value_full_year: Mapped[float] = mapped_column(Float, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    created_by: Mapped[str] = mapped_column(String(100), nullable=False)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    deleted_by: Mapped[str | None] = mapped_column(String(100), nullable=True)

    __table_args__ = (
        UniqueConstraint(
            "billing_period_id",
            "sales_person_id",
            "value_type",
            name="_billing_period_sales_person_value_uc",
        ),
    )

    billing_period: Mapped[BillingPeriod] = relationship(
        "BillingPeriod", back_populates="values"
    )
