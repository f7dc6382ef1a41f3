# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Booking model."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from src.models.sales_person import SalesPerson
    from src.models.slot import Slot


class Booking(Base, TimestampMixin):
    """Assignment of a sales person to a slot in one ISO week."""

    __tablename__ = "bookings"

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
    slot_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("slots.id", ondelete="CASCADE"),
        nullable=False,
    )
    calendar_week: Mapped[int] = mapped_column(Integer, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    deleted: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    __table_args__ = (
        UniqueConstraint(
            "sales_person_id",
            "slot_id",
            "calendar_week",
            "year",
            "deleted",
            name="_booking_sales_person_slot_week_uc",
        ),
    )

    sales_person: Mapped[SalesPerson] = relationship(
        "SalesPerson", back_populates="bookings"
    )
    slot: Mapped[Slot] = relationship("Slot")
