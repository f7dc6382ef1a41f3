# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Sales person (employee) model."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from src.models.booking import Booking
    from src.models.employee_work_details import EmployeeWorkDetails
    from src.models.extra_hours import ExtraHours
    from src.models.user import User


class SalesPerson(Base, TimestampMixin):
    """An employee that can be booked into shift slots."""

    __tablename__ = "sales_persons"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    background_color: Mapped[str] = mapped_column(
        String(7), default="#FFFFFF", nullable=False
    )
    # None means unknown; only persons explicitly marked paid are reported.
    is_paid: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    inactive: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    user_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        unique=True,
    )
    deleted: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    version: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True), default=uuid_lib.uuid4, nullable=False
    )

    # Relationships
    user: Mapped[User | None] = relationship("User", back_populates="sales_person")
    work_details: Mapped[list[EmployeeWorkDetails]] = relationship(
        "EmployeeWorkDetails", back_populates="sales_person"
    )
    bookings: Mapped[list[Booking]] = relationship(
        "Booking", back_populates="sales_person"
    )
    extra_hours: Mapped[list[ExtraHours]] = relationship(
        "ExtraHours", back_populates="sales_person"
    )
