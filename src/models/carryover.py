# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Yearly carryover model."""

import uuid as uuid_lib

from sqlalchemy import Float, ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.models.base import Base, TimestampMixin


class EmployeeYearlyCarryover(Base, TimestampMixin):
    """Balance hours and vacation days carried out of a year."""

    __tablename__ = "employee_yearly_carryovers"

    sales_person_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("sales_persons.id", ondelete="CASCADE"),
        primary_key=True,
    )
    year: Mapped[int] = mapped_column(Integer, primary_key=True)
    carryover_hours: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    vacation: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
