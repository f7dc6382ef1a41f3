# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Shift slot model."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import date, datetime, time

from sqlalchemy import Date, DateTime, Integer, Time, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.models.base import Base, TimestampMixin


class Slot(Base, TimestampMixin):
    """A recurring weekly time window that sales persons can be booked into."""

    __tablename__ = "slots"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False)
    time_from: Mapped[time] = mapped_column(Time, nullable=False)
    time_to: Mapped[time] = mapped_column(Time, nullable=False)
    valid_from: Mapped[date] = mapped_column(Date, nullable=False)
    valid_to: Mapped[date | None] = mapped_column(Date, nullable=True)
    deleted: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    @property
    def hours(self) -> float:
        """Length of the slot in fractional hours."""
        start = self.time_from.hour * 60 + self.time_from.minute
        end = self.time_to.hour * 60 + self.time_to.minute
        return (end - start) / 60.0
