# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Extra hours model."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, Float, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin
from src.models.enums import Availability, ExtraHoursCategory, ReportType

if TYPE_CHECKING:
    from src.models.custom_extra_hours import CustomExtraHours
    from src.models.sales_person import SalesPerson


class ExtraHours(Base, TimestampMixin):
    """Hours recorded outside the shift plan (extra work or absences)."""

    __tablename__ = "extra_hours"

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
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    category: Mapped[ExtraHoursCategory] = mapped_column(
        Enum(ExtraHoursCategory), nullable=False
    )
    custom_extra_hours_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("custom_extra_hours.id"),
        nullable=True,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    date_time: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    deleted: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    version: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True), default=uuid_lib.uuid4, nullable=False
    )

    sales_person: Mapped[SalesPerson] = relationship(
        "SalesPerson", back_populates="extra_hours"
    )
    custom_extra_hours: Mapped[CustomExtraHours | None] = relationship(
        "CustomExtraHours", lazy="joined"
    )

    @property
    def entry_date(self) -> date:
        return self.date_time.date()

    @property
    def modifies_balance(self) -> bool:
        return bool(self.custom_extra_hours and self.custom_extra_hours.modifies_balance)

    @property
    def report_type(self) -> ReportType:
        return self.category.report_type(self.modifies_balance)

    @property
    def availability(self) -> Availability:
        return self.category.availability(self.modifies_balance)
