# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User defined extra hours categories."""

import uuid as uuid_lib
from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.models.base import Base, TimestampMixin


class CustomExtraHours(Base, TimestampMixin):
    """A named extra hours category.

    Entries of a category with ``modifies_balance`` count as working hours,
    all others are informational only.
    """

    __tablename__ = "custom_extra_hours"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    modifies_balance: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    deleted: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
