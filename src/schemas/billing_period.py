# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Billing period schemas."""

import datetime
import uuid

from pydantic import BaseModel, Field

from src.services.billing_report_renderer import DEFAULT_TEMPLATE


class BillingPeriodCreate(BaseModel):
    """Schema for closing a new billing period."""

    end_date: datetime.date


class BillingPeriodValueResponse(BaseModel):
    value_delta: float
    value_ytd_from: float
    value_ytd_to: float
    value_full_year: float

    model_config = {"from_attributes": True}


class BillingPeriodSalesPersonResponse(BaseModel):
    sales_person_id: uuid.UUID
    values: dict[str, BillingPeriodValueResponse]

    model_config = {"from_attributes": True}


class BillingPeriodOverviewResponse(BaseModel):
    """Schema for a billing period without values."""

    id: uuid.UUID
    start_date: datetime.date
    end_date: datetime.date
    created_at: datetime.datetime
    created_by: str

    model_config = {"from_attributes": True}


class BillingPeriodResponse(BillingPeriodOverviewResponse):
    """Schema for a billing period with all values."""

    sales_persons: list[BillingPeriodSalesPersonResponse]


class BillingPeriodRenderRequest(BaseModel):
    template: str = Field(default=DEFAULT_TEMPLATE, min_length=1, max_length=20000)


class BillingPeriodRenderResponse(BaseModel):
    content: str
