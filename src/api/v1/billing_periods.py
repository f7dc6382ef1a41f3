# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Billing period API endpoints."""

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from src.api.deps import get_auth_context, get_db
from src.schemas.billing_period import (
    BillingPeriodCreate,
    BillingPeriodOverviewResponse,
    BillingPeriodRenderRequest,
    BillingPeriodRenderResponse,
    BillingPeriodResponse,
)
from src.schemas.common import MessageResponse
from src.services import billing_period_service, sales_person_service
from src.services.billing_period_report_service import BillingPeriodReportService
from src.services.billing_report_renderer import render_billing_period
from src.services.permission_service import AuthContext
from src.services.report_generator import (
    BillingReportGenerator,
    billing_period_filename,
)

router = APIRouter()


def _sales_person_names(db: Session) -> dict[uuid.UUID, str]:
    return {sp.id: sp.name for sp in sales_person_service.get_all(db)}


@router.get("", response_model=list[BillingPeriodOverviewResponse])
def list_billing_periods(
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(get_auth_context),
) -> list[BillingPeriodOverviewResponse]:
    """List all billing periods, newest first."""
    periods = billing_period_service.get_billing_period_overview(db, ctx)
    return [BillingPeriodOverviewResponse.model_validate(p) for p in periods]


@router.post(
    "",
    response_model=BillingPeriodResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_billing_period(
    data: BillingPeriodCreate,
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(get_auth_context),
) -> BillingPeriodResponse:
    """Close the next billing period at the given end date."""
    billing_period_id = BillingPeriodReportService(
        db
    ).build_and_persist_billing_period_report(ctx, data.end_date)
    billing_period = billing_period_service.get_billing_period_by_id(
        db, ctx, billing_period_id
    )
    return BillingPeriodResponse.model_validate(billing_period)


@router.get("/{billing_period_id}", response_model=BillingPeriodResponse)
def get_billing_period(
    billing_period_id: uuid.UUID,
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(get_auth_context),
) -> BillingPeriodResponse:
    """Get a billing period with all values."""
    billing_period = billing_period_service.get_billing_period_by_id(
        db, ctx, billing_period_id
    )
    return BillingPeriodResponse.model_validate(billing_period)


@router.delete("/{billing_period_id}", response_model=MessageResponse)
def delete_billing_period(
    billing_period_id: uuid.UUID,
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(get_auth_context),
) -> MessageResponse:
    """Soft delete a billing period."""
    billing_period_service.delete_billing_period(db, ctx, billing_period_id)
    return MessageResponse(message="Billing period deleted")


@router.get("/{billing_period_id}/export")
def export_billing_period(
    billing_period_id: uuid.UUID,
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(get_auth_context),
) -> Response:
    """Download a billing period as Excel workbook."""
    billing_period = billing_period_service.get_billing_period_by_id(
        db, ctx, billing_period_id
    )
    content = BillingReportGenerator(_sales_person_names(db)).create_excel(
        billing_period
    )
    filename = billing_period_filename(billing_period)
    return Response(
        content=content,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/{billing_period_id}/render", response_model=BillingPeriodRenderResponse)
def render_billing_period_report(
    billing_period_id: uuid.UUID,
    data: BillingPeriodRenderRequest,
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(get_auth_context),
) -> BillingPeriodRenderResponse:
    """Render a billing period through a text template."""
    billing_period = billing_period_service.get_billing_period_by_id(
        db, ctx, billing_period_id
    )
    content = render_billing_period(
        data.template, billing_period, _sales_person_names(db)
    )
    return BillingPeriodRenderResponse(content=content)
