# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Working hour report API endpoints."""

import datetime
import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from src.api.deps import get_auth_context, get_db
from src.schemas.reporting import (
    EmployeeReportResponse,
    ShortEmployeeReportResponse,
)
from src.services.permission_service import AuthContext
from src.services.reporting_service import ReportingService

router = APIRouter()


@router.get("", response_model=list[ShortEmployeeReportResponse])
def get_reports_for_all_employees(
    year: int = Query(..., ge=1971, le=9998),
    until_week: int = Query(..., ge=0, le=53),
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(get_auth_context),
) -> list[ShortEmployeeReportResponse]:
    """Year-to-date totals of every paid sales person."""
    reports = ReportingService(db).get_reports_for_all_employees(ctx, year, until_week)
    return [ShortEmployeeReportResponse.model_validate(r) for r in reports]


@router.get("/week/{year}/{week}", response_model=list[ShortEmployeeReportResponse])
def get_week(
    year: int,
    week: int,
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(get_auth_context),
) -> list[ShortEmployeeReportResponse]:
    """Totals of one ISO week."""
    reports = ReportingService(db).get_week(ctx, year, week)
    return [ShortEmployeeReportResponse.model_validate(r) for r in reports]


@router.get("/{sales_person_id}", response_model=EmployeeReportResponse)
def get_report_for_employee(
    sales_person_id: uuid.UUID,
    year: int = Query(..., ge=1971, le=9998),
    until_week: int = Query(..., ge=1, le=53),
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(get_auth_context),
) -> EmployeeReportResponse:
    """Detailed report of a sales person for a year up to a week."""
    report = ReportingService(db).get_report_for_employee(
        ctx, sales_person_id, year, until_week
    )
    return EmployeeReportResponse.model_validate(report)


@router.get("/{sales_person_id}/range", response_model=EmployeeReportResponse)
def get_report_for_employee_range(
    sales_person_id: uuid.UUID,
    from_date: datetime.date,
    to_date: datetime.date,
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(get_auth_context),
) -> EmployeeReportResponse:
    """Detailed report of a sales person between two dates."""
    report = ReportingService(db).get_report_for_employee_range(
        ctx, sales_person_id, from_date, to_date
    )
    return EmployeeReportResponse.model_validate(report)
