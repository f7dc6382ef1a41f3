"""Pydantic schemas package."""
from src.schemas.billing_period import (
    BillingPeriodCreate,
    BillingPeriodOverviewResponse,
    BillingPeriodRenderRequest,
    BillingPeriodRenderResponse,
    BillingPeriodResponse,
    BillingPeriodSalesPersonResponse,
    BillingPeriodValueResponse,
)
from src.schemas.common import HealthResponse, MessageResponse
from src.schemas.reporting import (
    CustomExtraHoursResponse,
    EmployeeReportResponse,
    GroupedReportHoursResponse,
    SalesPersonResponse,
    ShortEmployeeReportResponse,
    WorkingHoursDayResponse,
)

__all__ = [
    # Common
    "HealthResponse",
    "MessageResponse",
    # Reporting
    "SalesPersonResponse",
    "WorkingHoursDayResponse",
    "CustomExtraHoursResponse",
    "GroupedReportHoursResponse",
    "ShortEmployeeReportResponse",
    "EmployeeReportResponse",
    # Billing period
    "BillingPeriodCreate",
    "BillingPeriodValueResponse",
    "BillingPeriodSalesPersonResponse",
    "BillingPeriodOverviewResponse",
    "BillingPeriodResponse",
    "BillingPeriodRenderRequest",
    "BillingPeriodRenderResponse",
]
