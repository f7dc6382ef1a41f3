# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for billing_period_service."""

import uuid
from datetime import date, datetime

import pytest

from src.exceptions import EntityNotFoundError, ForbiddenError
from src.models import BillingPeriodSalesPerson
from src.services import billing_period_service
from src.services.billing_period_service import (
    BillingPeriodData,
    BillingPeriodSalesPersonValues,
    BillingPeriodValue,
)
from tests.factories import create_sales_person


def make_period(sales_person_id, start=date(2024, 1, 1), end=date(2024, 1, 31)):
    return BillingPeriodData(
        id=uuid.uuid4(),
        start_date=start,
        end_date=end,
        sales_persons=[
            BillingPeriodSalesPersonValues(
                sales_person_id=sales_person_id,
                values={
                    "overall": BillingPeriodValue(160.0, 0.0, 160.0, 2080.0),
                    "custom_extra_hours:Training": BillingPeriodValue(
                        2.0, 0.0, 2.0, 2.0
                    ),
                },
            )
        ],
    )


def test_create_and_get_billing_period(db_session, hr_context):
    sales_person = create_sales_person(db_session)
    data = make_period(sales_person.id)

    period = billing_period_service.create_billing_period(db_session, hr_context, data)
    assert period.created_by == "hr"
    assert len(period.values) == 2

    loaded = billing_period_service.get_billing_period_by_id(
        db_session, hr_context, data.id
    )
    assert loaded.start_date == date(2024, 1, 1)
    assert loaded.end_date == date(2024, 1, 31)
    assert len(loaded.sales_persons) == 1
    values = loaded.sales_persons[0].values
    assert values["overall"] == BillingPeriodValue(160.0, 0.0, 160.0, 2080.0)
    assert values["custom_extra_hours:Training"].value_delta == 2.0


def test_unknown_value_types_are_skipped(db_session, hr_context):
    sales_person = create_sales_person(db_session)
    data = make_period(sales_person.id)
    billing_period_service.create_billing_period(db_session, hr_context, data)
    db_session.add(
        BillingPeriodSalesPerson(
            billing_period_id=data.id,
            sales_person_id=sales_person.id,
            value_type="no_such_metric",
            value_delta=1.0,
            value_ytd_from=1.0,
            value_ytd_to=1.0,
            value_full_year=1.0,
            created_at=datetime.utcnow(),
            created_by="hr",
        )
    )
    db_session.commit()
    db_session.expire_all()

    loaded = billing_period_service.get_billing_period_by_id(
        db_session, hr_context, data.id
    )
    assert set(loaded.sales_persons[0].values) == {
        "overall",
        "custom_extra_hours:Training",
    }


def test_overview_and_latest_end_date(db_session, hr_context):
    sales_person = create_sales_person(db_session)
    assert (
        billing_period_service.get_latest_billing_period_end_date(db_session, hr_context)
        is None
    )
    billing_period_service.create_billing_period(
        db_session, hr_context, make_period(sales_person.id)
    )
    billing_period_service.create_billing_period(
        db_session,
        hr_context,
        make_period(sales_person.id, date(2024, 2, 1), date(2024, 2, 29)),
    )

    overview = billing_period_service.get_billing_period_overview(db_session, hr_context)
    assert [p.end_date for p in overview] == [date(2024, 2, 29), date(2024, 1, 31)]
    assert billing_period_service.get_latest_billing_period_end_date(
        db_session, hr_context
    ) == date(2024, 2, 29)


def test_delete_is_soft(db_session, hr_context):
    sales_person = create_sales_person(db_session)
    data = make_period(sales_person.id)
    period = billing_period_service.create_billing_period(db_session, hr_context, data)

    billing_period_service.delete_billing_period(db_session, hr_context, data.id)

    db_session.refresh(period)
    assert period.deleted_at is not None
    assert period.deleted_by == "hr"
    assert all(row.deleted_at is not None for row in period.values)
    with pytest.raises(EntityNotFoundError):
        billing_period_service.get_billing_period_by_id(db_session, hr_context, data.id)
    assert billing_period_service.get_billing_period_overview(db_session, hr_context) == []
    assert (
        billing_period_service.get_latest_billing_period_end_date(db_session, hr_context)
        is None
    )


def test_delete_unknown_billing_period(db_session, hr_context):
    with pytest.raises(EntityNotFoundError):
        billing_period_service.delete_billing_period(
            db_session, hr_context, uuid.uuid4()
        )


def test_clear_all_billing_periods(db_session, hr_context):
    sales_person = create_sales_person(db_session)
    billing_period_service.create_billing_period(
        db_session, hr_context, make_period(sales_person.id)
    )
    billing_period_service.create_billing_period(
        db_session,
        hr_context,
        make_period(sales_person.id, date(2024, 2, 1), date(2024, 2, 29)),
    )

    assert billing_period_service.clear_all_billing_periods(db_session, hr_context) == 2
    assert billing_period_service.get_billing_period_overview(db_session, hr_context) == []


def test_requires_hr(db_session, sales_context):
    with pytest.raises(ForbiddenError):
        billing_period_service.get_billing_period_overview(db_session, sales_context)
    with pytest.raises(ForbiddenError):
        billing_period_service.get_latest_billing_period_end_date(
            db_session, sales_context
        )
    with pytest.raises(ForbiddenError):
        billing_period_service.clear_all_billing_periods(db_session, sales_context)
