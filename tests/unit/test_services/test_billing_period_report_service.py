# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for BillingPeriodReportService."""

from datetime import date

import pytest

from src.exceptions import ForbiddenError, ValidationError
from src.models.enums import BillingPeriodValueType, ExtraHoursCategory
from src.services import billing_period_service
from src.services.billing_period_report_service import (
    EPOCH,
    BillingPeriodReportService,
)
from tests.factories import (
    book_weeks,
    create_contract,
    create_custom_extra_hours,
    create_extra_hours,
    create_sales_person,
    create_weekday_slots,
)


@pytest.fixture
def employee(db_session):
    sales_person = create_sales_person(db_session, "Alice")
    create_contract(db_session, sales_person)
    slots = create_weekday_slots(db_session)
    # Weeks 1 to 26 of 2024 booked, one day per week missing from week 14 on
    book_weeks(db_session, sales_person, slots[:4], 2024, range(1, 27))
    book_weeks(db_session, sales_person, slots[4:], 2024, range(1, 14))
    create_extra_hours(
        db_session, sales_person, 8.0, ExtraHoursCategory.VACATION, date(2024, 4, 5)
    )
    create_extra_hours(
        db_session, sales_person, 3.0, ExtraHoursCategory.EXTRA_WORK, date(2024, 5, 11)
    )
    return sales_person


def test_first_period_starts_at_epoch(db_session, hr_context):
    service = BillingPeriodReportService(db_session)
    assert service.next_start_date(hr_context) == EPOCH


def test_next_period_starts_after_latest(db_session, hr_context, employee):
    service = BillingPeriodReportService(db_session)
    service.build_and_persist_billing_period_report(hr_context, date(2024, 3, 31))
    assert service.next_start_date(hr_context) == date(2024, 4, 1)


def test_build_new_billing_period_values(db_session, hr_context, employee):
    service = BillingPeriodReportService(db_session)
    service.build_and_persist_billing_period_report(hr_context, date(2024, 3, 31))

    data = service.build_new_billing_period(hr_context, date(2024, 6, 30))

    assert data.start_date == date(2024, 4, 1)
    assert data.end_date == date(2024, 6, 30)
    assert [p.sales_person_id for p in data.sales_persons] == [employee.id]
    values = data.sales_persons[0].values
    assert set(values) >= {t.value for t in BillingPeriodValueType}

    overall = values[BillingPeriodValueType.OVERALL.value]
    assert overall.value_ytd_from == pytest.approx(13 * 40)
    assert overall.value_ytd_to == pytest.approx(13 * 40 + 13 * 32 + 3)
    assert overall.value_delta == pytest.approx(13 * 32 + 3)
    assert overall.value_full_year == pytest.approx(overall.value_ytd_to)
    assert values[BillingPeriodValueType.VACATION_HOURS.value].value_delta == 8.0


def test_ytd_values_add_up_to_delta(db_session, hr_context, employee):
    service = BillingPeriodReportService(db_session)
    service.build_and_persist_billing_period_report(hr_context, date(2024, 3, 31))
    data = service.build_new_billing_period(hr_context, date(2024, 6, 30))

    for value_type in (
        BillingPeriodValueType.OVERALL,
        BillingPeriodValueType.BALANCE,
        BillingPeriodValueType.EXPECTED_HOURS,
        BillingPeriodValueType.VACATION_HOURS,
        BillingPeriodValueType.EXTRA_WORK,
    ):
        value = data.sales_persons[0].values[value_type.value]
        assert value.value_ytd_to - value.value_ytd_from == pytest.approx(
            value.value_delta
        ), value_type


def test_custom_extra_hours_values(db_session, hr_context, employee):
    training = create_custom_extra_hours(db_session, "Training")
    create_extra_hours(
        db_session,
        employee,
        2.0,
        ExtraHoursCategory.CUSTOM,
        date(2024, 2, 6),
        custom=training,
    )
    service = BillingPeriodReportService(db_session)

    data = service.build_new_billing_period(hr_context, date(2024, 3, 31))

    custom = data.sales_persons[0].values["custom_extra_hours:Training"]
    assert custom.value_delta == pytest.approx(2.0)
    assert custom.value_ytd_from == 0.0
    assert custom.value_ytd_to == pytest.approx(2.0)


def test_custom_categories_with_same_name_are_summed(db_session, hr_context, employee):
    first = create_custom_extra_hours(db_session, "Training")
    second = create_custom_extra_hours(db_session, "Training")
    for custom, amount, on in ((first, 2.0, date(2024, 2, 6)), (second, 3.0, date(2024, 3, 5))):
        create_extra_hours(
            db_session, employee, amount, ExtraHoursCategory.CUSTOM, on, custom=custom
        )
    service = BillingPeriodReportService(db_session)

    data = service.build_new_billing_period(hr_context, date(2024, 3, 31))

    custom = data.sales_persons[0].values["custom_extra_hours:Training"]
    assert custom.value_delta == pytest.approx(5.0)
    assert custom.value_ytd_to == pytest.approx(5.0)
    assert custom.value_full_year == pytest.approx(5.0)


def test_persisted_period_can_be_read(db_session, hr_context, employee):
    service = BillingPeriodReportService(db_session)
    period_id = service.build_and_persist_billing_period_report(
        hr_context, date(2024, 3, 31)
    )

    loaded = billing_period_service.get_billing_period_by_id(
        db_session, hr_context, period_id
    )
    assert loaded.start_date == EPOCH
    assert loaded.created_by == "hr"
    assert loaded.sales_persons[0].values["overall"].value_delta == pytest.approx(
        13 * 40
    )


def test_end_before_start_is_rejected(db_session, hr_context, employee):
    service = BillingPeriodReportService(db_session)
    service.build_and_persist_billing_period_report(hr_context, date(2024, 3, 31))

    with pytest.raises(ValidationError):
        service.build_new_billing_period(hr_context, date(2024, 3, 15))


def test_deleting_latest_period_reopens_its_range(db_session, hr_context, employee):
    service = BillingPeriodReportService(db_session)
    service.build_and_persist_billing_period_report(hr_context, date(2024, 3, 31))
    second = service.build_and_persist_billing_period_report(
        hr_context, date(2024, 6, 30)
    )

    billing_period_service.delete_billing_period(db_session, hr_context, second)

    assert service.next_start_date(hr_context) == date(2024, 4, 1)


def test_requires_hr(db_session, sales_context):
    with pytest.raises(ForbiddenError):
        BillingPeriodReportService(db_session).build_new_billing_period(
            sales_context, date(2024, 3, 31)
        )
