# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for billing_report_renderer."""

import uuid
from datetime import date

import pytest

from src.exceptions import ValidationError
from src.services.billing_period_service import (
    BillingPeriodData,
    BillingPeriodSalesPersonValues,
    BillingPeriodValue,
)
from src.services.billing_report_renderer import (
    DEFAULT_TEMPLATE,
    format_hours,
    render_billing_period,
)

ALICE = uuid.uuid4()


@pytest.fixture
def billing_period() -> BillingPeriodData:
    return BillingPeriodData(
        id=uuid.uuid4(),
        start_date=date(2024, 4, 1),
        end_date=date(2024, 6, 30),
        created_by="hr",
        sales_persons=[
            BillingPeriodSalesPersonValues(
                sales_person_id=ALICE,
                values={
                    "overall": BillingPeriodValue(419.0, 520.0, 939.0, 1800.5),
                },
            )
        ],
    )


def test_format_hours():
    assert format_hours(1.005) == "1.00"
    assert format_hours(8) == "8.00"
    assert format_hours(None) == ""


def test_render_default_template(billing_period):
    content = render_billing_period(DEFAULT_TEMPLATE, billing_period, {ALICE: "Alice"})

    assert "Billing period 2024-04-01 - 2024-06-30" in content
    assert "Alice" in content
    assert "Overall hours: 419.00 (YTD 939.00, year 1800.50)" in content


def test_render_custom_template(billing_period):
    template = (
        "{% for p in sales_persons %}{{ p.name }}="
        "{{ p.metrics['overall'].delta | hours }}{% endfor %}"
    )
    assert render_billing_period(template, billing_period, {ALICE: "Alice"}) == (
        "Alice=419.00"
    )


def test_undefined_variable_is_rejected(billing_period):
    with pytest.raises(ValidationError):
        render_billing_period("{{ missing.value }}", billing_period, {})


def test_syntax_error_is_rejected(billing_period):
    with pytest.raises(ValidationError):
        render_billing_period("{% for %}", billing_period, {})


@pytest.mark.parametrize(
    "template",
    [
        "{{ cycler.__init__.__globals__.os }}",
        "{{ ''.__class__.__mro__[1].__subclasses__() | length }}",
    ],
)
def test_python_internals_are_not_reachable(billing_period, template):
    with pytest.raises(ValidationError):
        render_billing_period(template, billing_period, {})


def test_context_cannot_be_mutated(billing_period):
    with pytest.raises(ValidationError):
        render_billing_period(
            "{{ sales_persons.append(1) }}", billing_period, {ALICE: "Alice"}
        )
