# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Render billing periods through user supplied text templates."""

import uuid
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError, Undefined
from jinja2.exceptions import SecurityError
from jinja2.sandbox import ImmutableSandboxedEnvironment

from src.exceptions import ValidationError
from src.services.billing_period_service import BillingPeriodData
from src.services.report_generator import value_type_label

DEFAULT_TEMPLATE = """\
Billing period {{ billing_period.start_date }} - {{ billing_period.end_date }}
{% for person in sales_persons %}
{{ person.name }}
{%- for value_type, value in person.metrics.items() %}
  {{ value_type | label }}: {{ value.delta | hours }} \
(YTD {{ value.ytd_to | hours }}, year {{ value.full_year | hours }})
{%- endfor %}
{% endfor %}"""


def format_hours(value: Any) -> str:
    """Jinja2 filter printing hours with two decimals."""
    if value is None or isinstance(value, Undefined):
        return ""
    return f"{float(value):.2f}"


def register_filters(env: Environment) -> None:
    env.filters["hours"] = format_hours
    env.filters["label"] = value_type_label


def build_context(
    billing_period: BillingPeriodData, sales_person_names: dict[uuid.UUID, str]
) -> dict[str, Any]:
    """Plain dict context exposed to templates."""
    sales_persons = []
    for person in billing_period.sales_persons:
        sales_persons.append(
            {
                "id": str(person.sales_person_id),
                "name": sales_person_names.get(
                    person.sales_person_id, str(person.sales_person_id)
                ),
                "metrics": {
                    value_type: {
                        "delta": value.value_delta,
                        "ytd_from": value.value_ytd_from,
                        "ytd_to": value.value_ytd_to,
                        "full_year": value.value_full_year,
                    }
                    for value_type, value in sorted(person.values.items())
                },
            }
        )
    sales_persons.sort(key=lambda p: p["name"])
    return {
        "billing_period": {
            "id": str(billing_period.id),
            "start_date": billing_period.start_date.isoformat(),
            "end_date": billing_period.end_date.isoformat(),
            "created_by": billing_period.created_by,
        },
        "sales_persons": sales_persons,
    }


def render_billing_period(
    template: str,
    billing_period: BillingPeriodData,
    sales_person_names: dict[uuid.UUID, str],
) -> str:
    """Render a billing period in a sandbox. Template errors raise ValidationError."""
    jinja_env = ImmutableSandboxedEnvironment(
        undefined=StrictUndefined, autoescape=False  # noqa: S701
    )
    register_filters(jinja_env)
    try:
        return jinja_env.from_string(template).render(
            **build_context(billing_period, sales_person_names)
        )
    except (TemplateError, SecurityError) as e:
        raise ValidationError(f"Invalid billing report template: {e}") from e
