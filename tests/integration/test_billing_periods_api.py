# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for billing period API endpoints."""

import io
import uuid

import pytest
from openpyxl import load_workbook

from tests.factories import (
    book_weeks,
    create_contract,
    create_sales_person,
    create_weekday_slots,
)


@pytest.fixture
def employee(db_session):
    sales_person = create_sales_person(db_session, "Alice")
    create_contract(db_session, sales_person)
    slots = create_weekday_slots(db_session)
    book_weeks(db_session, sales_person, slots, 2024, range(1, 14))
    return sales_person


def create_period(client, end_date: str) -> dict:
    response = client.post("/api/v1/billing-periods", json={"end_date": end_date})
    assert response.status_code == 201
    return response.json()


class TestCreateBillingPeriod:
    """Tests for POST /api/v1/billing-periods endpoint."""

    def test_requires_authentication(self, client):
        response = client.post("/api/v1/billing-periods", json={"end_date": "2024-03-31"})
        assert response.status_code == 401

    def test_requires_hr(self, sales_client):
        response = sales_client.post(
            "/api/v1/billing-periods", json={"end_date": "2024-03-31"}
        )
        assert response.status_code == 403

    def test_create(self, hr_client, employee):
        data = create_period(hr_client, "2024-03-31")

        assert data["start_date"] == "1970-01-01"
        assert data["end_date"] == "2024-03-31"
        assert data["created_by"] == "hruser"
        values = data["sales_persons"][0]["values"]
        assert data["sales_persons"][0]["sales_person_id"] == str(employee.id)
        assert values["overall"]["value_delta"] == pytest.approx(13 * 40)
        assert values["balance"]["value_delta"] == pytest.approx(0.0)

    def test_end_before_start(self, hr_client, employee):
        create_period(hr_client, "2024-03-31")
        response = hr_client.post(
            "/api/v1/billing-periods", json={"end_date": "2024-03-01"}
        )
        assert response.status_code == 422


class TestReadBillingPeriods:
    """Tests for listing, reading and deleting billing periods."""

    def test_list_newest_first(self, hr_client, employee):
        create_period(hr_client, "2024-01-31")
        create_period(hr_client, "2024-02-29")

        response = hr_client.get("/api/v1/billing-periods")
        assert response.status_code == 200
        assert [p["end_date"] for p in response.json()] == ["2024-02-29", "2024-01-31"]

    def test_get(self, hr_client, employee):
        created = create_period(hr_client, "2024-01-31")
        response = hr_client.get(f"/api/v1/billing-periods/{created['id']}")
        assert response.status_code == 200
        assert response.json()["id"] == created["id"]

    def test_get_not_found(self, hr_client):
        response = hr_client.get(f"/api/v1/billing-periods/{uuid.uuid4()}")
        assert response.status_code == 404

    def test_delete(self, hr_client, employee):
        created = create_period(hr_client, "2024-01-31")

        response = hr_client.delete(f"/api/v1/billing-periods/{created['id']}")
        assert response.status_code == 200

        response = hr_client.get(f"/api/v1/billing-periods/{created['id']}")
        assert response.status_code == 404
        next_period = create_period(hr_client, "2024-01-31")
        assert next_period["start_date"] == "1970-01-01"


class TestBillingPeriodOutput:
    """Tests for export and template rendering."""

    def test_export(self, hr_client, employee):
        created = create_period(hr_client, "2024-03-31")

        response = hr_client.get(f"/api/v1/billing-periods/{created['id']}/export")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith(
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )
        assert "billing_period_1970_01_01_2024_03_31.xlsx" in response.headers[
            "content-disposition"
        ]
        ws = load_workbook(io.BytesIO(response.content)).active
        assert ws["A6"].value == "Alice"

    def test_render_default_template(self, hr_client, employee):
        created = create_period(hr_client, "2024-03-31")

        response = hr_client.post(
            f"/api/v1/billing-periods/{created['id']}/render", json={}
        )
        assert response.status_code == 200
        content = response.json()["content"]
        assert "Alice" in content
        assert "Overall hours: 520.00" in content

    def test_render_invalid_template(self, hr_client, employee):
        created = create_period(hr_client, "2024-03-31")

        response = hr_client.post(
            f"/api/v1/billing-periods/{created['id']}/render",
            json={"template": "{{ nothing.here }}"},
        )
        assert response.status_code == 422
