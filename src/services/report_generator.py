# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Billing period spreadsheet generator."""

import io
import uuid
from datetime import datetime
from typing import Any

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from slugify import slugify

from src.models.enums import CUSTOM_VALUE_TYPE_PREFIX, BillingPeriodValueType
from src.services.billing_period_service import BillingPeriodData

VALUE_TYPE_LABELS = {
    BillingPeriodValueType.BALANCE.value: "Balance",
    BillingPeriodValueType.OVERALL.value: "Overall hours",
    BillingPeriodValueType.EXPECTED_HOURS.value: "Expected hours",
    BillingPeriodValueType.EXTRA_WORK.value: "Extra work",
    BillingPeriodValueType.VACATION_HOURS.value: "Vacation hours",
    BillingPeriodValueType.SICK_LEAVE.value: "Sick leave",
    BillingPeriodValueType.HOLIDAY.value: "Holiday",
    BillingPeriodValueType.VACATION_DAYS.value: "Vacation days",
    BillingPeriodValueType.VACATION_ENTITLEMENT.value: "Vacation entitlement",
}


def _slugify_filename(name: str, max_length: int = 50) -> str:
    """Create a slug suitable for filenames."""
    slug = slugify(name, lowercase=True, separator="_")
    return slug[:max_length]


def _format_date(d: Any) -> str:
    if hasattr(d, "strftime"):
        return d.strftime("%Y-%m-%d")
    return str(d)


def value_type_label(value_type: str) -> str:
    """Human readable name of a stored value type."""
    if value_type.startswith(CUSTOM_VALUE_TYPE_PREFIX):
        return value_type[len(CUSTOM_VALUE_TYPE_PREFIX) :]
    return VALUE_TYPE_LABELS.get(value_type, value_type)


def _value_type_order(value_type: str) -> tuple[int, str]:
    labels = list(VALUE_TYPE_LABELS)
    if value_type in labels:
        return (labels.index(value_type), "")
    return (len(labels), value_type)


def billing_period_filename(billing_period: BillingPeriodData) -> str:
    start = _format_date(billing_period.start_date)
    end = _format_date(billing_period.end_date)
    return f"{_slugify_filename(f'billing period {start} {end}')}.xlsx"


class BillingReportGenerator:
    """Creates Excel workbooks for stored billing periods."""

    def __init__(self, sales_person_names: dict[uuid.UUID, str]) -> None:
        """Initialize the generator.

        Args:
            sales_person_names: Display names by sales person id. Unknown ids
                are shown by their id.
        """
        self.sales_person_names = sales_person_names

    def create_excel(self, billing_period: BillingPeriodData) -> bytes:
        """Create a spreadsheet with one row per sales person and value type."""
        wb = Workbook()
        ws = wb.active
        ws.title = "Billing Period"

        # Styles
        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(
            start_color="4472C4", end_color="4472C4", fill_type="solid"
        )
        header_alignment = Alignment(horizontal="center", vertical="center")
        border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        hours_format = "#,##0.00"

        ws.merge_cells("A1:F1")
        title_cell = ws["A1"]
        start = _format_date(billing_period.start_date)
        end = _format_date(billing_period.end_date)
        title_cell.value = f"Billing Period: {start} to {end}"
        title_cell.font = Font(bold=True, size=14)
        title_cell.alignment = Alignment(horizontal="center")

        ws["A2"] = f"Created by: {billing_period.created_by or 'N/A'}"
        ws["A3"] = f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}"

        headers = ["Sales person", "Value", "Period", "YTD from", "YTD to", "Full year"]
        header_row = 5
        for col, header in enumerate(headers, 1):
            cell = ws.cell(row=header_row, column=col, value=header)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = header_alignment
            cell.border = border

        persons = sorted(
            billing_period.sales_persons,
            key=lambda p: self.sales_person_names.get(
                p.sales_person_id, str(p.sales_person_id)
            ),
        )
        row = header_row
        for person in persons:
            name = self.sales_person_names.get(
                person.sales_person_id, str(person.sales_person_id)
            )
            for value_type in sorted(person.values, key=_value_type_order):
                value = person.values[value_type]
                row += 1
                ws.cell(row=row, column=1, value=name).border = border
                ws.cell(row=row, column=2, value=value_type_label(value_type)).border = (
                    border
                )
                numbers = (
                    value.value_delta,
                    value.value_ytd_from,
                    value.value_ytd_to,
                    value.value_full_year,
                )
                for col, number in enumerate(numbers, 3):
                    cell = ws.cell(row=row, column=col, value=round(number, 2))
                    cell.number_format = hours_format
                    cell.border = border

        column_widths = [28, 22, 12, 12, 12, 12]
        for col, width in enumerate(column_widths, 1):
            ws.column_dimensions[get_column_letter(col)].width = width

        output = io.BytesIO()
        wb.save(output)
        return output.getvalue()
