# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for ISO week helpers."""

from datetime import date

import pytest

from src.exceptions import CalculationError
from src.week_calendar import (
    CalendarWeek,
    DayOfWeek,
    iso_week,
    iso_week_date,
    iter_weeks,
    resolve_virtual_week,
    weeks_in_year,
)


@pytest.mark.parametrize(
    "year,expected", [(2020, 53), (2021, 52), (2024, 52), (2026, 53)]
)
def test_weeks_in_year(year, expected):
    assert weeks_in_year(year) == expected


def test_iso_week_date():
    assert iso_week_date(2024, 1, DayOfWeek.MONDAY) == date(2024, 1, 1)
    assert iso_week_date(2025, 1, DayOfWeek.MONDAY) == date(2024, 12, 30)
    assert iso_week_date(2020, 53, DayOfWeek.SUNDAY) == date(2021, 1, 3)


def test_iso_week_date_invalid_week():
    with pytest.raises(CalculationError):
        iso_week_date(2024, 53, DayOfWeek.MONDAY)


def test_iso_week_of_boundary_dates():
    assert iso_week(date(2024, 12, 30)) == CalendarWeek(2025, 1)
    assert iso_week(date(2021, 1, 1)) == CalendarWeek(2020, 53)


def test_calendar_week_ordering_and_next():
    assert CalendarWeek(2024, 52) < CalendarWeek(2025, 1)
    assert CalendarWeek(2024, 52).next() == CalendarWeek(2025, 1)
    assert CalendarWeek(2020, 52).next() == CalendarWeek(2020, 53)


def test_iter_weeks_crosses_year():
    weeks = list(iter_weeks(CalendarWeek(2020, 52), CalendarWeek(2021, 2)))
    assert weeks == [
        CalendarWeek(2020, 52),
        CalendarWeek(2020, 53),
        CalendarWeek(2021, 1),
        CalendarWeek(2021, 2),
    ]


def test_iter_weeks_empty_when_reversed():
    assert list(iter_weeks(CalendarWeek(2024, 5), CalendarWeek(2024, 4))) == []


def test_day_of_week_from_date():
    assert DayOfWeek.from_date(date(2024, 1, 3)) == DayOfWeek.WEDNESDAY


class TestResolveVirtualWeek:
    def test_week_zero_is_last_week_of_previous_year(self):
        assert resolve_virtual_week(0, 2021) == CalendarWeek(2020, 53)
        assert resolve_virtual_week(0, 2024) == CalendarWeek(2023, 52)

    def test_week_after_last_is_first_week_of_next_year(self):
        assert resolve_virtual_week(53, 2024) == CalendarWeek(2025, 1)
        assert resolve_virtual_week(54, 2020) == CalendarWeek(2021, 1)

    def test_regular_week(self):
        assert resolve_virtual_week(10, 2024) == CalendarWeek(2024, 10)

    def test_out_of_range(self):
        with pytest.raises(CalculationError):
            resolve_virtual_week(54, 2024)
        with pytest.raises(CalculationError):
            resolve_virtual_week(-1, 2024)
