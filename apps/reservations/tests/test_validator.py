"""Unit tests for reservation validation and pricing."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from shared.domain.exceptions import InvalidDeskError, InvalidRangeError
from apps.reservations.domain.validator import ReservationValidator
from apps.spaces.domain.entities import Availability, Space
from apps.spaces.tests.fakes import week


def make_space(capacity: int = 5, daily_rate: str = "50.00", open_days=(1, 2, 3, 4, 5)) -> Space:
    return Space(
        id=1,
        name="Loft",
        description="",
        capacity=capacity,
        owner_id=1,
        daily_rate=Decimal(daily_rate),
        availabilities=[Availability.from_input(entry) for entry in week(open_days)],
    )


@pytest.mark.parametrize("desk", [1, 3, 5])
def test_desk_within_capacity_is_accepted(desk):
    ReservationValidator.validate(make_space(), desk, date(2024, 6, 3), date(2024, 6, 4))


@pytest.mark.parametrize("desk", [0, -1, 6, None])
def test_desk_outside_capacity_is_rejected(desk):
    with pytest.raises(InvalidDeskError):
        ReservationValidator.validate(make_space(), desk, date(2024, 6, 3), date(2024, 6, 4))


def test_reversed_dates_are_rejected_before_desk_check():
    with pytest.raises(InvalidRangeError):
        ReservationValidator.validate(make_space(), 99, date(2024, 6, 5), date(2024, 6, 1))


def test_range_without_open_days_is_accepted():
    weekend = (date(2024, 6, 1), date(2024, 6, 2))

    ReservationValidator.validate(make_space(), 1, *weekend)

    assert ReservationValidator.compute_price(make_space(), *weekend) == Decimal("0.00")


def test_price_is_rate_times_open_days():
    price = ReservationValidator.compute_price(make_space(), date(2024, 6, 1), date(2024, 6, 5))

    assert price == Decimal("150.00")


def test_price_is_rounded_to_cents():
    space = make_space(daily_rate="33.335", open_days=(1,))

    assert ReservationValidator.compute_price(space, date(2024, 6, 3), date(2024, 6, 3)) == Decimal("33.34")
