"""
Tests for the validation layer.
"""
from datetime import date, datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from trip_planner.core.errors import ValidationError
from trip_planner.schemas.common import parse_input
from trip_planner.schemas.expense import ExpenseResponse, ExpenseUpdate
from trip_planner.schemas.trip import TripCreate, TripUpdate


def test_trip_create_accepts_datetimes():
    trip = TripCreate(
        name="Trip",
        destination="Lisbon",
        start_date=datetime(2024, 3, 1, 15, 30),
        end_date=date(2024, 3, 4),
    )

    assert trip.start_date == date(2024, 3, 1)
    assert trip.description is None


def test_trip_update_is_sparse():
    update = TripUpdate(id=1, description=None, name="New")

    assert update.changes() == {"description": None, "name": "New"}


def test_trip_update_single_date_not_checked():
    """A lone date cannot be checked without the stored record."""
    update = TripUpdate(id=1, end_date="1999-01-01")

    assert update.changes() == {"end_date": date(1999, 1, 1)}


def test_trip_update_requires_id():
    with pytest.raises(PydanticValidationError):
        TripUpdate(name="No id")


def test_expense_update_is_sparse():
    update = ExpenseUpdate(id=3, amount=123.45)

    assert update.changes() == {"amount": Decimal("123.45")}


def test_expense_response_serializes_amount_as_number():
    response = ExpenseResponse(
        id=1,
        name="Lunch",
        amount=Decimal("49.99"),
        currency="USD",
        expense_date=date(2024, 1, 1),
        category="Food",
        trip_id=1,
        created_at=datetime(2024, 1, 1),
        updated_at=datetime(2024, 1, 1),
    )

    assert response.model_dump()["amount"] == Decimal("49.99")
    assert response.model_dump(mode="json")["amount"] == 49.99


def test_parse_input_reports_field_paths():
    with pytest.raises(ValidationError) as exc_info:
        parse_input(TripCreate, {"name": "", "destination": "X", "start_date": "2024-01-01"})

    fields = {e["field"] for e in exc_info.value.errors}
    assert fields == {"name", "end_date"}


def test_parse_input_passes_instances_through():
    trip = TripCreate(name="A", destination="B", start_date="2024-01-01", end_date="2024-01-02")

    assert parse_input(TripCreate, trip) is trip


def test_offset_datetime_string_uses_utc_date():
    """Test an aware datetime is taken as its UTC calendar date."""
    trip = TripCreate(
        name="Trip",
        destination="Lima",
        start_date="2024-06-01T22:00:00-05:00",
        end_date="2024-06-05",
    )

    assert trip.start_date == date(2024, 6, 2)


def test_unparseable_date_string_still_rejected():
    with pytest.raises(PydanticValidationError):
        TripCreate(name="Trip", destination="Lima", start_date="June first, 2024", end_date="2024-06-05")
