"""
Tests for the trip operations.
"""
from datetime import date

import pytest

from trip_planner.core.errors import NotFoundError, ValidationError
from trip_planner.services import trip_service, expense_service


def test_create_trip(store, trip_input):
    """Test trip creation."""
    result = trip_service.create_trip(store, trip_input)

    assert result.id is not None
    assert result.name == "Test Trip"
    assert result.destination == "Tokyo, Japan"
    assert result.start_date == date(2024, 6, 1)
    assert result.end_date == date(2024, 6, 10)
    assert result.description == "A wonderful trip to Tokyo"
    assert result.participants == "John, Jane, Bob"
    assert result.created_at == result.updated_at


def test_create_trip_persists(store, trip_input):
    """Test the stored record equals the returned one."""
    result = trip_service.create_trip(store, trip_input)

    assert trip_service.get_trip_by_id(store, result.id) == result


def test_create_trip_with_null_optionals(store, trip_input):
    trip_input.pop("description")
    trip_input["participants"] = None

    result = trip_service.create_trip(store, trip_input)

    assert result.description is None
    assert result.participants is None


def test_create_trip_same_day(store, trip_input):
    trip_input["end_date"] = trip_input["start_date"]

    result = trip_service.create_trip(store, trip_input)

    assert result.start_date == result.end_date


def test_create_trip_rejects_inverted_dates(store, trip_input):
    """Test trip creation fails when end_date precedes start_date."""
    trip_input["end_date"] = "2024-05-31"

    with pytest.raises(ValidationError) as exc_info:
        trip_service.create_trip(store, trip_input)

    assert exc_info.value.errors[0]["field"] == "end_date"
    assert trip_service.get_trips(store) == []


@pytest.mark.parametrize("field", ["name", "destination"])
def test_create_trip_rejects_empty_text(store, trip_input, field):
    trip_input[field] = ""

    with pytest.raises(ValidationError) as exc_info:
        trip_service.create_trip(store, trip_input)

    assert exc_info.value.errors[0]["field"] == field


def test_get_trips_empty(store):
    assert trip_service.get_trips(store) == []


def test_get_trips_newest_first(store, trip_input):
    first = trip_service.create_trip(store, trip_input)
    second = trip_service.create_trip(store, {**trip_input, "name": "Second Trip"})

    trips = trip_service.get_trips(store)

    assert [t.id for t in trips] == [second.id, first.id]


def test_get_trip_by_id_missing(store):
    assert trip_service.get_trip_by_id(store, 999) is None


def test_update_trip_partial(store, trip):
    """Test only the supplied fields change."""
    result = trip_service.update_trip(store, {"id": trip.id, "name": "Renamed"})

    assert result.name == "Renamed"
    assert result.destination == trip.destination
    assert result.start_date == trip.start_date
    assert result.end_date == trip.end_date
    assert result.description == trip.description
    assert result.created_at == trip.created_at
    assert result.updated_at > trip.updated_at


def test_update_trip_clears_nullable_field(store, trip):
    result = trip_service.update_trip(store, {"id": trip.id, "description": None})

    assert result.description is None
    assert result.participants == trip.participants


def test_update_trip_rejects_null_name(store, trip):
    with pytest.raises(ValidationError):
        trip_service.update_trip(store, {"id": trip.id, "name": None})


def test_update_trip_rejects_inverted_supplied_dates(store, trip):
    with pytest.raises(ValidationError):
        trip_service.update_trip(store, {
            "id": trip.id,
            "start_date": "2024-07-10",
            "end_date": "2024-07-01",
        })


def test_update_trip_checks_against_stored_date(store, trip):
    """Test a lone end_date is checked against the stored start_date."""
    with pytest.raises(ValidationError) as exc_info:
        trip_service.update_trip(store, {"id": trip.id, "end_date": "2024-05-01"})

    assert exc_info.value.errors[0]["field"] == "end_date"
    assert trip_service.get_trip_by_id(store, trip.id).end_date == date(2024, 6, 10)


def test_update_trip_moves_whole_range(store, trip):
    result = trip_service.update_trip(store, {
        "id": trip.id,
        "start_date": "2025-01-01",
        "end_date": "2025-01-05",
    })

    assert result.start_date == date(2025, 1, 1)
    assert result.end_date == date(2025, 1, 5)


def test_update_trip_not_found(store):
    with pytest.raises(NotFoundError) as exc_info:
        trip_service.update_trip(store, {"id": 999, "name": "Nope"})

    assert "999" in str(exc_info.value)


def test_delete_trip(store, trip):
    result = trip_service.delete_trip(store, {"id": trip.id})

    assert result.success is True
    assert trip_service.get_trip_by_id(store, trip.id) is None


def test_delete_trip_missing(store):
    """Test deleting an absent trip reports failure instead of raising."""
    assert trip_service.delete_trip(store, {"id": 999}).success is False


def test_delete_trip_cascades_to_expenses(store, trip, expense_input):
    """Test the trip's expenses disappear with it."""
    expense_ids = [
        expense_service.create_expense(store, {**expense_input, "name": f"Expense {i}"}).id
        for i in range(3)
    ]

    assert trip_service.delete_trip(store, {"id": trip.id}).success is True

    assert expense_service.get_expenses_by_trip(store, {"trip_id": trip.id}) == []
    for expense_id in expense_ids:
        assert expense_service.get_expense_by_id(store, expense_id) is None


def test_delete_trip_rejects_non_positive_id(store):
    with pytest.raises(ValidationError):
        trip_service.delete_trip(store, {"id": 0})


def test_create_trip_accepts_iso_datetime_strings(store, trip_input):
    """Test datetime strings with a time of day are reduced to their date."""
    trip_input["start_date"] = "2024-06-01T10:30:00.000Z"
    trip_input["end_date"] = "2024-06-10T10:30:00.000Z"

    result = trip_service.create_trip(store, trip_input)

    assert result.start_date == date(2024, 6, 1)
    assert result.end_date == date(2024, 6, 10)


def test_update_trip_accepts_iso_datetime_string(store, trip):
    result = trip_service.update_trip(store, {"id": trip.id, "end_date": "2024-06-12T18:45:00Z"})

    assert result.end_date == date(2024, 6, 12)
