"""Operation layer: one function per use case, each taking the Store first."""
from trip_planner.services.trip_service import (
    create_trip, get_trips, get_trip_by_id, update_trip, delete_trip
)
from trip_planner.services.expense_service import (
    create_expense, get_expenses, get_expenses_by_trip, get_expense_by_id,
    update_expense, delete_expense
)

__all__ = [
    "create_trip",
    "get_trips",
    "get_trip_by_id",
    "update_trip",
    "delete_trip",
    "create_expense",
    "get_expenses",
    "get_expenses_by_trip",
    "get_expense_by_id",
    "update_expense",
    "delete_expense",
]
