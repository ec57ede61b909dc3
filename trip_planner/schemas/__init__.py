"""Pydantic schemas - request and response shapes."""
from trip_planner.schemas.common import DeleteResult, IdInput, TripIdInput
from trip_planner.schemas.trip import TripCreate, TripUpdate, TripResponse
from trip_planner.schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse

__all__ = [
    "DeleteResult",
    "IdInput",
    "TripIdInput",
    "TripCreate",
    "TripUpdate",
    "TripResponse",
    "ExpenseCreate",
    "ExpenseUpdate",
    "ExpenseResponse",
]
