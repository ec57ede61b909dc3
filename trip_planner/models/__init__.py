"""Models package - Import all models for SQLAlchemy registration."""
from trip_planner.models.trip import Trip
from trip_planner.models.expense import Expense, ExpenseCategory

__all__ = [
    "Trip",
    "Expense",
    "ExpenseCategory",
]
