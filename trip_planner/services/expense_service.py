"""
Expense service: expenses scoped to a trip.
"""
import logging
from typing import List, Mapping, Optional, Union

from sqlalchemy.orm import Session

from trip_planner.core.errors import NotFoundError
from trip_planner.core.logging import log_failures
from trip_planner.core.utils import next_timestamp, utcnow
from trip_planner.db.session import Store
from trip_planner.models.expense import Expense
from trip_planner.models.trip import Trip
from trip_planner.schemas.common import DeleteResult, IdInput, TripIdInput, parse_input
from trip_planner.schemas.expense import ExpenseCreate, ExpenseResponse, ExpenseUpdate

logger = logging.getLogger(__name__)


def ensure_trip_exists(trip_id: int, db: Session) -> None:
    """Raise NotFoundError naming ``trip_id`` if there is no such trip."""
    exists = db.query(Trip.id).filter(Trip.id == trip_id).first()
    if not exists:
        raise NotFoundError("Trip", trip_id)


@log_failures("create_expense")
def create_expense(store: Store, data: Union[ExpenseCreate, Mapping]) -> ExpenseResponse:
    """Validate and insert an expense for an existing trip."""
    expense_data = parse_input(ExpenseCreate, data)
    now = utcnow()

    with store.transaction() as db:
        ensure_trip_exists(expense_data.trip_id, db)

        expense = Expense(**expense_data.model_dump(), created_at=now, updated_at=now)
        db.add(expense)
        db.flush()
        result = ExpenseResponse.model_validate(expense)

    logger.info(f"Created expense {result.id} for trip {result.trip_id}")
    return result


@log_failures("get_expenses")
def get_expenses(store: Store) -> List[ExpenseResponse]:
    """All expenses, latest expense_date first."""
    with store.transaction() as db:
        expenses = db.query(Expense).order_by(
            Expense.expense_date.desc(), Expense.id.desc()
        ).all()
        return [ExpenseResponse.model_validate(e) for e in expenses]


@log_failures("get_expenses_by_trip")
def get_expenses_by_trip(store: Store, data: Union[TripIdInput, Mapping]) -> List[ExpenseResponse]:
    """Expenses of one trip, earliest expense_date first.

    An unknown trip yields an empty list, same as a trip without expenses.
    """
    query = parse_input(TripIdInput, data)

    with store.transaction() as db:
        expenses = db.query(Expense).filter(
            Expense.trip_id == query.trip_id
        ).order_by(Expense.expense_date.asc(), Expense.id.asc()).all()
        return [ExpenseResponse.model_validate(e) for e in expenses]


@log_failures("get_expense_by_id")
def get_expense_by_id(store: Store, expense_id: int) -> Optional[ExpenseResponse]:
    with store.transaction() as db:
        expense = db.query(Expense).filter(Expense.id == expense_id).first()
        return ExpenseResponse.model_validate(expense) if expense else None


@log_failures("update_expense")
def update_expense(store: Store, data: Union[ExpenseUpdate, Mapping]) -> ExpenseResponse:
    """Apply the supplied fields to an existing expense."""
    expense_data = parse_input(ExpenseUpdate, data)
    changes = expense_data.changes()

    with store.transaction() as db:
        expense = db.query(Expense).filter(Expense.id == expense_data.id).first()
        if not expense:
            raise NotFoundError("Expense", expense_data.id)

        if changes.get("trip_id"):
            ensure_trip_exists(changes["trip_id"], db)

        for field, value in changes.items():
            setattr(expense, field, value)
        expense.updated_at = next_timestamp(expense.updated_at)
        db.flush()
        result = ExpenseResponse.model_validate(expense)

    logger.info(f"Updated expense {result.id} ({', '.join(changes) or 'no fields'})")
    return result


@log_failures("delete_expense")
def delete_expense(store: Store, data: Union[IdInput, Mapping]) -> DeleteResult:
    target = parse_input(IdInput, data)

    with store.transaction() as db:
        deleted = db.query(Expense).filter(Expense.id == target.id).delete(synchronize_session=False)

    if deleted:
        logger.info(f"Deleted expense {target.id}")
    return DeleteResult(success=deleted > 0)
