"""
Expense procedures.
"""
from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from trip_planner.api.dependencies import get_store
from trip_planner.db.session import Store
from trip_planner.schemas.common import DeleteResult, IdInput, TripIdInput
from trip_planner.schemas.expense import ExpenseCreate, ExpenseResponse, ExpenseUpdate
from trip_planner.services import expense_service

router = APIRouter(tags=["expenses"])


@router.post("/createExpense", response_model=ExpenseResponse)
def create_expense(
    expense_data: ExpenseCreate,
    store: Store = Depends(get_store)
):
    """Create a new expense for an existing trip."""
    return expense_service.create_expense(store, expense_data)


@router.get("/getExpenses", response_model=List[ExpenseResponse])
def get_expenses(store: Store = Depends(get_store)):
    """List all expenses, latest first."""
    return expense_service.get_expenses(store)


@router.get("/getExpensesByTrip", response_model=List[ExpenseResponse])
def get_expenses_by_trip(
    trip_id: int = Query(..., gt=0),
    store: Store = Depends(get_store)
):
    """List the expenses of a trip in date order."""
    return expense_service.get_expenses_by_trip(store, TripIdInput(trip_id=trip_id))


@router.get("/getExpenseById", response_model=Optional[ExpenseResponse])
def get_expense_by_id(
    expense_id: int = Query(..., alias="id"),
    store: Store = Depends(get_store)
):
    """Get an expense, or null if it does not exist."""
    return expense_service.get_expense_by_id(store, expense_id)


@router.post("/updateExpense", response_model=ExpenseResponse)
def update_expense(
    expense_data: ExpenseUpdate,
    store: Store = Depends(get_store)
):
    """Update the supplied fields of an expense."""
    return expense_service.update_expense(store, expense_data)


@router.post("/deleteExpense", response_model=DeleteResult)
def delete_expense(
    target: IdInput,
    store: Store = Depends(get_store)
):
    """Delete an expense."""
    return expense_service.delete_expense(store, target)
