"""
Pydantic schemas for Expense entity.
"""
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from typing import Optional
from datetime import date, datetime
from decimal import Decimal
from trip_planner.core.utils import coerce_date, quantize_money
from trip_planner.models.expense import ExpenseCategory
from trip_planner.schemas.common import reject_null

# NUMERIC(10, 2) upper bound
MAX_AMOUNT = Decimal("99999999.99")


def _validate_amount(v: Decimal) -> Decimal:
    if v > MAX_AMOUNT:
        raise ValueError(f"Amount must not exceed {MAX_AMOUNT}")
    if v <= 0 or quantize_money(v) <= 0:
        raise ValueError("Amount must be positive")
    return quantize_money(v)


class ExpenseCreate(BaseModel):
    """Schema for expense creation."""
    name: str = Field(..., min_length=1)
    amount: Decimal
    currency: str = Field(..., min_length=1)
    expense_date: date
    category: ExpenseCategory
    trip_id: int = Field(..., gt=0)

    @field_validator("amount", mode="before")
    @classmethod
    def float_amount_via_str(cls, v):
        # Decimal(49.99) would carry the binary float error
        if isinstance(v, float):
            return str(v)
        return v

    @field_validator("amount")
    @classmethod
    def positive_amount(cls, v: Decimal) -> Decimal:
        return _validate_amount(v)

    @field_validator("expense_date", mode="before")
    @classmethod
    def drop_time(cls, v):
        return coerce_date(v)


class ExpenseUpdate(BaseModel):
    """Schema for expense update. Only the fields that are set get applied."""
    id: int
    name: Optional[str] = Field(None, min_length=1)
    amount: Optional[Decimal] = None
    currency: Optional[str] = Field(None, min_length=1)
    expense_date: Optional[date] = None
    category: Optional[ExpenseCategory] = None
    trip_id: Optional[int] = Field(None, gt=0)

    @field_validator("amount", mode="before")
    @classmethod
    def float_amount_via_str(cls, v):
        if isinstance(v, float):
            return str(v)
        return v

    @field_validator("amount")
    @classmethod
    def positive_amount(cls, v: Optional[Decimal]) -> Decimal:
        return _validate_amount(reject_null(v))

    @field_validator("expense_date", mode="before")
    @classmethod
    def drop_time(cls, v):
        return coerce_date(v)

    @field_validator("name", "currency", "expense_date", "category", "trip_id")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    def changes(self) -> dict:
        """Sparse map of the supplied fields, without the id."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class ExpenseResponse(BaseModel):
    """Schema for expense response."""
    id: int
    name: str
    amount: Decimal
    currency: str
    expense_date: date
    category: ExpenseCategory
    trip_id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("amount")
    @classmethod
    def two_places(cls, v: Decimal) -> Decimal:
        return quantize_money(v)

    @field_serializer("amount", when_used="json")
    def amount_as_number(self, v: Decimal) -> float:
        return float(v)
